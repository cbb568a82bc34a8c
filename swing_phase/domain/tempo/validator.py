"""
템포 검증 Domain Logic
PhaseMarkers (contact 기준 ms) 를 생리학적 한계 + 선수별 ground truth 로 검증
"""
from typing import Optional

from swing_phase.config.settings import settings
from swing_phase.constants import tempo_params as tp
from swing_phase.schemas.tempo_dto import (
    PhaseMarkers,
    PlayerGroundTruth,
    Severity,
    TestResult,
    ValidationResult,
    Window,
)


def tempo_ratio(markers: PhaseMarkers) -> float:
    """
    템포 비율 = (LoadStart - Contact) / (FireStart - Contact)
    fire 구간이 0 이하면 0 (예외 없음)
    """
    fire_span = markers.fire_start - markers.contact
    if fire_span <= 0:
        return 0.0
    return (markers.load_start - markers.contact) / fire_span


class TempoValidator:
    """룰 기반 템포 검증 엔진 (7개 체크, 순서 고정)"""

    def __init__(
        self,
        hard_tempo_bounds: Window = tp.TEMPO_HARD_BOUNDS,
        min_separation_ms: float = settings.MARKER_MIN_SEPARATION_MS,
    ):
        self.hard_tempo_bounds = hard_tempo_bounds
        self.min_separation_ms = min_separation_ms

    def validate(
        self,
        markers: PhaseMarkers,
        ground_truth: Optional[PlayerGroundTruth] = None,
    ) -> ValidationResult:
        """
        전체 체크 실행

        Args:
            markers: 페이즈 마커
            ground_truth: 선수 프로파일 (None 이면 범용 검증)

        Returns:
            ValidationResult (overall pass + 0~100 점수)
        """
        tempo_range = ground_truth.tempo_range if ground_truth else self.hard_tempo_bounds
        results = [
            self.check_marker_ordering(markers),
            self.check_fire_duration(markers),
            self.check_load_duration(markers),
            self.check_tempo_ratio(markers, tempo_range),
            self.check_pelvis_gap(markers),
            self.check_window(
                "LoadStart", markers.load_start,
                ground_truth.load_start_window if ground_truth else None,
            ),
            self.check_window(
                "FireStart", markers.fire_start,
                ground_truth.fire_start_window if ground_truth else None,
            ),
        ]

        critical_failures = sum(1 for r in results if not r.passed and r.severity == "critical")
        warning_failures = sum(1 for r in results if not r.passed and r.severity == "warning")
        overall_pass = critical_failures == 0 and warning_failures <= tp.MAX_WARNING_FAILURES

        passed = sum(1 for r in results if r.passed)
        score = passed / len(results) * 100
        score -= critical_failures * tp.CRITICAL_WEIGHT
        score -= warning_failures * tp.WARNING_WEIGHT
        score = max(0.0, min(100.0, score))

        return ValidationResult(
            player_name=ground_truth.name if ground_truth else tp.GENERIC_PLAYER_NAME,
            overall_pass=overall_pass,
            results=results,
            score=round(score),
        )

    def check_marker_ordering(self, markers: PhaseMarkers) -> TestResult:
        """LoadStart > FireStart > Contact(=0), 각 간격 >= 최소 분리"""
        load_gap = markers.load_start - markers.fire_start
        fire_gap = markers.fire_start - markers.contact
        is_valid = (
            markers.load_start > markers.fire_start > markers.contact
            and markers.contact == 0
            and load_gap >= self.min_separation_ms
            and fire_gap >= self.min_separation_ms
        )
        return TestResult(
            test_name="Marker Ordering (LoadStart > FireStart > Contact)",
            passed=is_valid,
            expected=f"LoadStart > FireStart > 0, each >= {_fmt(self.min_separation_ms)}ms apart",
            actual=f"{_fmt(markers.load_start)} > {_fmt(markers.fire_start)} > {_fmt(markers.contact)}",
            severity="critical",
        )

    def check_fire_duration(self, markers: PhaseMarkers) -> TestResult:
        fire_duration = markers.fire_start - markers.contact
        lo, hi = tp.FIRE_DURATION_RANGE_MS
        crit_lo, crit_hi = tp.FIRE_DURATION_CRITICAL_MS
        return TestResult(
            test_name=f"Fire Duration ({lo}-{hi}ms)",
            passed=lo <= fire_duration <= hi,
            expected=f"{lo}-{hi}ms",
            actual=f"{_fmt(fire_duration)}ms",
            severity="critical" if fire_duration < crit_lo or fire_duration > crit_hi else "warning",
        )

    def check_load_duration(self, markers: PhaseMarkers) -> TestResult:
        load_duration = markers.load_start - markers.fire_start
        lo, hi = tp.LOAD_DURATION_RANGE_MS
        return TestResult(
            test_name=f"Load Duration ({lo}-{hi}ms)",
            passed=lo <= load_duration <= hi,
            expected=f"{lo}-{hi}ms",
            actual=f"{_fmt(load_duration)}ms",
            severity="critical" if load_duration < lo or load_duration > hi else "info",
        )

    def check_tempo_ratio(self, markers: PhaseMarkers, expected_range: Window) -> TestResult:
        """선수 범위 AND 생리학적 한계 동시 만족"""
        tempo = tempo_ratio(markers)
        lo, hi = expected_range
        hard_lo, hard_hi = self.hard_tempo_bounds
        in_hard = hard_lo <= tempo <= hard_hi
        midpoint = (lo + hi) / 2

        if not in_hard:
            severity: Severity = "critical"
        elif abs(tempo - midpoint) > tp.TEMPO_MIDPOINT_TOLERANCE:
            severity = "warning"
        else:
            severity = "info"

        return TestResult(
            test_name=f"Tempo Ratio ({_fmt(lo)}-{_fmt(hi)}:1)",
            passed=in_hard and lo <= tempo <= hi,
            expected=f"{_fmt(lo)}-{_fmt(hi)}:1 (hard bounds {_fmt(hard_lo)}-{_fmt(hard_hi)}:1)",
            actual=f"{tempo:.2f}:1",
            severity=severity,
        )

    def check_pelvis_gap(self, markers: PhaseMarkers) -> TestResult:
        gap = markers.fire_start - markers.pelvis_peak
        lo, hi = tp.PELVIS_GAP_RANGE_MS
        crit_lo, crit_hi = tp.PELVIS_GAP_CRITICAL_MS
        return TestResult(
            test_name=f"FireStart to Pelvis Peak Timing ({lo}-{hi}ms)",
            passed=lo <= gap <= hi,
            expected=f"{lo}-{hi}ms before pelvis peak",
            actual=f"{_fmt(gap)}ms",
            severity="critical" if gap < crit_lo or gap > crit_hi else "warning",
        )

    def check_window(self, label: str, value: float, window: Optional[Window]) -> TestResult:
        """선수별 경험적 타이밍 윈도우 (항상 warning)"""
        if window is None:
            return TestResult(
                test_name=f"{label} Window",
                passed=True,
                expected="no reference window",
                actual=f"{_fmt(value)}ms",
                severity="info",
            )

        lo, hi = window
        return TestResult(
            test_name=f"{label} Window ({_fmt(lo)}-{_fmt(hi)}ms)",
            passed=lo <= value <= hi,
            expected=f"{_fmt(lo)}-{_fmt(hi)}ms",
            actual=f"{_fmt(value)}ms",
            severity="warning",
        )


def _fmt(value: float) -> str:
    return f"{value:g}"
