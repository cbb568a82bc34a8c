"""
엣지 케이스 스위트
고정 시나리오 6개로 하드 바운드 로직이 경계값에서 기대대로 동작하는지 확인
"""
from typing import Callable, NamedTuple, Optional

from swing_phase.schemas.tempo_dto import PhaseMarkers, TestResult, ValidationResult
from swing_phase.domain.tempo.validator import TempoValidator

# 체크 인덱스 (TempoValidator.validate 결과 순서)
ORDERING, FIRE, LOAD, TEMPO, PELVIS = 0, 1, 2, 3, 4


class EdgeCase(NamedTuple):
    name: str
    markers: PhaseMarkers
    expected: str
    holds: Callable[[ValidationResult], bool]


def _check(result: ValidationResult, idx: int):
    return result.results[idx]


EDGE_CASES: tuple[EdgeCase, ...] = (
    EdgeCase(
        name="Aggressive Tempo (700/380ms)",
        markers=PhaseMarkers(load_start=700, fire_start=380, contact=0, pelvis_peak=240),
        expected="Tempo 1.84:1 stays inside hard bounds (>= 1.5), flagged as warning",
        holds=lambda r: _check(r, TEMPO).passed and _check(r, TEMPO).severity == "warning",
    ),
    EdgeCase(
        name="Patient Load (1800/400ms)",
        markers=PhaseMarkers(load_start=1800, fire_start=400, contact=0, pelvis_peak=250),
        expected="Tempo 4.50:1 accepted, load duration 1400ms rejected as critical",
        holds=lambda r: _check(r, TEMPO).passed
        and not _check(r, LOAD).passed and _check(r, LOAD).severity == "critical",
    ),
    EdgeCase(
        name="Inverted Markers (500/450ms)",
        markers=PhaseMarkers(load_start=500, fire_start=450, contact=0, pelvis_peak=300),
        expected="Should reject ordering and tempo (< 1.5:1) as critical",
        holds=lambda r: not _check(r, ORDERING).passed
        and not _check(r, TEMPO).passed and _check(r, TEMPO).severity == "critical",
    ),
    EdgeCase(
        name="Impossible Tempo (2100/300ms)",
        markers=PhaseMarkers(load_start=2100, fire_start=300, contact=0, pelvis_peak=150),
        expected="Should reject tempo 7.00:1 (> 5.0) as critical",
        holds=lambda r: not _check(r, TEMPO).passed and _check(r, TEMPO).severity == "critical",
    ),
    EdgeCase(
        name="Minimum Fire Duration (250ms)",
        markers=PhaseMarkers(load_start=1000, fire_start=250, contact=0, pelvis_peak=100),
        expected="Fire duration exactly 250ms accepted",
        holds=lambda r: _check(r, FIRE).passed,
    ),
    EdgeCase(
        name="Maximum Load Duration (1200ms)",
        markers=PhaseMarkers(load_start=1600, fire_start=400, contact=0, pelvis_peak=250),
        expected="Load duration exactly 1200ms accepted",
        holds=lambda r: _check(r, LOAD).passed,
    ),
)


def run_edge_case_tests(validator: Optional[TempoValidator] = None) -> list[TestResult]:
    """
    엣지 케이스 6개 실행 (ground truth 없이 범용 검증)

    Returns:
        시나리오별 TestResult (기대 동작과 일치하면 passed)
    """
    validator = validator or TempoValidator()
    results = []

    for case in EDGE_CASES:
        validation = validator.validate(case.markers)
        ok = case.holds(validation)
        failed = [r.test_name for r in validation.results if not r.passed]
        results.append(
            TestResult(
                test_name=f"Edge Case: {case.name}",
                passed=ok,
                expected=case.expected,
                actual=(
                    f"failed checks: {', '.join(failed)}" if failed else "all checks passed"
                ),
                severity="info" if ok else "critical",
                error=None if ok else "Validator behaviour diverged from expectation",
            )
        )

    return results
