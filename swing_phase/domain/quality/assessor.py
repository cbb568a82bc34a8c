"""
감지 품질 평가 Domain Logic
100점에서 감점 (가중치는 튜닝용 휴리스틱, 통계 모델 아님)
"""
from typing import Optional, Sequence

from swing_phase.constants import phase_params as pp
from swing_phase.schemas.frame_dto import FrameFeature
from swing_phase.schemas.phase_dto import QualityReport, SwingPhase


class QualityAssessor:
    """페이즈 완결성 / 생리학적 타당성 평가"""

    def assess(
        self,
        phases: Sequence[SwingPhase],
        features: Optional[Sequence[FrameFeature]] = None,
    ) -> QualityReport:
        """
        Args:
            phases: 감지된 페이즈
            features: 원본 특징 시퀀스 (현재 룰에서는 미사용)

        Returns:
            QualityReport (score 0~100, issues, 평균 신뢰도)
        """
        issues = []
        score = 100

        detected = {p.name for p in phases}
        missing = [name for name in pp.PHASE_ORDER if name not in detected]
        if missing:
            issues.append(f"Missing phases: {', '.join(missing)}")
            score -= len(missing) * pp.QUALITY_MISSING_PHASE_PENALTY

        load = _find(phases, "load")
        fire = _find(phases, "fire")

        if load and not _within(load.duration, pp.LOAD_DURATION_RANGE_S):
            issues.append("Load phase duration unusual")
            score -= pp.QUALITY_RULE_PENALTY

        if fire and not _within(fire.duration, pp.FIRE_DURATION_RANGE_S):
            issues.append("Fire phase duration unusual")
            score -= pp.QUALITY_RULE_PENALTY

        if load and fire and fire.duration > 0:
            ratio = load.duration / fire.duration
            if not _within(ratio, pp.LOAD_FIRE_RATIO_RANGE):
                issues.append(f"Load-to-fire ratio ({ratio:.1f}:1) outside ideal range")
                score -= pp.QUALITY_RULE_PENALTY

        confidence = sum(p.confidence for p in phases) / len(phases) if phases else 0.0

        return QualityReport(
            score=max(0, score),
            issues=issues,
            detection_confidence=confidence,
        )

    @staticmethod
    def insufficient_data() -> QualityReport:
        """프레임 부족 시 리포트"""
        return QualityReport(
            score=0,
            issues=[pp.INSUFFICIENT_DATA_ISSUE],
            detection_confidence=0.0,
        )


def _find(phases: Sequence[SwingPhase], name: str) -> Optional[SwingPhase]:
    return next((p for p in phases if p.name == name), None)


def _within(value: float, bounds: tuple[float, float]) -> bool:
    return bounds[0] <= value <= bounds[1]
