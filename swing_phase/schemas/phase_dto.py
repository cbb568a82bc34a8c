"""
페이즈 감지 관련 DTO
PhaseSegmenter / QualityAssessor 출력용
"""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from swing_phase.schemas.frame_dto import Point2D

PhaseName = Literal["stance", "load", "stride", "fire", "contact", "follow_through"]


class SwingPhase(BaseModel):
    """1개 페이즈 정보"""
    model_config = ConfigDict(frozen=True)

    name: PhaseName
    start_frame: int = Field(..., ge=0)
    end_frame: int
    duration: float = Field(..., description="페이즈 지속 시간(초)")
    key_events: list[str] = Field(default_factory=list)
    # 페이즈 종료 프레임의 COM
    com_position: Optional[Point2D] = None
    confidence: float = Field(..., ge=0.0, le=1.0)


class PhaseTransition(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: PhaseName
    frame: int
    timestamp: float


class QualityReport(BaseModel):
    """감지 품질 리포트"""
    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0.0, le=100.0)
    issues: list[str] = Field(default_factory=list)
    detection_confidence: float = Field(0.0, ge=0.0, le=1.0)


class PhaseDetectionResult(BaseModel):
    """페이즈 감지 결과 (최대 6단계)"""
    model_config = ConfigDict(frozen=True)

    phases: list[SwingPhase] = Field(default_factory=list)
    total_duration: float = 0.0
    load_to_fire_ratio: float = Field(0.0, ge=0.0)
    phase_transitions: list[PhaseTransition] = Field(default_factory=list)
    quality: QualityReport

    def get_phase(self, phase_name: PhaseName) -> Optional[SwingPhase]:
        """특정 페이즈 정보 반환 (없으면 None)"""
        for phase in self.phases:
            if phase.name == phase_name:
                return phase
        return None
