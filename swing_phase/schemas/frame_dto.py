"""
프레임 특징 DTO
FrameAnalyzer 출력 → PhaseSegmenter 입력
"""
from pydantic import BaseModel, ConfigDict, Field


class Point2D(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0


class FrameFeature(BaseModel):
    """1개 프레임의 특징값"""
    model_config = ConfigDict(frozen=True)

    frame: int
    timestamp: float = Field(..., description="frame / fps (초)")

    # 회전 각도 (부호 있음)
    hip_rotation: float = Field(0.0, description="엉덩이 회전 각도 (도)")
    shoulder_rotation: float = Field(0.0, description="어깨 회전 각도 (도)")

    # 무릎 굴곡 (0~180)
    front_knee_angle: float = Field(0.0, ge=0.0, le=180.0)
    back_knee_angle: float = Field(0.0, ge=0.0, le=180.0)

    com: Point2D = Field(default_factory=Point2D, description="엉덩이 중점 (COM 근사)")
    hand_position: Point2D = Field(default_factory=Point2D, description="양 손목 중점")
    front_foot_contact: bool = False

    # 2차 패스에서 채워짐
    hip_velocity: float = Field(0.0, ge=0.0, description="엉덩이 각속도 (도/초)")
