"""
포즈 입력 관련 DTO
외부 포즈 추정기(MediaPipe 등) → FrameAnalyzer 입력용
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Landmark(BaseModel):
    """MediaPipe 포즈 landmark (33개 중 하나)"""
    model_config = ConfigDict(frozen=True)

    x: float = Field(..., description="정규화된 X 좌표")
    y: float = Field(..., description="정규화된 Y 좌표 (아래로 증가)")
    z: float = Field(0.0, description="깊이 (상대적)")
    visibility: float = Field(1.0, ge=0.0, le=1.0, description="가시성 점수")


# 트래킹 실패 프레임은 None
PoseFrame = Optional[list[Landmark]]
