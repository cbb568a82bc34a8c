"""
API Request/Response DTO
Router ↔ Service 간 데이터 전달용
"""
from typing import Optional

from pydantic import BaseModel, Field

from swing_phase.config.settings import settings
from swing_phase.schemas.pose_dto import PoseFrame
from swing_phase.schemas.tempo_dto import PhaseMarkers


class DetectPhasesRequest(BaseModel):
    """페이즈 감지 요청"""
    fps: int = Field(settings.DEFAULT_FPS, gt=0, description="캡처 프레임 레이트")
    frames: list[PoseFrame] = Field(
        ..., description="프레임별 33개 landmark (트래킹 실패 시 null)"
    )


class ValidateTempoRequest(BaseModel):
    """템포 검증 요청"""
    markers: PhaseMarkers
    player_name: Optional[str] = Field(
        None, description="ground truth 선수명 (없으면 범용 검증)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "markers": {
                    "load_start": 850,
                    "fire_start": 340,
                    "contact": 0,
                    "pelvis_peak": 200,
                },
                "player_name": "Freddie Freeman",
            }
        }


class TestSuiteRequest(BaseModel):
    __test__ = False

    markers_by_player: dict[str, PhaseMarkers] = Field(
        ..., description="선수명 → 감지된 마커"
    )


class TestReportResponse(BaseModel):
    __test__ = False

    report: str
