from fastapi import APIRouter
import logging

from swing_phase.schemas.phase_dto import PhaseDetectionResult
from swing_phase.schemas.request_dto import DetectPhasesRequest
from swing_phase.services.service_factory import create_phase_detection_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/phases", tags=["Phase Detection"])


@router.post("/detect", response_model=PhaseDetectionResult)
def detect_phases(req: DetectPhasesRequest) -> PhaseDetectionResult:
    """
    landmark 시퀀스 → 6단계 스윙 페이즈

    프레임 부족/트래킹 실패는 에러가 아니라 quality 점수/issue 로 반환
    """
    logger.info(f"📥 페이즈 감지 요청: frames={len(req.frames)}, fps={req.fps}")
    service = create_phase_detection_service()
    return service.detect(req.frames, req.fps)


ROUTERS = [router]
