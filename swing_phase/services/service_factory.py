from typing import Optional

from swing_phase.config.settings import settings
from swing_phase.domain.frame.analyzer import FrameAnalyzer
from swing_phase.domain.phase.segmenter import PhaseSegmenter
from swing_phase.domain.quality.assessor import QualityAssessor
from swing_phase.domain.tempo.catalog import GroundTruthCatalog
from swing_phase.domain.tempo.validator import TempoValidator
from swing_phase.services.phase_detection_service import PhaseDetectionService


def create_phase_detection_service(
        foot_contact_threshold: Optional[float] = None,
        smoothing_window: Optional[int] = None,
) -> PhaseDetectionService:
    """
    PhaseDetectionService 인스턴스 생성 (settings 기본값 사용)

    Args:
        foot_contact_threshold: 앞발 접지 y 임계값 (카메라별 재보정용)
        smoothing_window: Savitzky-Golay 윈도우 (0 이면 비활성)

    Returns:
        PhaseDetectionService 인스턴스
    """
    frame_analyzer = FrameAnalyzer(
        foot_contact_threshold=(
            settings.FOOT_CONTACT_Y_THRESHOLD
            if foot_contact_threshold is None else foot_contact_threshold
        ),
        min_landmarks=settings.MIN_LANDMARKS,
    )
    phase_segmenter = PhaseSegmenter(
        com_shift_threshold=settings.COM_SHIFT_THRESHOLD,
        min_frames=settings.MIN_PHASE_FRAMES,
    )

    return PhaseDetectionService(
        frame_analyzer=frame_analyzer,
        phase_segmenter=phase_segmenter,
        quality_assessor=QualityAssessor(),
        smoothing_window=settings.SMOOTHING_WINDOW if smoothing_window is None else smoothing_window,
        smoothing_polyorder=settings.SMOOTHING_POLYORDER,
    )


def create_tempo_validator() -> TempoValidator:
    return TempoValidator(min_separation_ms=settings.MARKER_MIN_SEPARATION_MS)


def load_ground_truth_catalog() -> GroundTruthCatalog:
    return GroundTruthCatalog.load(settings.GROUND_TRUTH_FILE)
