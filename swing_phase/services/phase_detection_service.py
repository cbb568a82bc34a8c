"""
페이즈 감지 Service Layer
Domain 컴포넌트들을 조합하여 landmark → PhaseDetectionResult 파이프라인 실행
"""
import logging
from typing import Any, Sequence

from swing_phase.config.settings import settings
from swing_phase.domain.frame.analyzer import FrameAnalyzer
from swing_phase.domain.phase.segmenter import PhaseSegmenter
from swing_phase.domain.quality.assessor import QualityAssessor
from swing_phase.schemas.phase_dto import PhaseDetectionResult, PhaseTransition

logger = logging.getLogger(__name__)


class PhaseDetectionService:
    """
    페이즈 감지 메인 서비스

    책임:
    - 1차 패스(프레임 특징) → (선택) 스무딩 → 2차 패스(각속도) → 분할 → 품질 평가
    - 파생 지표 계산 (총 길이, load:fire 비율, 전환 이벤트)
    """

    def __init__(
        self,
        frame_analyzer: FrameAnalyzer,
        phase_segmenter: PhaseSegmenter,
        quality_assessor: QualityAssessor,
        smoothing_window: int = 0,
        smoothing_polyorder: int = 2,
    ):
        self.frame_analyzer = frame_analyzer
        self.phase_segmenter = phase_segmenter
        self.quality_assessor = quality_assessor
        self.smoothing_window = smoothing_window
        self.smoothing_polyorder = smoothing_polyorder

    def detect(
        self, frames: Sequence[Any], fps: float = settings.DEFAULT_FPS
    ) -> PhaseDetectionResult:
        """
        스윙 페이즈 감지 파이프라인 실행

        Args:
            frames: 프레임별 landmark (33개, 트래킹 실패 시 None)
            fps: 캡처 프레임 레이트

        Returns:
            PhaseDetectionResult
        """
        # numpy (N, 33, 3) 배열도 프레임 시퀀스로 허용
        frames = [] if frames is None else list(frames)
        if len(frames) < self.phase_segmenter.min_frames:
            logger.warning(
                f"[phase] insufficient frames: {len(frames)} < {self.phase_segmenter.min_frames}"
            )
            return PhaseDetectionResult(quality=self.quality_assessor.insufficient_data())

        # ========== Step 1: 프레임 특징 ==========
        features = self.frame_analyzer.analyze_sequence(frames, fps)

        # ========== Step 2: 스무딩 (선택) ==========
        if self.smoothing_window > 1:
            features = self.frame_analyzer.smooth_features(
                features, self.smoothing_window, self.smoothing_polyorder
            )

        # ========== Step 3: 엉덩이 각속도 ==========
        features = self.frame_analyzer.with_hip_velocity(features, fps)

        # ========== Step 4: 페이즈 분할 ==========
        phases = self.phase_segmenter.segment(features, fps)

        # ========== Step 5: 품질 평가 ==========
        quality = self.quality_assessor.assess(phases, features)

        load = next((p for p in phases if p.name == "load"), None)
        fire = next((p for p in phases if p.name == "fire"), None)
        ratio = load.duration / fire.duration if load and fire and fire.duration > 0 else 0.0

        result = PhaseDetectionResult(
            phases=phases,
            total_duration=sum(p.duration for p in phases),
            load_to_fire_ratio=ratio,
            phase_transitions=[
                PhaseTransition(phase=p.name, frame=p.start_frame, timestamp=p.start_frame / fps)
                for p in phases
            ],
            quality=quality,
        )
        logger.info(
            f"[phase] frames={len(frames)} phases={len(phases)} "
            f"ratio={ratio:.2f} quality={quality.score}"
        )
        return result
