"""
페이즈 감지 Domain Logic
COM / 앞발 접지 / 엉덩이 각속도 / 손 위치로 6단계 타격 페이즈 분할

stance → load → stride → fire → contact → follow_through
각 경계는 이전 경계 이후의 고정 윈도우만 탐색하는 로컬 휴리스틱.
"""
from typing import Callable, Optional, Sequence

from swing_phase.config.settings import settings
from swing_phase.constants import phase_params as pp
from swing_phase.schemas.frame_dto import FrameFeature
from swing_phase.schemas.phase_dto import PhaseName, SwingPhase


class PhaseSegmenter:
    """스윙 6단계 페이즈 분할기"""

    def __init__(
        self,
        com_shift_threshold: float = settings.COM_SHIFT_THRESHOLD,
        min_frames: int = settings.MIN_PHASE_FRAMES,
        confidences: Optional[dict[str, float]] = None,
    ):
        """
        Args:
            com_shift_threshold: stance 종료로 판단할 COM-x 이동량 (정규화 좌표)
            min_frames: 이보다 짧은 시퀀스는 빈 결과
            confidences: 페이즈별 신뢰도 override
        """
        self.com_shift_threshold = com_shift_threshold
        self.min_frames = min_frames
        self.confidences = {**pp.PHASE_CONFIDENCE, **(confidences or {})}

    def segment(self, features: Sequence[FrameFeature], fps: float) -> list[SwingPhase]:
        """
        페이즈 분할

        Args:
            features: 각속도 계산(2차 패스)까지 끝난 FrameFeature 시퀀스
            fps: 프레임 레이트

        Returns:
            SwingPhase 리스트 (end > start 인 페이즈만, 순서 고정)
        """
        features = list(features)
        if len(features) < self.min_frames:
            return []

        total = len(features)
        finders: list[tuple[PhaseName, Callable[[list[FrameFeature], int], int]]] = [
            ("stance", lambda fs, _start: self._find_stance_end(fs)),
            ("load", self._find_load_end),
            ("stride", self._find_stride_end),
            ("fire", self._find_fire_end),
            ("contact", self._find_contact_end),
            ("follow_through", lambda fs, _start: len(fs) - 1),
        ]

        phases = []
        current_start = 0
        for name, find_end in finders:
            end = find_end(features, current_start)
            if end <= current_start:
                continue

            phases.append(self._make_phase(name, current_start, end, features, fps))
            current_start = end

        return phases

    def _make_phase(
        self,
        name: PhaseName,
        start: int,
        end: int,
        features: list[FrameFeature],
        fps: float,
    ) -> SwingPhase:
        # fallback 경계는 len(features) 와 같을 수 있음 → 마지막 프레임으로 clamp
        snapshot = features[min(end, len(features) - 1)].com
        return SwingPhase(
            name=name,
            start_frame=start,
            end_frame=end,
            duration=(end - start) / fps,
            key_events=list(pp.PHASE_KEY_EVENTS[name]),
            com_position=snapshot,
            confidence=self.confidences[name],
        )

    def _find_stance_end(self, features: list[FrameFeature]) -> int:
        """COM 이 기준 위치에서 벗어나기 시작하는 프레임 (load 시작)"""
        baseline = features[0].com.x
        for i in range(pp.STANCE_SEARCH_START, len(features)):
            if abs(features[i].com.x - baseline) > self.com_shift_threshold:
                return i
        return min(pp.STANCE_FALLBACK_FRAMES, len(features))

    def _find_load_end(self, features: list[FrameFeature], start: int) -> int:
        """COM 이 가장 뒤(최소 x)로 간 프레임"""
        if start >= len(features):
            return start

        min_com = features[start].com.x
        min_idx = start
        for i in range(start + 1, min(start + pp.LOAD_SEARCH_WINDOW, len(features))):
            if features[i].com.x < min_com:
                min_com = features[i].com.x
                min_idx = i
        return min_idx

    def _find_stride_end(self, features: list[FrameFeature], start: int) -> int:
        """앞발이 처음 접지하는 프레임"""
        for i in range(start, min(start + pp.STRIDE_SEARCH_WINDOW, len(features))):
            if features[i].front_foot_contact:
                return i
        return min(start + pp.STRIDE_FALLBACK_FRAMES, len(features))

    def _find_fire_end(self, features: list[FrameFeature], start: int) -> int:
        """엉덩이 각속도 피크"""
        return self._argmax_after(
            features, start, pp.FIRE_SEARCH_WINDOW, lambda f: f.hip_velocity
        )

    def _find_contact_end(self, features: list[FrameFeature], start: int) -> int:
        """손 위치 최대 전방(x) 프레임"""
        return self._argmax_after(
            features, start, pp.CONTACT_SEARCH_WINDOW, lambda f: f.hand_position.x
        )

    @staticmethod
    def _argmax_after(
        features: list[FrameFeature],
        start: int,
        window: int,
        value: Callable[[FrameFeature], float],
    ) -> int:
        # 0 에서 시작해 strict '>' 로만 갱신, 못 찾으면 start 그대로
        max_value = 0.0
        max_idx = start
        for i in range(start, min(start + window, len(features))):
            v = value(features[i])
            if v > max_value:
                max_value = v
                max_idx = i
        return max_idx
