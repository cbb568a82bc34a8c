"""
프레임 분석 Domain Logic
landmark → FrameFeature 변환 (회전 각도, 무릎 굴곡, COM, 손 위치, 앞발 접지)
"""
import logging
from typing import Any, Optional, Sequence

import numpy as np
from scipy.signal import savgol_filter

from swing_phase.config.settings import settings
from swing_phase.constants import (
    L_SHOULDER, R_SHOULDER, L_WRIST, R_WRIST, L_HIP, R_HIP,
    NUM_LANDMARKS, FRONT_LEG, BACK_LEG, FRONT_ANKLE, USED_LANDMARKS,
)
from swing_phase.schemas.frame_dto import FrameFeature, Point2D
from swing_phase.utils.landmark_converter import LandmarkConverter

logger = logging.getLogger(__name__)


class FrameAnalyzer:
    """프레임 단위 특징 추출기"""

    def __init__(
        self,
        foot_contact_threshold: float = settings.FOOT_CONTACT_Y_THRESHOLD,
        min_landmarks: int = settings.MIN_LANDMARKS,
    ):
        """
        Args:
            foot_contact_threshold: 앞발 발목 y 가 이 값을 넘으면 접지로 판단
            min_landmarks: 이보다 적은 landmark 프레임은 0 으로 채운 특징 반환 (최소 33)

        Raises:
            ValueError: min_landmarks < 33 (MediaPipe 인덱스 28 까지 사용)
        """
        if min_landmarks < NUM_LANDMARKS:
            raise ValueError(f"min_landmarks must be >= {NUM_LANDMARKS}, got {min_landmarks}")
        self.foot_contact_threshold = foot_contact_threshold
        self.min_landmarks = min_landmarks

    def analyze_sequence(self, frames: Sequence[Any], fps: float) -> list[FrameFeature]:
        """
        1차 패스: 프레임별 특징 추출 (hip_velocity 는 0)

        Args:
            frames: 프레임별 landmark 입력 (LandmarkConverter 참고)
            fps: 프레임 레이트

        Returns:
            FrameFeature 리스트
        """
        _check_fps(fps)
        features = []
        degraded = 0
        for idx, landmarks in enumerate(frames):
            points = self._to_points(landmarks)
            if points is None:
                degraded += 1
                features.append(self._empty_feature(idx, fps))
            else:
                features.append(self._build_feature(points, idx, fps))

        if degraded:
            logger.warning(f"[frame] {degraded}/{len(features)} frames without full landmarks")
        return features

    def analyze_frame(self, landmarks: Any, frame: int, fps: float) -> FrameFeature:
        """단일 프레임 특징 추출"""
        _check_fps(fps)
        points = self._to_points(landmarks)
        if points is None:
            return self._empty_feature(frame, fps)
        return self._build_feature(points, frame, fps)

    def _to_points(self, landmarks: Any) -> Optional[np.ndarray]:
        points = LandmarkConverter(landmarks).to_numpy()
        if points is None or points.shape[0] < self.min_landmarks:
            return None
        # NaN / inf 좌표는 트래킹 실패와 동일하게 취급
        if not np.isfinite(points[list(USED_LANDMARKS), :2]).all():
            return None
        return points

    def _build_feature(self, points: np.ndarray, frame: int, fps: float) -> FrameFeature:
        hip_mid = (points[L_HIP, :2] + points[R_HIP, :2]) / 2
        hand_mid = (points[L_WRIST, :2] + points[R_WRIST, :2]) / 2

        return FrameFeature(
            frame=frame,
            timestamp=frame / fps,
            hip_rotation=self._calc_rotation(points[L_HIP], points[R_HIP]),
            shoulder_rotation=self._calc_rotation(points[L_SHOULDER], points[R_SHOULDER]),
            front_knee_angle=self._calc_angle_3points(*(points[i] for i in FRONT_LEG)),
            back_knee_angle=self._calc_angle_3points(*(points[i] for i in BACK_LEG)),
            com=Point2D(x=float(hip_mid[0]), y=float(hip_mid[1])),
            hand_position=Point2D(x=float(hand_mid[0]), y=float(hand_mid[1])),
            front_foot_contact=bool(points[FRONT_ANKLE, 1] > self.foot_contact_threshold),
        )

    @staticmethod
    def with_hip_velocity(features: Sequence[FrameFeature], fps: float) -> list[FrameFeature]:
        """
        2차 패스: 엉덩이 각속도 계산
        v[0] = 0, v[i] = |hip[i] - hip[i-1]| * fps

        입력 레코드는 수정하지 않고 새 레코드를 반환한다.
        """
        _check_fps(fps)
        if not features:
            return []

        hips = np.array([f.hip_rotation for f in features], dtype=float)
        velocity = np.concatenate([[0.0], np.abs(np.diff(hips)) * fps])

        return [
            f.model_copy(update={"hip_velocity": float(v)})
            for f, v in zip(features, velocity)
        ]

    @staticmethod
    def smooth_features(
        features: Sequence[FrameFeature],
        window_length: int,
        polyorder: int = 2,
    ) -> list[FrameFeature]:
        """
        Savitzky-Golay 필터로 COM / 손 위치 / 회전 각도 스무딩 (선택)

        window_length 가 0 또는 1 이하면 그대로 복사본 반환.
        """
        features = list(features)
        if window_length <= 1 or len(features) < 3:
            return features

        if len(features) < window_length:
            window_length = len(features) if len(features) % 2 == 1 else len(features) - 1
        if window_length % 2 == 0:
            window_length -= 1
        if window_length < polyorder + 2:
            polyorder = max(window_length - 2, 0)
        if window_length < 3:
            return features

        def _smooth(values: list[float]) -> np.ndarray:
            return savgol_filter(np.array(values, dtype=float), window_length, polyorder)

        com_x = _smooth([f.com.x for f in features])
        com_y = _smooth([f.com.y for f in features])
        hand_x = _smooth([f.hand_position.x for f in features])
        hand_y = _smooth([f.hand_position.y for f in features])
        hip = _smooth([f.hip_rotation for f in features])
        shoulder = _smooth([f.shoulder_rotation for f in features])

        return [
            f.model_copy(update={
                "com": Point2D(x=float(com_x[i]), y=float(com_y[i])),
                "hand_position": Point2D(x=float(hand_x[i]), y=float(hand_y[i])),
                "hip_rotation": float(hip[i]),
                "shoulder_rotation": float(shoulder[i]),
            })
            for i, f in enumerate(features)
        ]

    def _calc_rotation(self, left: np.ndarray, right: np.ndarray) -> float:
        """좌→우 landmark 벡터의 회전 각도 (도, 부호 있음)"""
        return float(np.degrees(np.arctan2(right[1] - left[1], right[0] - left[0])))

    def _calc_angle_3points(self, p1: np.ndarray, p2: np.ndarray, p3: np.ndarray) -> float:
        """3점으로 각도 계산 (p2가 꼭짓점), 0~180"""
        radians = np.arctan2(p3[1] - p2[1], p3[0] - p2[0]) - np.arctan2(p1[1] - p2[1], p1[0] - p2[0])
        angle = abs(float(np.degrees(radians)))
        if angle > 180.0:
            angle = 360.0 - angle
        return angle

    def _empty_feature(self, frame: int, fps: float) -> FrameFeature:
        """landmark 누락 프레임 → 0 으로 채운 특징"""
        return FrameFeature(frame=frame, timestamp=frame / fps)


def _check_fps(fps: Optional[float]) -> None:
    if fps is None or fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")
