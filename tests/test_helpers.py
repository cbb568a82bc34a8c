"""
Test Helper Utilities

재사용 가능한 테스트 헬퍼 함수들을 모아놓은 모듈입니다.
"""
from typing import List, Dict, Optional

import numpy as np

from swing_phase.constants import PHASE_ORDER
from swing_phase.schemas.frame_dto import FrameFeature, Point2D
from swing_phase.schemas.phase_dto import SwingPhase

SWING_FPS = 30
SWING_FRAMES = 40

# 합성 스윙의 기대 경계 (start, end)
SWING_BOUNDARIES = {
    "stance": (0, 6),
    "load": (6, 12),
    "stride": (12, 18),
    "fire": (18, 21),
    "contact": (21, 24),
    "follow_through": (24, 39),
}


# ========================================
# Synthetic Swing Plan
# ========================================

def swing_com_x(i: int) -> float:
    """0~5 정지, 6~12 뒤로 이동(최소 0.40), 이후 전방 이동"""
    if i <= 5:
        return 0.5
    if i <= 12:
        return 0.46 - 0.01 * (i - 6)
    return 0.40 + 0.01 * (i - 12)


def swing_hand_x(i: int) -> float:
    """21~24 전방 뻗음(24에서 최대), 이후 감소"""
    if i < 21:
        return 0.3
    if i <= 24:
        return 0.5 + 0.05 * (i - 21)
    return 0.55


def swing_front_foot_down(i: int) -> bool:
    return i >= 18


def swing_hip_angle(i: int) -> float:
    """18부터 회전 시작, 21에서 급회전(각속도 피크)"""
    if i <= 17:
        return 0.0
    if i <= 20:
        return float(i - 17)
    return 33.0 + (i - 21)


# ========================================
# Pose Data Generators
# ========================================

def create_empty_frame(num_landmarks: int = 33) -> List[Dict[str, float]]:
    """
    빈 포즈 프레임 생성 (모든 랜드마크가 원점)

    Args:
        num_landmarks: 랜드마크 개수 (기본 33개)

    Returns:
        List[Dict]: MediaPipe 랜드마크 리스트
    """
    return [
        {"x": 0.0, "y": 0.0, "z": 0.0, "visibility": 1.0}
        for _ in range(num_landmarks)
    ]


def _set(frame, idx: int, x: float, y: float) -> None:
    frame[idx] = {"x": float(x), "y": float(y), "z": 0.0, "visibility": 1.0}


def create_pose_frame(
    com_x: float = 0.5,
    hand_x: float = 0.3,
    front_ankle_y: float = 0.7,
    hip_angle: float = 0.0,
    hip_half_width: float = 0.05,
) -> List[Dict[str, float]]:
    """
    COM / 손 / 앞발 / 엉덩이 회전을 지정한 33 landmark 프레임

    엉덩이 중점 = (com_x, 0.5), 좌→우 엉덩이 벡터 각도 = hip_angle
    """
    frame = create_empty_frame()
    rad = np.radians(hip_angle)
    dx, dy = hip_half_width * np.cos(rad), hip_half_width * np.sin(rad)

    _set(frame, 11, com_x - 0.06, 0.3)           # left shoulder
    _set(frame, 12, com_x + 0.06, 0.3)           # right shoulder
    _set(frame, 15, hand_x, 0.4)                 # left wrist
    _set(frame, 16, hand_x, 0.4)                 # right wrist
    _set(frame, 23, com_x - dx, 0.5 - dy)        # left hip
    _set(frame, 24, com_x + dx, 0.5 + dy)        # right hip
    _set(frame, 25, com_x - 0.05, 0.65)          # left knee
    _set(frame, 26, com_x + 0.05, 0.65)          # right knee
    _set(frame, 27, com_x - 0.05, front_ankle_y) # left ankle
    _set(frame, 28, com_x + 0.05, 0.9)           # right ankle
    return frame


def create_swing_frames(num_frames: int = SWING_FRAMES) -> List[List[Dict[str, float]]]:
    """6단계가 모두 감지되는 합성 스윙 (30fps 기준)"""
    return [
        create_pose_frame(
            com_x=swing_com_x(i),
            hand_x=swing_hand_x(i),
            front_ankle_y=0.9 if swing_front_foot_down(i) else 0.7,
            hip_angle=swing_hip_angle(i),
        )
        for i in range(num_frames)
    ]


def create_swing_features(
    num_frames: int = SWING_FRAMES,
    fps: int = SWING_FPS,
    foot_contact: bool = True,
    hip_rotation: bool = True,
) -> List[FrameFeature]:
    """합성 스윙의 FrameFeature (각속도 포함)"""
    features = []
    for i in range(num_frames):
        angle = swing_hip_angle(i) if hip_rotation else 0.0
        prev = (swing_hip_angle(i - 1) if hip_rotation else 0.0) if i > 0 else angle
        features.append(
            FrameFeature(
                frame=i,
                timestamp=i / fps,
                hip_rotation=angle,
                com=Point2D(x=swing_com_x(i), y=0.5),
                hand_position=Point2D(x=swing_hand_x(i), y=0.4),
                front_foot_contact=foot_contact and swing_front_foot_down(i),
                hip_velocity=abs(angle - prev) * fps,
            )
        )
    return features


def create_zero_features(num_frames: int, fps: int = SWING_FPS) -> List[FrameFeature]:
    return [FrameFeature(frame=i, timestamp=i / fps) for i in range(num_frames)]


def make_phase(
    name: str,
    start: int,
    end: int,
    fps: int = SWING_FPS,
    confidence: Optional[float] = None,
) -> SwingPhase:
    from swing_phase.constants import PHASE_CONFIDENCE

    return SwingPhase(
        name=name,
        start_frame=start,
        end_frame=end,
        duration=(end - start) / fps,
        confidence=PHASE_CONFIDENCE[name] if confidence is None else confidence,
    )


# ========================================
# Phase Validation Helpers
# ========================================

def validate_phase_order(phases: List[SwingPhase]) -> bool:
    """
    Phase 순서 / 연속성 검증

    Returns:
        bool: 이름이 정해진 순서이고, 겹치지 않고 이어져 있으면 True
    """
    names = [p.name for p in phases]
    if len(set(names)) != len(names):
        return False

    ranks = [PHASE_ORDER.index(n) for n in names]
    if ranks != sorted(ranks):
        return False

    if phases and phases[0].start_frame != 0:
        return False

    for prev, cur in zip(phases, phases[1:]):
        if prev.end_frame != cur.start_frame:
            return False

    return all(p.start_frame < p.end_frame for p in phases)


def boundaries(phases: List[SwingPhase]) -> Dict[str, tuple]:
    return {p.name: (p.start_frame, p.end_frame) for p in phases}
