# landmark_converter.py
from typing import Any, Optional, Sequence

import numpy as np


class LandmarkConverter:
    """
    프레임 1개의 landmark 입력을 (K, 3) numpy 배열로 통일.

    허용 입력:
      - pydantic Landmark / MediaPipe NormalizedLandmark (x, y, z 속성)
      - {"x": .., "y": .., "z": ..} dict (z 생략 가능)
      - (x, y) / (x, y, z) 시퀀스
      - (K, 2|3|4) numpy 배열
      - MediaPipe Results (pose_landmarks.landmark)
    트래킹 실패(None) 는 None 으로 유지.
    """

    def __init__(self, frame: Any):
        self._data = self._to_array(frame)

    def to_numpy(self) -> Optional[np.ndarray]:
        return self._data

    def __len__(self) -> int:
        return 0 if self._data is None else int(self._data.shape[0])

    @classmethod
    def _to_array(cls, frame: Any) -> Optional[np.ndarray]:
        if frame is None:
            return None

        # MediaPipe Results → landmark list
        pose_landmarks = getattr(frame, "pose_landmarks", None)
        if pose_landmarks is not None:
            frame = getattr(pose_landmarks, "landmark", pose_landmarks)

        if isinstance(frame, np.ndarray):
            if frame.ndim != 2 or frame.shape[1] < 2:
                return None
            arr = np.zeros((frame.shape[0], 3), dtype=float)
            cols = min(frame.shape[1], 3)
            arr[:, :cols] = frame[:, :cols]
            return arr

        points = [cls._point(p) for p in frame]
        if not points:
            return np.zeros((0, 3), dtype=float)
        return np.array(points, dtype=float)

    @staticmethod
    def _point(p: Any) -> Sequence[float]:
        if isinstance(p, dict):
            return (float(p["x"]), float(p["y"]), float(p.get("z", 0.0)))
        if hasattr(p, "x") and hasattr(p, "y"):
            return (float(p.x), float(p.y), float(getattr(p, "z", 0.0) or 0.0))
        values = list(p)
        z = float(values[2]) if len(values) > 2 else 0.0
        return (float(values[0]), float(values[1]), z)
