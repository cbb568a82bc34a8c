import os
from pathlib import Path
from typing import Optional

"""환경 변수에서 bool 타입을 안전하게 읽는다."""


def env_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).strip().lower() in ("1", "true", "yes", "y", "on")


"""환경 변수에서 숫자를 읽는다. 비어 있으면 기본값."""


def env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or not str(v).strip():
        return default
    return int(v)


def env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None or not str(v).strip():
        return default
    return float(v)


"""환경 변수에서 파일 경로를 Path 객체로 변환."""


def env_path(name: str, default: Optional[Path]) -> Optional[Path]:
    v = os.getenv(name)
    return Path(v) if v else default
