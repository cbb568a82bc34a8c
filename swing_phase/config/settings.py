from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# helpers
from swing_phase.config.env_utils import env_bool, env_float, env_int, env_path
from swing_phase.constants import phase_params as pp
from swing_phase.constants import tempo_params as tp


# ─────────────────────────────────────────────────────────
# Project root 탐색
#   - .git / pyproject.toml / requirements.txt 중 하나가 보이는 최상단을 루트로 간주
#   - 실패 시 BASE_DIR 환경변수 → 현재 작업 디렉토리
# ─────────────────────────────────────────────────────────
def find_project_root() -> Path:
    cur = Path(__file__).resolve()
    for parent in cur.parents:
        if any(
            (parent / m).exists()
            for m in (".git", "pyproject.toml", "requirements.txt")
        ):
            return parent
    env_root = os.getenv("BASE_DIR")
    if env_root:
        return Path(env_root).resolve()
    # site-packages 설치본은 마커가 없으므로 cwd 기준
    return Path.cwd()


ROOT: Path = find_project_root()
PACKAGE_DIR: Path = Path(__file__).resolve().parent.parent

# ─────────────────────────────────────────────────────────
# .env 로딩
#   - ENV_FILE 지정 시 우선
#   - 없으면 ROOT/.env.<ENV> → 없으면 ROOT/.env
# ─────────────────────────────────────────────────────────
_DEFAULT_ENV = os.getenv("ENV", "test")
_env_file_candidate = ROOT / f".env.{_DEFAULT_ENV}"
_ENV_FILE = (
    Path(os.getenv("ENV_FILE")).resolve()
    if os.getenv("ENV_FILE")
    else (_env_file_candidate if _env_file_candidate.exists() else (ROOT / ".env"))
)
load_dotenv(dotenv_path=_ENV_FILE, override=False)


class Settings:
    # ── App / Runtime ─────────────────────────────────────
    ENV: str = os.getenv("ENV", _DEFAULT_ENV)
    FASTAPI_PORT: int = env_int("FASTAPI_PORT", 8000)
    DEBUG_MODE: bool = env_bool("DEBUG_MODE", False)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # ── Base Paths ────────────────────────────────────────
    ROOT: Path = ROOT
    CONFIG_DIR: Path = env_path("CONFIG_DIR", PACKAGE_DIR / "config")

    # ── Frame analysis ────────────────────────────────────
    DEFAULT_FPS: int = env_int("DEFAULT_FPS", pp.DEFAULT_FPS)
    MIN_LANDMARKS: int = env_int("MIN_LANDMARKS", 33)
    # 카메라 프레이밍에 따라 재보정 필요 (고정 값은 알려진 한계)
    FOOT_CONTACT_Y_THRESHOLD: float = env_float(
        "FOOT_CONTACT_Y_THRESHOLD", pp.FOOT_CONTACT_Y_THRESHOLD
    )
    # 0 이면 스무딩 비활성화
    SMOOTHING_WINDOW: int = env_int("SMOOTHING_WINDOW", 0)
    SMOOTHING_POLYORDER: int = env_int("SMOOTHING_POLYORDER", 2)

    # ── Phase detection ───────────────────────────────────
    COM_SHIFT_THRESHOLD: float = env_float("COM_SHIFT_THRESHOLD", pp.COM_SHIFT_THRESHOLD)
    MIN_PHASE_FRAMES: int = env_int("MIN_PHASE_FRAMES", pp.MIN_PHASE_FRAMES)

    # ── Tempo validation ──────────────────────────────────
    MARKER_MIN_SEPARATION_MS: float = env_float(
        "MARKER_MIN_SEPARATION_MS", tp.MARKER_MIN_SEPARATION_MS
    )
    GROUND_TRUTH_FILE: Optional[Path] = env_path(
        "GROUND_TRUTH_FILE", CONFIG_DIR / "ground_truth" / tp.GROUND_TRUTH_BASE_NAME
    )


# 전역 싱글톤처럼 사용
settings = Settings()
