"""
Ground truth 카탈로그
선수별 레퍼런스 프로파일 (버전 관리되는 정적 JSON)
"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from swing_phase.config.settings import settings
from swing_phase.constants import PRIMARY_PLAYER_NAME
from swing_phase.schemas.tempo_dto import PlayerGroundTruth

logger = logging.getLogger(__name__)


class GroundTruthCatalog:
    """선수명 → PlayerGroundTruth"""

    def __init__(self, players: list[PlayerGroundTruth], version: str = "builtin"):
        self.version = version
        self._players = {p.name: p for p in players}

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "GroundTruthCatalog":
        """
        카탈로그 로드

        Expected structure:
        {
            "version": "2024.2",
            "players": [
                {"name": "...", "expected_tempo": 2.5, "tempo_range": [2.4, 2.6], ...}
            ]
        }
        """
        catalog_file = Path(path) if path else settings.GROUND_TRUTH_FILE

        if catalog_file is None or not catalog_file.exists():
            # fallback: 내장 기본값
            logger.warning(f"[catalog] ground truth file not found: {catalog_file}, using defaults")
            return cls(_default_players())

        with open(catalog_file, "r", encoding="utf-8") as f:
            data = json.load(f)

        players = [PlayerGroundTruth(**p) for p in data.get("players", [])]
        logger.info(f"[catalog] loaded {len(players)} players (version={data.get('version')})")
        return cls(players, version=str(data.get("version", "unknown")))

    def get(self, name: str) -> Optional[PlayerGroundTruth]:
        return self._players.get(name)

    def names(self) -> list[str]:
        return list(self._players)

    def players(self) -> list[PlayerGroundTruth]:
        return list(self._players.values())

    @property
    def primary(self) -> PlayerGroundTruth:
        """기본 검증 대상 (Freddie Freeman, 없으면 첫 번째)"""
        return self._players.get(PRIMARY_PLAYER_NAME) or next(iter(self._players.values()))

    def __contains__(self, name: str) -> bool:
        return name in self._players

    def __len__(self) -> int:
        return len(self._players)


def _default_players() -> list[PlayerGroundTruth]:
    """기본 카탈로그 (파일 없을 때)"""
    return [
        PlayerGroundTruth(
            name="Freddie Freeman",
            expected_tempo=2.50,
            tempo_range=(2.4, 2.6),
            load_start_window=(800, 900),
            fire_start_window=(320, 360),
            pelvis_peak_window=(180, 220),
            player_type="Elite Power Hitter",
        ),
    ]
