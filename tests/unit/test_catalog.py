# tests/unit/test_catalog.py
import json

from swing_phase.config.settings import settings
from swing_phase.domain.tempo.catalog import GroundTruthCatalog


def test_bundled_catalog_contains_freeman(catalog):
    freeman = catalog.get("Freddie Freeman")

    assert freeman is not None
    assert freeman.expected_tempo == 2.50
    assert freeman.tempo_range == (2.4, 2.6)
    assert freeman.load_start_window == (800, 900)
    assert freeman.fire_start_window == (320, 360)
    assert freeman.pelvis_peak_window == (180, 220)
    assert catalog.primary.name == "Freddie Freeman"


def test_bundled_profiles_are_internally_consistent(catalog):
    for player in catalog.players():
        lo, hi = player.tempo_range
        assert lo <= player.expected_tempo <= hi
        assert player.load_start_window[0] < player.load_start_window[1]
        assert player.fire_start_window[1] < player.load_start_window[0]


def test_missing_file_falls_back_to_defaults(tmp_path):
    catalog = GroundTruthCatalog.load(tmp_path / "nope.json")

    assert catalog.version == "builtin"
    assert catalog.names() == ["Freddie Freeman"]


def test_custom_catalog_file(tmp_path):
    path = tmp_path / "players.json"
    path.write_text(json.dumps({
        "version": "test-1",
        "players": [{
            "name": "Test Hitter",
            "expected_tempo": 3.0,
            "tempo_range": [2.8, 3.2],
            "load_start_window": [900, 1100],
            "fire_start_window": [300, 350],
            "pelvis_peak_window": [150, 200],
            "player_type": "Synthetic",
        }],
    }), encoding="utf-8")

    catalog = GroundTruthCatalog.load(path)

    assert catalog.version == "test-1"
    assert "Test Hitter" in catalog
    assert len(catalog) == 1
    assert catalog.get("Freddie Freeman") is None
    # Freeman 이 없으면 첫 번째 선수가 기본
    assert catalog.primary.name == "Test Hitter"


def test_bundled_file_documents_adjusted_profiles():
    raw = json.loads(settings.GROUND_TRUTH_FILE.read_text(encoding="utf-8"))
    notes = " ".join(raw["adjustments"])

    assert "adjusted" in raw["source"]
    for name in ("Aaron Judge", "Luis Arraez", "Fernando Tatis Jr.", "Kyle Tucker"):
        assert name in notes
