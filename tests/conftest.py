"""
Pytest Configuration & Shared Fixtures

이 파일은 모든 테스트에서 재사용 가능한 fixture를 정의합니다.
"""
import pytest
from fastapi.testclient import TestClient

from swing_phase.domain.frame.analyzer import FrameAnalyzer
from swing_phase.domain.phase.segmenter import PhaseSegmenter
from swing_phase.domain.quality.assessor import QualityAssessor
from swing_phase.domain.tempo.catalog import GroundTruthCatalog
from swing_phase.domain.tempo.validator import TempoValidator
from swing_phase.schemas.tempo_dto import PhaseMarkers
from swing_phase.services.phase_detection_service import PhaseDetectionService
from tests.test_helpers import create_swing_features, create_swing_frames, validate_phase_order


# ========================================
# Application Fixtures
# ========================================

@pytest.fixture(scope="session")
def app():
    """FastAPI 애플리케이션 인스턴스"""
    from swing_phase.main import app as fastapi_app
    return fastapi_app


@pytest.fixture(scope="session")
def client(app):
    """FastAPI TestClient (API 테스트용)"""
    return TestClient(app)


# ========================================
# Domain Object Fixtures
# ========================================

@pytest.fixture
def analyzer() -> FrameAnalyzer:
    return FrameAnalyzer(foot_contact_threshold=0.8, min_landmarks=33)


@pytest.fixture
def segmenter() -> PhaseSegmenter:
    return PhaseSegmenter(com_shift_threshold=0.02, min_frames=10)


@pytest.fixture
def assessor() -> QualityAssessor:
    return QualityAssessor()


@pytest.fixture
def service(analyzer, segmenter, assessor) -> PhaseDetectionService:
    return PhaseDetectionService(
        frame_analyzer=analyzer,
        phase_segmenter=segmenter,
        quality_assessor=assessor,
        smoothing_window=0,
    )


@pytest.fixture
def validator() -> TempoValidator:
    return TempoValidator(hard_tempo_bounds=(1.5, 5.0), min_separation_ms=100)


@pytest.fixture(scope="session")
def catalog() -> GroundTruthCatalog:
    return GroundTruthCatalog.load()


@pytest.fixture
def freeman(catalog):
    return catalog.get("Freddie Freeman")


# ========================================
# Sample Data Fixtures
# ========================================

@pytest.fixture
def swing_frames():
    """6단계가 모두 나오는 합성 스윙 landmark (40프레임, 30fps)"""
    return create_swing_frames()


@pytest.fixture
def swing_features():
    return create_swing_features()


@pytest.fixture
def freeman_markers() -> PhaseMarkers:
    return PhaseMarkers(load_start=850, fire_start=340, contact=0, pelvis_peak=200)


# ========================================
# Utility Functions
# ========================================

@pytest.fixture
def assert_valid_phase_sequence():
    """Phase 시퀀스 유효성 검증 헬퍼"""
    def _assert(phases):
        assert validate_phase_order(phases), f"Invalid phase sequence: {[p.name for p in phases]}"
    return _assert
