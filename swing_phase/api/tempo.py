from fastapi import APIRouter, HTTPException
import logging

from swing_phase.domain.tempo.edge_cases import run_edge_case_tests
from swing_phase.domain.tempo.report import run_full_test_suite
from swing_phase.schemas.request_dto import (
    TestReportResponse,
    TestSuiteRequest,
    ValidateTempoRequest,
)
from swing_phase.schemas.tempo_dto import PlayerGroundTruth, TestResult, ValidationResult
from swing_phase.services.service_factory import create_tempo_validator, load_ground_truth_catalog

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/tempo", tags=["Tempo Validation"])


@router.get("/players", response_model=list[PlayerGroundTruth])
def list_players() -> list[PlayerGroundTruth]:
    return load_ground_truth_catalog().players()


@router.post("/validate", response_model=ValidationResult)
def validate_tempo(req: ValidateTempoRequest) -> ValidationResult:
    """
    페이즈 마커 검증

    player_name 이 없으면 생리학적 한계만 검증
    """
    ground_truth = None
    if req.player_name:
        ground_truth = load_ground_truth_catalog().get(req.player_name)
        if ground_truth is None:
            logger.warning(f"❌ 알 수 없는 선수: {req.player_name}")
            raise HTTPException(status_code=404, detail=f"Unknown player: {req.player_name}")

    result = create_tempo_validator().validate(req.markers, ground_truth)
    logger.info(f"✅ 템포 검증: {result.player_name} pass={result.overall_pass} score={result.score}")
    return result


@router.get("/edge-cases", response_model=list[TestResult])
def edge_cases() -> list[TestResult]:
    return run_edge_case_tests(create_tempo_validator())


@router.post("/report", response_model=TestReportResponse)
def tempo_report(req: TestSuiteRequest) -> TestReportResponse:
    report = run_full_test_suite(
        req.markers_by_player,
        catalog=load_ground_truth_catalog(),
        validator=create_tempo_validator(),
    )
    return TestReportResponse(report=report)


ROUTERS = [router]
