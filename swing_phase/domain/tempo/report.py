"""
테스트 스위트 리포트
검증 결과 → 텍스트 리포트
"""
import logging
from typing import Mapping, Optional

from swing_phase.domain.tempo.catalog import GroundTruthCatalog
from swing_phase.domain.tempo.edge_cases import run_edge_case_tests
from swing_phase.domain.tempo.validator import TempoValidator
from swing_phase.schemas.tempo_dto import PhaseMarkers, TestResult, ValidationResult

logger = logging.getLogger(__name__)


def _icon(result: TestResult) -> str:
    if result.passed:
        return "✅"
    return "❌" if result.severity == "critical" else "⚠️"


def generate_test_report(validations: list[ValidationResult]) -> str:
    lines = ["=== PHASE DETECTION TEST SUITE REPORT ===", ""]

    for validation in validations:
        lines.append("")
        lines.append(
            f"--- {validation.player_name} ({'PASS' if validation.overall_pass else 'FAIL'}) ---"
        )
        lines.append(f"Accuracy Score: {validation.score}/100")
        lines.append("")

        for result in validation.results:
            lines.append(f"{_icon(result)} {result.test_name}")
            lines.append(f"   Expected: {result.expected}")
            lines.append(f"   Actual: {result.actual}")
            if not result.passed and result.error:
                lines.append(f"   Error: {result.error}")
            lines.append("")

    total = len(validations)
    passed = sum(1 for v in validations if v.overall_pass)
    lines.append("")
    lines.append("=== SUMMARY ===")
    lines.append(f"Total Players Tested: {total}")
    if total:
        avg_score = sum(v.score for v in validations) / total
        lines.append(f"Passed: {passed}/{total} ({passed / total * 100:.1f}%)")
        lines.append(f"Average Accuracy Score: {avg_score:.1f}/100")
    else:
        lines.append("Passed: 0/0")

    return "\n".join(lines) + "\n"


def run_phase_detection_tests(
    markers: PhaseMarkers,
    catalog: Optional[GroundTruthCatalog] = None,
    validator: Optional[TempoValidator] = None,
) -> ValidationResult:
    """기본 선수(Freeman) 기준 검증"""
    catalog = catalog or GroundTruthCatalog.load()
    validator = validator or TempoValidator()
    return validator.validate(markers, catalog.primary)


def run_full_test_suite(
    markers_by_player: Mapping[str, PhaseMarkers],
    catalog: Optional[GroundTruthCatalog] = None,
    validator: Optional[TempoValidator] = None,
) -> str:
    """
    카탈로그의 모든 선수 중 마커가 주어진 선수만 검증 + 엣지 케이스

    Returns:
        텍스트 리포트
    """
    catalog = catalog or GroundTruthCatalog.load()
    validator = validator or TempoValidator()

    validations = [
        validator.validate(markers_by_player[gt.name], gt)
        for gt in catalog.players()
        if gt.name in markers_by_player
    ]
    unknown = [name for name in markers_by_player if name not in catalog]
    if unknown:
        logger.warning(f"[tempo] no ground truth for: {', '.join(unknown)}")

    lines = [generate_test_report(validations), "", "=== EDGE CASE TESTS ==="]
    for result in run_edge_case_tests(validator):
        lines.append(f"{'✅' if result.passed else '❌'} {result.test_name}")
        lines.append(f"   Expected: {result.expected}")
        lines.append(f"   Actual: {result.actual}")
        lines.append("")

    return "\n".join(lines)
