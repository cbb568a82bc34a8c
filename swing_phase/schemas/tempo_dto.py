"""
템포 검증 관련 DTO
PhaseMarkers → TempoValidator → ValidationResult
"""
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["critical", "warning", "info"]
Window = tuple[float, float]


class PhaseMarkers(BaseModel):
    """contact 기준 역방향 ms 오프셋"""
    model_config = ConfigDict(frozen=True)

    load_start: float = Field(..., description="LoadStart (ms before contact)")
    fire_start: float = Field(..., description="FireStart (ms before contact)")
    contact: float = Field(0.0, description="정의상 항상 0")
    pelvis_peak: float = Field(..., description="골반 회전속도 피크 (ms before contact)")


class PlayerGroundTruth(BaseModel):
    """선수별 레퍼런스 프로파일"""
    model_config = ConfigDict(frozen=True)

    name: str
    expected_tempo: float
    tempo_range: Window
    load_start_window: Window
    fire_start_window: Window
    pelvis_peak_window: Window
    player_type: str = ""


class TestResult(BaseModel):
    """단일 체크 결과"""
    # pytest 수집 대상 아님
    __test__ = False
    model_config = ConfigDict(frozen=True)

    test_name: str
    passed: bool
    expected: Any
    actual: Any
    severity: Severity
    error: Optional[str] = None


class ValidationResult(BaseModel):
    """선수 1명에 대한 전체 검증 결과"""
    model_config = ConfigDict(frozen=True)

    player_name: str
    overall_pass: bool
    results: list[TestResult]
    score: int = Field(..., ge=0, le=100)

    @property
    def critical_failures(self) -> int:
        return sum(1 for r in self.results if not r.passed and r.severity == "critical")

    @property
    def warning_failures(self) -> int:
        return sum(1 for r in self.results if not r.passed and r.severity == "warning")
