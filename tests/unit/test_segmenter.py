# tests/unit/test_segmenter.py
import pytest

from swing_phase.constants import PHASE_CONFIDENCE, PHASE_KEY_EVENTS, PHASE_ORDER
from swing_phase.domain.phase.segmenter import PhaseSegmenter
from tests.test_helpers import (
    SWING_BOUNDARIES,
    boundaries,
    create_swing_features,
    create_zero_features,
)


def test_full_swing_detects_all_six_phases(segmenter, swing_features, assert_valid_phase_sequence):
    phases = segmenter.segment(swing_features, fps=30)

    assert [p.name for p in phases] == list(PHASE_ORDER)
    assert boundaries(phases) == SWING_BOUNDARIES
    assert_valid_phase_sequence(phases)


def test_phase_durations_and_metadata(segmenter, swing_features):
    phases = {p.name: p for p in segmenter.segment(swing_features, fps=30)}

    assert phases["load"].duration == pytest.approx(6 / 30)
    assert phases["fire"].duration == pytest.approx(3 / 30)
    assert phases["follow_through"].duration == pytest.approx(15 / 30)

    for name, phase in phases.items():
        assert phase.confidence == PHASE_CONFIDENCE[name]
        assert phase.key_events == PHASE_KEY_EVENTS[name]


def test_com_snapshot_taken_at_phase_end(segmenter, swing_features):
    for phase in segmenter.segment(swing_features, fps=30):
        assert phase.com_position == swing_features[phase.end_frame].com


def test_fewer_than_min_frames_returns_empty(segmenter):
    assert segmenter.segment(create_swing_features(num_frames=9), fps=30) == []


def test_min_frames_is_configurable():
    segmenter = PhaseSegmenter(min_frames=20)
    assert segmenter.segment(create_swing_features(num_frames=15), fps=30) == []


def test_zeroed_sequence_uses_fallback_boundaries(segmenter):
    """트래킹 전부 실패: stance 는 5프레임 fallback, stride 는 +8 fallback (시퀀스 끝에서 잘림)"""
    features = create_zero_features(10)

    phases = segmenter.segment(features, fps=30)

    assert boundaries(phases) == {"stance": (0, 5), "stride": (5, 10)}
    # 끝 경계가 시퀀스 길이와 같으면 마지막 프레임 COM
    assert phases[-1].com_position == features[9].com


def test_stride_fallback_without_foot_contact(segmenter):
    features = create_swing_features(foot_contact=False)

    phases = segmenter.segment(features, fps=30)

    assert boundaries(phases) == {
        "stance": (0, 6),
        "load": (6, 12),
        "stride": (12, 20),
        "fire": (20, 21),
        "contact": (21, 24),
        "follow_through": (24, 39),
    }


def test_phase_skipped_when_boundary_not_found(segmenter, assert_valid_phase_sequence):
    """각속도 0 → fire 경계 = 시작 프레임 → fire 생략, contact 가 이어받음"""
    features = create_swing_features(hip_rotation=False)

    phases = segmenter.segment(features, fps=30)

    assert [p.name for p in phases] == ["stance", "load", "stride", "contact", "follow_through"]
    assert boundaries(phases)["contact"] == (18, 24)
    assert_valid_phase_sequence(phases)


def test_com_shift_threshold_is_configurable(swing_features):
    segmenter = PhaseSegmenter(com_shift_threshold=0.055)

    phases = segmenter.segment(swing_features, fps=30)

    assert boundaries(phases)["stance"] == (0, 8)


def test_confidence_override():
    segmenter = PhaseSegmenter(confidences={"fire": 0.5})

    phases = {p.name: p for p in segmenter.segment(create_swing_features(), fps=30)}

    assert phases["fire"].confidence == 0.5
    assert phases["load"].confidence == PHASE_CONFIDENCE["load"]


def test_segment_is_deterministic(segmenter, swing_features):
    first = segmenter.segment(swing_features, fps=30)
    second = segmenter.segment(swing_features, fps=30)
    assert [p.model_dump() for p in first] == [p.model_dump() for p in second]
