# Fallback defaults (settings에서 ENV 미지정 시 사용)
DEFAULT_FPS = 30
MIN_PHASE_FRAMES = 10

# 카메라 프레이밍 가정이 들어간 휴리스틱 값들
FOOT_CONTACT_Y_THRESHOLD = 0.8
COM_SHIFT_THRESHOLD = 0.02

# 스윙 페이즈 (순서 고정)
PHASE_ORDER = ("stance", "load", "stride", "fire", "contact", "follow_through")

# 경계 탐색 윈도우 (프레임 수)
STANCE_SEARCH_START = 3
STANCE_FALLBACK_FRAMES = 5
LOAD_SEARCH_WINDOW = 20
STRIDE_SEARCH_WINDOW = 15
STRIDE_FALLBACK_FRAMES = 8
FIRE_SEARCH_WINDOW = 10
CONTACT_SEARCH_WINDOW = 8

# 페이즈별 고정 신뢰도 (통계적으로 보정된 값 아님)
PHASE_CONFIDENCE = {
    "stance": 0.85,
    "load": 0.8,
    "stride": 0.75,
    "fire": 0.9,
    "contact": 0.85,
    "follow_through": 0.8,
}

PHASE_KEY_EVENTS = {
    "stance": ["Initial setup", "Weight distribution"],
    "load": ["Weight shift backward", "Coiling", "Energy storage"],
    "stride": ["Front foot stride", "COM begins forward movement"],
    "fire": ["Hip rotation initiation", "Weight transfer forward"],
    "contact": ["Bat-ball contact", "Peak velocity", "Full extension"],
    "follow_through": ["Deceleration", "Balance recovery"],
}

# 품질 평가 (감점 방식, 가중치는 튜닝용 휴리스틱)
QUALITY_MISSING_PHASE_PENALTY = 15
QUALITY_RULE_PENALTY = 10
LOAD_DURATION_RANGE_S = (0.05, 0.5)
FIRE_DURATION_RANGE_S = (0.03, 0.3)
LOAD_FIRE_RATIO_RANGE = (1.5, 5.0)

INSUFFICIENT_DATA_ISSUE = "Insufficient pose data for phase detection"
