# 템포 검증 룰 (단위: ms, contact 기준 역방향)
MARKER_MIN_SEPARATION_MS = 100

FIRE_DURATION_RANGE_MS = (250, 500)
FIRE_DURATION_CRITICAL_MS = (200, 550)

LOAD_DURATION_RANGE_MS = (500, 1200)

# 생리학적 한계 (선수 프로파일과 무관)
TEMPO_HARD_BOUNDS = (1.5, 5.0)
TEMPO_MIDPOINT_TOLERANCE = 0.3

PELVIS_GAP_RANGE_MS = (100, 200)
PELVIS_GAP_CRITICAL_MS = (80, 220)

# overall pass 정책 (고정)
MAX_WARNING_FAILURES = 2
CRITICAL_WEIGHT = 20
WARNING_WEIGHT = 10

GENERIC_PLAYER_NAME = "Generic"
PRIMARY_PLAYER_NAME = "Freddie Freeman"
GROUND_TRUTH_BASE_NAME = "players.json"
