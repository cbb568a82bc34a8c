# re-exports: 다른 모듈에서 짧게 import 하도록

from .mediapipe_indices import (
    L_SHOULDER, R_SHOULDER, L_WRIST, R_WRIST,
    L_HIP, R_HIP, L_KNEE, R_KNEE, L_ANKLE, R_ANKLE,
    NUM_LANDMARKS, FRONT_LEG, BACK_LEG, FRONT_ANKLE, USED_LANDMARKS,
)

from .phase_params import (
    DEFAULT_FPS,
    MIN_PHASE_FRAMES,
    FOOT_CONTACT_Y_THRESHOLD,
    COM_SHIFT_THRESHOLD,
    PHASE_ORDER,
    PHASE_CONFIDENCE,
    PHASE_KEY_EVENTS,
    INSUFFICIENT_DATA_ISSUE,
)

from .tempo_params import (
    MARKER_MIN_SEPARATION_MS,
    TEMPO_HARD_BOUNDS,
    GENERIC_PLAYER_NAME,
    PRIMARY_PLAYER_NAME,
    GROUND_TRUTH_BASE_NAME,
)
