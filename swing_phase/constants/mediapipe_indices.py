# MediaPipe Pose landmark indices
L_SHOULDER, R_SHOULDER = 11, 12
L_WRIST,   R_WRIST     = 15, 16
L_HIP,     R_HIP       = 23, 24
L_KNEE,    R_KNEE      = 25, 26
L_ANKLE,   R_ANKLE     = 27, 28

NUM_LANDMARKS = 33

# Triplets for knee flex angles (hip - knee - ankle)
# 타자 기준 앞다리 = 왼쪽 (우타 기준 카메라 정면)
FRONT_LEG = (L_HIP, L_KNEE, L_ANKLE)
BACK_LEG  = (R_HIP, R_KNEE, R_ANKLE)
FRONT_ANKLE = L_ANKLE

# FrameAnalyzer 가 실제로 읽는 landmark
USED_LANDMARKS = (
    L_SHOULDER, R_SHOULDER, L_WRIST, R_WRIST,
    L_HIP, R_HIP, L_KNEE, R_KNEE, L_ANKLE, R_ANKLE,
)
