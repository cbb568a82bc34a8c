import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from swing_phase.api import include_all_routers
from swing_phase.config.settings import settings

if not logging.getLogger().handlers:
    logging.basicConfig(
        level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

# 앱 생성
app = FastAPI(debug=settings.DEBUG_MODE)

# 자동으로 swing_phase/api/* 모듈을 스캔해 라우터 전부 등록
include_all_routers(app)

app.openapi = lambda: get_openapi(
    title="Swing Phase Analysis API",
    version="1.0.0",
    description="타격 스윙 페이즈 감지 / 템포 검증 API",
    routes=app.routes,
)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("swing_phase.main:app", host="0.0.0.0", port=settings.FASTAPI_PORT, reload=True)
