import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blockly.core.config import settings
from blockly.core.database import init_db
from blockly.core.log import configure_logging
from blockly.routers.overrides import router as overrides_router
from blockly.routers.schedule_types import router as schedule_types_router
from blockly.routers.tasks import router as tasks_router
from blockly.routers.views import router as views_router
from blockly.scheduling.errors import InvalidDateFormat, InvalidTimeFormat, InvalidTimeRange

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Mapping of domain exceptions to HTTP status codes
ERROR_STATUS = {
    InvalidTimeFormat: 400,
    InvalidDateFormat: 400,
    InvalidTimeRange: 400,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database ready")
    yield


app = FastAPI(title="Blockly API", lifespan=lifespan)

# Safe fallback for local dev if CORS_ORIGINS is not set
allow_origins = settings.allow_origins or [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _domain_error_handler(status_code: int):
    async def handler(request: Request, exc: Exception):
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    return handler


for exc_type, status_code in ERROR_STATUS.items():
    app.add_exception_handler(exc_type, _domain_error_handler(status_code))

app.include_router(schedule_types_router, prefix="/schedule-types", tags=["schedule-types"])
app.include_router(overrides_router, prefix="/overrides", tags=["overrides"])
app.include_router(tasks_router, prefix="/tasks", tags=["tasks"])
app.include_router(views_router, prefix="/views", tags=["views"])

@app.get("/health")
def health():
    return {"status": "ok"}
