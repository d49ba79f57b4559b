from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from config.logging import setup_logging
from config.settings import settings
from core.errors import FetchFailure, MutationFailure, RecordNotFound, ValidationFailure
from core.use_cases.auth_use_cases import ensure_operator
from infrastructure.db.sqlite import init_db, connect
from infrastructure.db.sqlite_operators import SQLiteOperatorRepository
from infrastructure.web.controllers.auth_controller import router as auth_router
from infrastructure.web.controllers.dashboard_controller import router as dashboard_router
from infrastructure.web.controllers.user_controller import router as user_router
from infrastructure.web.controllers.content_controller import router as content_router
from infrastructure.web.controllers.transaction_controller import router as transaction_router
from infrastructure.web.controllers.package_controller import router as package_router
from infrastructure.web.controllers.announcement_controller import router as announcement_router
from infrastructure.web.controllers.stats_controller import router as stats_router
from infrastructure.web.controllers.settings_controller import router as settings_router


app = FastAPI(title="ARVINmatch Admin")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
def on_startup():
    setup_logging()
    init_db(settings.DB_PATH)
    conn = connect(settings.DB_PATH)
    try:
        ensure_operator(SQLiteOperatorRepository(conn), settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
    finally:
        conn.close()


# ошибки действий -> HTTP; detail уходит оператору как уведомление
@app.exception_handler(ValidationFailure)
async def validation_failure_handler(request: Request, exc: ValidationFailure):
    return JSONResponse(status_code=400, content={"detail": str(exc)})

@app.exception_handler(RecordNotFound)
async def not_found_handler(request: Request, exc: RecordNotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})

@app.exception_handler(FetchFailure)
@app.exception_handler(MutationFailure)
async def store_failure_handler(request: Request, exc: Exception):
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=503, content={"detail": str(exc)})

app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(user_router)
app.include_router(content_router)
app.include_router(transaction_router)
app.include_router(package_router)
app.include_router(announcement_router)
app.include_router(stats_router)
app.include_router(settings_router)
