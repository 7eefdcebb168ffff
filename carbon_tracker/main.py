import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from carbon_tracker.api import activities, factors, summary
from carbon_tracker.db.crud import ensure_default_user
from carbon_tracker.db.session import SessionLocal, init_db
from carbon_tracker.settings import settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    init_db()
    if settings.seed_demo_user:
        db = SessionLocal()
        try:
            if ensure_default_user(db):
                logger.info("Seeded demo user")
        finally:
            db.close()
    yield

app = FastAPI(title="Carbon Tracker API", lifespan=lifespan)

# permissive CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "Content-Type", "Accept"],
)

app.include_router(activities.router, prefix="/api/activities", tags=["activities"])
app.include_router(summary.router, prefix="/api/summary", tags=["summary"])
app.include_router(factors.router, prefix="/api/factors", tags=["factors"])


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "database error"})


@app.get("/api/health")
def health():
    return {"status": "ok", "service": "carbon-tracker"}
