import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session
import uvicorn

from coaching_app.core.config import settings
from coaching_app.core.database import Base, engine
from coaching_app.core.dependencies import get_db
from coaching_app.core.exceptions import register_exception_handlers
from coaching_app.api.v1.main import api_router
import coaching_app.models  # noqa: F401  registers tables on Base.metadata

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # A database that cannot be reached at startup is fatal
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        if settings.AUTO_CREATE_TABLES:
            Base.metadata.create_all(bind=engine)
    except Exception:
        logger.exception("[Startup] Failed to connect to database")
        raise
    logger.info(f"[Startup] {settings.PROJECT_NAME} connected to database")
    try:
        yield
    finally:
        engine.dispose()
        logger.info("[Shutdown] Database connections closed")


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan,
)

# Parse CORS origins from comma-separated string in settings
cors_origins = [origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "Content-Type", "Accept", "Authorization", "X-Requested-With"],
    expose_headers=["Content-Length"],
)

register_exception_handlers(app)
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
async def read_root():
    return {"message": "Coaching app backend is running"}


@app.get("/health")
def health(db: Session = Depends(get_db)):
    db.execute(text("SELECT 1"))
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
