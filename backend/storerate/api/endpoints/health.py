from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from storerate.core.config import settings
from storerate.core.logger import setup_logger
from storerate.database import database

router = APIRouter()

logger = setup_logger("api.health")

@router.get("/health")
def health():
    """Liveness probe; reports database reachability without failing on it."""
    try:
        with database.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        db_status = "connected"
    except SQLAlchemyError as e:
        logger.warning(f"Health check could not reach the database: {e}")
        db_status = "unavailable"

    return {
        "status": "ok",
        "database": db_status,
        "env": {
            "DATABASE_URL": "DATABASE_URL" in settings.model_fields_set,
            "JWT_SECRET": "JWT_SECRET" in settings.model_fields_set,
            "ENVIRONMENT": settings.ENVIRONMENT,
        },
    }
