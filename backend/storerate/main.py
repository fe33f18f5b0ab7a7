from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from storerate.api.api import api_router
from storerate.core.config import settings
from storerate.core.errors import register_exception_handlers
from storerate.core.logger import setup_logger
from storerate.database.database import check_connection, init_db

logger = setup_logger("main")

app = FastAPI(
    title="StoreRate API",
    description="Store directory with role-based management and 1-5 star ratings",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix="/api")

@app.get("/")
def root():
    return {"message": "API is running..."}

@app.on_event("startup")
def on_startup():
    logger.info(f"Starting StoreRate API ({settings.ENVIRONMENT})")
    try:
        check_connection()
        logger.info("Database connected successfully")
    except Exception as e:
        logger.error(f"Unable to connect to the database: {e}")
        raise

    # Only create tables when explicitly requested; migrations own the schema otherwise
    if settings.DB_SYNC:
        init_db()
