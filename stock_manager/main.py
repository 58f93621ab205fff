from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from . import __version__
from .config import settings
from .database import engine, Base
from .exceptions import StockManagerError
from .api import api_router

# Logging setup
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle"""
    # Startup
    logger.info("🚀 Starting Stock Manager...")

    try:
        if settings.create_tables_on_startup:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("✅ Database tables created")

        logger.info("🎉 Stock Manager started successfully!")

        yield  # the application is running

    except Exception as e:
        logger.error(f"❌ Failed to start Stock Manager: {e}")
        raise

    # Shutdown
    logger.info("🛑 Shutting down Stock Manager...")

    await engine.dispose()
    logger.info("✅ Database connection closed")


app = FastAPI(
    title=settings.app_name,
    description="Stock, catalogue and order management for a small shop",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/health")
async def health_check():
    """Service health"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": __version__
    }


@app.get("/")
async def root():
    return {
        "message": f"{settings.app_name} API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


# Exception handlers
@app.exception_handler(StockManagerError)
async def stock_manager_error_handler(request: Request, exc: StockManagerError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": type(exc).__name__, "detail": exc.message}
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "ValidationError", "detail": jsonable_encoder(exc.errors())}
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"❌ Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": "An unexpected error occurred"
        }
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "stock_manager.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
