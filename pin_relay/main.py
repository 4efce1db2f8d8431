import logging
from contextlib import asynccontextmanager
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.config import get_settings
from .core.errors import RelayError, relay_error_handler
from .core.observability import log_requests, setup_logging
from .api.routes import health, uploads

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    if not settings.pinata_configured:
        logger.warning("PINATA_API_KEY / PINATA_SECRET_KEY not set; uploads will fail")
    yield

def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Pin Relay", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)
    app.add_exception_handler(RelayError, relay_error_handler)

    app.include_router(uploads.router)
    app.include_router(health.router)

    return app

app = create_app()

def run():
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    logger.info("Backend server running on http://%s:%s", settings.bind_host, settings.PORT)
    uvicorn.run(app, host=settings.bind_host, port=settings.PORT, log_config=None)

if __name__ == "__main__":
    run()
