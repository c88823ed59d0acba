"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from src.api.routes import router
from src.config import get_settings
from src.logging_config import setup_logging
from src.lookup.engine import PriceLookupEngine
from src.providers import build_providers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    setup_logging(settings.log_level, settings.log_format)
    logger.info("starting car price service")

    missing = settings.missing_credentials()
    if missing:
        logger.warning(
            "missing provider credentials, lookups will fail until they are set",
            extra={"missing_env": missing},
        )

    app.state.settings = settings
    app.state.engine = PriceLookupEngine(build_providers(settings))

    logger.info(
        "car price service ready",
        extra={
            "search_provider": settings.search_provider,
            "llm_provider": settings.llm_provider,
            "llm_model": settings.llm_model,
            "port": settings.port,
        },
    )

    yield

    logger.info("shutting down car price service")


app = FastAPI(title="Car Price Service", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "OK"


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("src.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())
