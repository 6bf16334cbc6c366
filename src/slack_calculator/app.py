"""FastAPI application with lifespan and health endpoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from slack_calculator.config import ConfigurationError, get_settings
from slack_calculator.logging_config import configure_logging
from slack_calculator.slack.router import router as slack_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load config on startup.

    Missing configuration is reported once here; requests then fail with 500
    until the environment is fixed.
    """
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        configure_logging()
        logger.critical("Startup configuration incomplete: %s", exc)
        app.state.settings = None
    else:
        configure_logging(settings.log_level)
        app.state.settings = settings
    yield


app = FastAPI(
    title="Slack Calculator",
    lifespan=lifespan,
)
app.include_router(slack_router)


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "slack-calculator",
        "version": "0.1.0",
    }
