"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from featherbot.api.routes import router
from featherbot.config import get_settings
from featherbot.graph import GraphClient, GraphConfig, PagePipeline
from featherbot.logging_config import setup_logging
from featherbot.messenger import EventDispatcher, MessengerClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting featherbot")

    # One pooled client for both the Graph lookups and the Send API
    http_client = httpx.AsyncClient(timeout=settings.graph_timeout_seconds)

    graph = GraphClient(GraphConfig.from_settings(settings), http_client)
    messenger = MessengerClient.from_settings(settings, http_client)
    pipeline = PagePipeline(graph, messenger)

    app.state.settings = settings
    app.state.dispatcher = EventDispatcher(
        messenger,
        pipeline,
        privacy_policy_url=settings.privacy_policy_url,
    )

    logger.info(
        "featherbot ready",
        extra={
            "graph_api_url": settings.graph_api_url,
            "graph_api_version": settings.graph_api_version,
            "graph_timeout_seconds": settings.graph_timeout_seconds,
            "require_signature": settings.require_signature,
        },
    )

    yield

    logger.info("shutting down featherbot")
    await http_client.aclose()


app = FastAPI(title="Birds of a Feather", lifespan=lifespan)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}
