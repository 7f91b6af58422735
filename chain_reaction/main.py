import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chain_reaction.config import get_settings
from chain_reaction.routers import games
from chain_reaction.services.game.store import get_game_store

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Chain Reaction API")
    logger.debug("Debug mode: %s", settings.DEBUG)

    store = get_game_store()
    logger.info("Game store initialized (max %d games)", settings.MAX_ACTIVE_GAMES)

    yield

    logger.info("Shutting down Chain Reaction API")
    store.clear()
    logger.info("Game store cleanup complete")


app = FastAPI(
    title="Chain Reaction API",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.debug("CORS configured with origins: %s", settings.CORS_ORIGINS)

app.include_router(games.router, prefix="/api/v1")
logger.debug("Routers registered: /api/v1/games")


@app.get("/")
def root():
    return {"message": "Chain Reaction API"}


@app.get("/health")
def health():
    return {"status": "healthy"}
