"""Main FastAPI application for the CoreTrack inventory cache service."""

import logging
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from config import CORS_ORIGINS, LOG_LEVEL, PORT
from api.dependencies import get_cache
from api.routes import router
from services.cache import TTLCache
from services.sweeper import CacheSweeper

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# One cache per process, shared by the routes and the sweeper
cache = TTLCache()
sweeper = CacheSweeper(cache)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: schedule periodic removal of expired entries
    sweeper.start()
    yield
    await sweeper.stop()


# Create FastAPI app
app = FastAPI(
    title="CoreTrack Cache API",
    description="Inventory and sales endpoints backed by an in-memory TTL cache",
    version="1.0.0",
    lifespan=lifespan
)
app.state.cache = cache

# Add CORS middleware - allow localhost dev servers and configured origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(router)

@app.get("/")
async def root(cache: TTLCache = Depends(get_cache)):
    """Health check endpoint."""
    return {"message": "CoreTrack Cache API is running", "cache_size": cache.size()}

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=PORT, reload=True)
