"""FastAPI application entry point."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .logging_setup import configure_logging
from .api.routes import search, pathfinding, puzzles, decision

# Loaded once at import; routes read limits through get_app_settings
settings = get_settings()
configure_logging(settings.log_level)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Classical game AI algorithms: search, flood fill, shortest paths, "
                "backtracking, minimax, behavior trees, fuzzy logic and genetic algorithms",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Algorithm routers, all under /api
app.include_router(search.router)
app.include_router(pathfinding.router)
app.include_router(puzzles.router)
app.include_router(decision.router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Game AI Toolkit API",
        "endpoints": {
            "tree_search": "/api/tree/search",
            "flood_fill_grid": "/api/flood-fill/grid",
            "flood_fill_tree": "/api/flood-fill/tree",
            "dijkstra": "/api/pathfinding/dijkstra",
            "bellman_ford": "/api/pathfinding/bellman-ford",
            "sudoku": "/api/puzzles/sudoku",
            "tictactoe": "/api/games/tictactoe/move",
            "behavior_tree": "/api/behavior/run",
            "fuzzy_desirability": "/api/fuzzy/desirability",
            "genetic": "/api/genetic/run",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gameai.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
