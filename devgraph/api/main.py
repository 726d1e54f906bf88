"""
FastAPI application entry point for the developer community API.

Run with: python -m devgraph.api.main
      or: uvicorn devgraph.api.main:app --host 127.0.0.1 --port 3000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from devgraph import __version__
from devgraph.api.config import (
    get_api_host,
    get_api_port,
    get_log_dir,
    get_log_file,
    get_log_level,
)
from devgraph.api.routers import connections, interests, recommendations, system, users
from devgraph.core.community import CommunityGraph
from devgraph.core.errors import (
    CommunityError,
    DuplicateConnection,
    DuplicateUser,
    InvalidDate,
    InvalidInterest,
    SelfConnection,
    UnknownUser,
)
from devgraph.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    UnknownUser: 404,
    DuplicateUser: 409,
    DuplicateConnection: 409,
    SelfConnection: 400,
    InvalidDate: 400,
    InvalidInterest: 400,
}


async def community_error_handler(request: Request, exc: CommunityError) -> JSONResponse:
    """Translate core errors into HTTP responses."""
    status_code = ERROR_STATUS.get(type(exc), 400)
    logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_api_logging(level=get_log_level(), log_file=get_log_file(), log_dir=get_log_dir())
    stats = app.state.community.stats()
    logger.info(f"Community API {__version__} starting ({stats['users']} users)")
    yield
    logger.info("Shutdown signal received, stopping server gracefully...")


def create_app(community: CommunityGraph | None = None) -> FastAPI:
    """
    Build the API around a community graph.

    Args:
        community: Shared state to serve; a fresh empty graph if None
    """
    app = FastAPI(
        title="Developer Community API",
        description="Developer profiles, typed connections and interest-based recommendations",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.community = community if community is not None else CommunityGraph()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(CommunityError, community_error_handler)

    app.include_router(users.router)
    app.include_router(connections.router)
    app.include_router(recommendations.router)
    app.include_router(interests.router)
    app.include_router(system.router)

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "message": "Developer Community API",
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())
