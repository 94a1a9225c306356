from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.application.dtos.common_dto import HealthResponse, RootResponse
from src.infrastructure.api.error_handlers import add_error_handlers
from src.infrastructure.api.middlewares import add_default_middlewares
from src.infrastructure.api.routes.auth_routes import router as auth_router
from src.infrastructure.api.routes.posts_routes import router as posts_router
from src.infrastructure.api.routes.profile_routes import router as profile_router
from src.infrastructure.api.routes.users_routes import router as users_router
from src.infrastructure.database.mongo_client import close_mongo_client
from src.infrastructure.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    # the Mongo client connects lazily on first repository use
    yield
    close_mongo_client()


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title="DevConnector Backend",
        version="0.1.0",
        lifespan=lifespan,
        description="""
        ## DevConnector Backend API

        REST API for a small developer social network: accounts, profiles with
        experience and education, posts with likes and comments, and public
        GitHub repositories.

        ### Authentication
        Register (`POST /api/users`) or log in (`POST /api/auth`) to obtain a
        token, then send it in the `x-auth-token` header:
        ```
        x-auth-token: your-jwt-token
        ```

        ### Error Responses
        Every error body has the shape `{"detail": str, "errors": [{"msg", "param"}]}`.
        - **400 Bad Request**: Invalid fields (one entry per violated rule),
          duplicate email or like, invalid credentials, missing profile
        - **401 Unauthorized**: Missing or invalid token, or not the owner
        - **404 Not Found**: Post or comment does not exist
        - **500 Internal Server Error**: Unexpected server error
        """,
        license_info={
            "name": "MIT License",
            "url": "https://opensource.org/licenses/MIT",
        },
    )
    add_default_middlewares(app)
    add_error_handlers(app)

    @app.get(
        "/",
        response_model=RootResponse,
        summary="API Root",
        description="Get basic information about the DevConnector API",
    )
    def root():
        """Get API root information."""
        return {"status": "ok", "service": "devconnector-backend", "version": app.version}

    @app.get(
        "/health",
        response_model=HealthResponse,
        summary="Health Check",
        description="Check if the API service is running and healthy",
    )
    def health():
        """Check API health status."""
        return {"status": "healthy"}

    app.include_router(users_router)
    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(posts_router)
    return app


app = create_app()
