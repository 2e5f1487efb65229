import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from linkboard.api import api_router
from linkboard.config import settings
from linkboard.exceptions import TitleFetchError
from linkboard.schemas import ErrorRead


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    async with httpx.AsyncClient(
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
    ) as client:
        app.state.http_client = client
        yield
    # Shutdown: the client is closed on leaving the block


async def title_fetch_error_handler(
    request: Request, exc: TitleFetchError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorRead(error="Failed to fetch title").model_dump(),
    )


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.include_router(api_router)
    app.add_exception_handler(TitleFetchError, title_fetch_error_handler)

    @app.get("/health", tags=["system"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok", "app": settings.app_name}

    return app


app = create_app()
