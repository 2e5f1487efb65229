from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from linkboard.api.deps import get_metadata_service
from linkboard.config import settings
from linkboard.schemas import ErrorRead, MetadataRead
from linkboard.services.metadata import MetadataService

router = APIRouter(prefix="/metadata", tags=["metadata"])


@router.get(
    "",
    response_model=MetadataRead,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorRead},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorRead},
    },
)
async def get_metadata(
    service: Annotated[MetadataService, Depends(get_metadata_service)],
    url: str | None = None,
) -> JSONResponse:
    """Best-effort display title for the page at ``url``."""
    if not url:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorRead(error="Invalid URL").model_dump(),
        )

    # TitleFetchError is turned into a 500 by the app's exception handler.
    title = await service.fetch_title(url)
    return JSONResponse(
        content=MetadataRead(title=title).model_dump(),
        headers={
            "Cache-Control": f"public, max-age={settings.metadata_cache_max_age}"
        },
    )
