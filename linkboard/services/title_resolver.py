import logging
from typing import Protocol

import httpx

from linkboard.config import settings
from linkboard.exceptions import TitleFetchError
from linkboard.services.metadata import MetadataService

logger = logging.getLogger(__name__)


class TitleResolver(Protocol):
    async def resolve(self, url: str) -> str: ...


class HttpTitleResolver:
    """Resolves titles through the ``/api/metadata`` endpoint.

    Never raises: a non-success response, an unreadable body or a transport
    error all resolve to the URL itself.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str | None = None) -> None:
        if base_url is None:
            base_url = str(settings.api_base_url)
        self._client = client
        self._endpoint = f"{base_url.rstrip('/')}/api/metadata"

    async def resolve(self, url: str) -> str:
        try:
            response = await self._client.get(self._endpoint, params={"url": url})
            response.raise_for_status()
            title = response.json()["title"]
            if not isinstance(title, str):
                raise TypeError(f"title is {type(title).__name__}, not str")
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
            logger.info("Title lookup for %s failed, using the URL: %s", url, exc)
            return url
        return title


class MetadataTitleResolver:
    """Resolves titles in process through a :class:`MetadataService`."""

    def __init__(self, service: MetadataService) -> None:
        self._service = service

    async def resolve(self, url: str) -> str:
        try:
            return await self._service.fetch_title(url)
        except TitleFetchError:
            logger.info("Title lookup for %s failed, using the URL", url)
            return url
