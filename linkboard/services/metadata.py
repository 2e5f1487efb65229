import logging
import re

import httpx

from linkboard.exceptions import TitleFetchError

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"

# First match wins; no DOTALL, no IGNORECASE, entities left as-is.
OG_TITLE_RE = re.compile(r'<meta property="og:title" content="(.*?)"')
TITLE_RE = re.compile(r"<title>(.*?)</title>")


def extract_title(html: str) -> str:
    """Return the Open Graph title, else the ``<title>`` text, else "Untitled"."""
    og_title = OG_TITLE_RE.search(html)
    if og_title:
        return og_title.group(1)
    title = TITLE_RE.search(html)
    if title:
        return title.group(1)
    return UNTITLED


class MetadataService:
    """Fetches a page and pulls a display title out of its markup."""

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def fetch_title(self, url: str) -> str:
        try:
            response = await self._client.get(url)
            html = response.text
        except Exception as exc:
            logger.warning("Could not fetch %s: %s", url, exc)
            raise TitleFetchError(url, str(exc)) from exc
        return extract_title(html)
