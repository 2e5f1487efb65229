class LinkboardError(Exception):
    """Base class for errors raised by linkboard."""


class TitleFetchError(LinkboardError):
    """The page behind a URL could not be fetched or read."""

    def __init__(self, url: str, reason: str | None = None) -> None:
        self.url = url
        self.reason = reason
        message = f"Failed to fetch title for {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
