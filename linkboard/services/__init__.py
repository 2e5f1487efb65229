from linkboard.services.board import LinkBoard
from linkboard.services.metadata import MetadataService, extract_title
from linkboard.services.title_resolver import (
    HttpTitleResolver,
    MetadataTitleResolver,
    TitleResolver,
)

__all__ = [
    "HttpTitleResolver",
    "LinkBoard",
    "MetadataService",
    "MetadataTitleResolver",
    "TitleResolver",
    "extract_title",
]
