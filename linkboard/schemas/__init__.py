from linkboard.schemas.link import LinkItem, LinkList, check_url, new_link_id
from linkboard.schemas.metadata import ErrorRead, MetadataRead

__all__ = [
    "ErrorRead",
    "LinkItem",
    "LinkList",
    "MetadataRead",
    "check_url",
    "new_link_id",
]
