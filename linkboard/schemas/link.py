from typing import Annotated
from uuid import uuid4

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter

_url_adapter = TypeAdapter(AnyUrl)


def new_link_id() -> str:
    return str(uuid4())


def check_url(url: str) -> str:
    """Return ``url`` unchanged if it parses as an absolute URL.

    Raises ``pydantic.ValidationError`` (a ``ValueError``) otherwise.
    """
    _url_adapter.validate_python(url)
    return url


def _unique_ids(links: list["LinkItem"]) -> list["LinkItem"]:
    seen: set[str] = set()
    for link in links:
        if link.id in seen:
            raise ValueError(f"duplicate link id {link.id!r}")
        seen.add(link.id)
    return links


class LinkItem(BaseModel):
    """One bookmarked URL plus its resolved display title."""

    id: str = Field(default_factory=new_link_id)
    url: str
    title: str
    original_title: str = Field(alias="originalTitle")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


LinkList = TypeAdapter(Annotated[list[LinkItem], AfterValidator(_unique_ids)])
