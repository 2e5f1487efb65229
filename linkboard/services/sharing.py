"""Serialized and address-embedded forms of a link collection."""

from collections.abc import Sequence
from urllib.parse import parse_qs, quote, urlsplit, urlunsplit

from linkboard.schemas import LinkItem, LinkList

# Characters encodeURIComponent leaves alone.
_COMPONENT_SAFE = "-_.!~*'()"


def serialize_links(links: Sequence[LinkItem]) -> str:
    """Compact JSON array of ``id``/``url``/``title``/``originalTitle`` objects."""
    return LinkList.dump_json(list(links), by_alias=True).decode("utf-8")


def parse_links(serialized: str) -> list[LinkItem]:
    """Inverse of :func:`serialize_links`.

    Raises ``pydantic.ValidationError`` on malformed JSON or records.
    """
    return LinkList.validate_json(serialized)


def encode_component(value: str) -> str:
    return quote(value, safe=_COMPONENT_SAFE)


def address_with_links(address: str, serialized: str, param: str = "links") -> str:
    """``address`` reduced to origin and path, with ``serialized`` as its only query."""
    parts = urlsplit(address)
    query = f"{param}={encode_component(serialized)}"
    return urlunsplit((parts.scheme, parts.netloc, parts.path or "/", query, ""))


def links_from_address(address: str, param: str = "links") -> str | None:
    values = parse_qs(urlsplit(address).query).get(param)
    return values[0] if values else None
