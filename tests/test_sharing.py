import json

import pytest
from pydantic import ValidationError

from linkboard.schemas import LinkItem
from linkboard.services.sharing import (
    address_with_links,
    encode_component,
    links_from_address,
    parse_links,
    serialize_links,
)

LINKS = [
    LinkItem(
        id="a", url="https://example.com", title="Example", original_title="Example"
    ),
    LinkItem(
        id="b",
        url="https://example.com/?q=a+b&x=1",
        title="Copy of Café 100% \"quoted\"",
        original_title="Café",
    ),
]


def test_serialized_shape() -> None:
    data = json.loads(serialize_links(LINKS[:1]))

    assert data == [
        {
            "id": "a",
            "url": "https://example.com",
            "title": "Example",
            "originalTitle": "Example",
        }
    ]


def test_serialization_is_compact() -> None:
    assert serialize_links([]) == "[]"
    assert ", " not in serialize_links(LINKS[:1])


def test_round_trip_keeps_order_and_fields() -> None:
    assert parse_links(serialize_links(LINKS)) == LINKS


def test_round_trip_through_address() -> None:
    address = address_with_links("https://board.local/app", serialize_links(LINKS))

    assert parse_links(links_from_address(address)) == LINKS


@pytest.mark.parametrize(
    "payload", ["not json", "{}", '[{"id": "a"}]', '[{"url": 1, "title": "x"}]']
)
def test_parse_rejects_malformed(payload: str) -> None:
    with pytest.raises(ValidationError):
        parse_links(payload)


def test_encode_component_matches_browser_encoding() -> None:
    assert encode_component("a b+c/d?e=f&g") == "a%20b%2Bc%2Fd%3Fe%3Df%26g"
    assert encode_component("-_.!~*'()") == "-_.!~*'()"
    assert encode_component("é") == "%C3%A9"


def test_address_keeps_origin_and_path_only() -> None:
    address = address_with_links(
        "https://board.local/app?links=old&other=1#frag", "[]"
    )

    assert address == "https://board.local/app?links=%5B%5D"


def test_address_without_path() -> None:
    assert address_with_links("http://localhost:8000", "[]") == (
        "http://localhost:8000/?links=%5B%5D"
    )


def test_links_from_address() -> None:
    assert links_from_address("https://board.local/?links=%5B%5D") == "[]"
    assert links_from_address("https://board.local/?other=1") is None
    assert links_from_address("https://board.local/?links=") is None
    assert links_from_address("https://board.local/?share=%5B%5D", "share") == "[]"


def test_parse_rejects_duplicate_ids() -> None:
    payload = serialize_links([LINKS[0], LINKS[0]])

    with pytest.raises(ValidationError, match="duplicate link id"):
        parse_links(payload)
