import asyncio
import logging

from pydantic import ValidationError

from linkboard.config import settings
from linkboard.schemas import LinkItem, check_url
from linkboard.services.metadata import UNTITLED
from linkboard.services.sharing import (
    address_with_links,
    links_from_address,
    parse_links,
    serialize_links,
)
from linkboard.services.title_resolver import TitleResolver
from linkboard.storage import KeyValueStore

logger = logging.getLogger(__name__)

COPY_PREFIX = "Copy of "


class LinkBoard:
    """Ordered link collection plus selection for one page session.

    Every change to the collection is written to ``store`` and reflected into
    ``address`` before the operation returns.
    """

    def __init__(
        self,
        resolver: TitleResolver,
        store: KeyValueStore,
        address: str,
        *,
        links: list[LinkItem] | None = None,
        storage_key: str | None = None,
        share_param: str | None = None,
    ) -> None:
        self._resolver = resolver
        self._store = store
        self._address = address
        self._storage_key = storage_key or settings.storage_key
        self._share_param = share_param or settings.share_param
        self._links: list[LinkItem] = list(links or [])
        self._selected_id: str | None = self._links[-1].id if self._links else None
        self._persist_lock = asyncio.Lock()

    @classmethod
    async def open(
        cls,
        resolver: TitleResolver,
        store: KeyValueStore,
        address: str | None = None,
        *,
        storage_key: str | None = None,
        share_param: str | None = None,
    ) -> "LinkBoard":
        """Restore a board, preferring links shared in ``address`` over ``store``.

        Unparsable state, including records sharing an id, is logged and
        treated as an empty collection. The
        restored collection is persisted straight away, so shared links replace
        whatever the store held.
        """
        address = address or settings.page_address
        storage_key = storage_key or settings.storage_key
        share_param = share_param or settings.share_param

        serialized = links_from_address(address, share_param)
        if serialized is None:
            serialized = await store.get(storage_key)

        links: list[LinkItem] = []
        if serialized:
            try:
                links = parse_links(serialized)
            except ValidationError as exc:
                logger.warning("Ignoring unreadable stored links: %s", exc)

        board = cls(
            resolver,
            store,
            address,
            links=links,
            storage_key=storage_key,
            share_param=share_param,
        )
        await board._persist()
        return board

    @property
    def links(self) -> tuple[LinkItem, ...]:
        return tuple(self._links)

    @property
    def selected(self) -> LinkItem | None:
        for link in self._links:
            if link.id == self._selected_id:
                return link
        return None

    @property
    def address(self) -> str:
        return self._address

    async def add_link(self, url: str) -> LinkItem:
        """Append a link for ``url`` and select it.

        Raises ``ValueError`` if ``url`` is not a well-formed absolute URL.
        """
        check_url(url)
        title = await self._resolver.resolve(url) or UNTITLED
        link = LinkItem(url=url, title=title, original_title=title)
        # The collection may have changed while the title was resolving.
        self._links = [*self._links, link]
        self._selected_id = link.id
        await self._persist()
        return link

    async def duplicate_link(self, link: LinkItem) -> LinkItem:
        copy = LinkItem(
            url=link.url,
            title=f"{COPY_PREFIX}{link.title}",
            original_title=link.original_title,
        )
        self._links = [*self._links, copy]
        self._selected_id = copy.id
        await self._persist()
        return copy

    async def delete_link(self, link: LinkItem) -> None:
        self._links = [item for item in self._links if item.id != link.id]
        if self._selected_id == link.id:
            self._selected_id = self._links[-1].id if self._links else None
        await self._persist()

    def select_link(self, link: LinkItem) -> None:
        if not any(item.id == link.id for item in self._links):
            raise ValueError(f"Link {link.id} is not on this board")
        self._selected_id = link.id

    def export_as_text(self) -> str:
        return "\n".join(f"{link.title}: {link.url}" for link in self._links)

    def serialize(self) -> str:
        return serialize_links(self._links)

    def shareable_address(self) -> str:
        return address_with_links(self._address, self.serialize(), self._share_param)

    async def _persist(self) -> None:
        # Serialize under the lock so overlapping writes land in order and
        # the last one holds the current collection.
        async with self._persist_lock:
            serialized = self.serialize()
            await self._store.set(self._storage_key, serialized)
            self._address = address_with_links(
                self._address, serialized, self._share_param
            )
