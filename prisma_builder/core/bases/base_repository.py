import asyncio
import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


class RepositoryError(Exception):
    """Custom exception for repository errors."""

    pass


class BaseRepository(Generic[T]):
    """In-memory store of one item per session.

    Nothing is persisted; an item lives until its session is deleted, it is
    evicted as the oldest once ``max_items`` sessions exist, or the process
    exits. Each session has its own lock so a read-modify-write cycle on one
    session never interleaves with another request for that session.
    """

    def __init__(self, max_items: Optional[int] = None):
        self.max_items = max_items
        self._items: Dict[str, T] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    # ----------------- CRUD ----------------- #
    async def get(self, item_id: str) -> Optional[T]:
        """Get a single item by session id."""
        return self._items.get(item_id)

    async def create(self, item: T) -> str:
        """Store ``item`` under a new session id and return the id."""
        item_id = uuid.uuid4().hex
        while item_id in self._items:
            item_id = uuid.uuid4().hex
        self._evict()
        self._items[item_id] = item
        self._locks[item_id] = asyncio.Lock()
        return item_id

    def _evict(self) -> None:
        """Drop the oldest sessions until there is room for one more."""
        if not self.max_items:
            return
        while len(self._items) >= self.max_items:
            oldest = next(iter(self._items))
            self._items.pop(oldest)
            self._locks.pop(oldest, None)
            logger.info("Evicted session %s, limit of %d reached", oldest, self.max_items)

    async def save(self, item_id: str, item: T) -> T:
        """Replace the item stored for an existing session."""
        if item_id not in self._items:
            raise RepositoryError(f"Session {item_id} does not exist")
        self._items[item_id] = item
        return item

    async def delete(self, item_id: str) -> bool:
        """Drop a session. Returns False when it did not exist."""
        self._locks.pop(item_id, None)
        return self._items.pop(item_id, None) is not None

    async def exists(self, item_id: str) -> bool:
        return item_id in self._items

    @asynccontextmanager
    async def locked(self, item_id: str) -> AsyncIterator[Optional[T]]:
        """Hold the session lock and yield the current item (None if unknown)."""
        lock = self._locks.get(item_id)
        if lock is None:
            yield None
            return
        async with lock:
            yield self._items.get(item_id)
