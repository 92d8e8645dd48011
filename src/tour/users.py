"""Asynchronous user lookups.

``connect_user`` runs both lookups concurrently and joins them, and
``spawn_detached`` starts work the caller never awaits.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Coroutine, Set

logger = logging.getLogger(__name__)

PRIMARY_SERVER = "primary"
PRIMARY_USER_ID = 97
FALLBACK_USER_ID = 501

# Detached tasks are only weakly referenced by the event loop.
_background_tasks: Set[asyncio.Task[Any]] = set()


async def fetch_user_id(server: str) -> int:
    await asyncio.sleep(0)
    if server == PRIMARY_SERVER:
        return PRIMARY_USER_ID
    return FALLBACK_USER_ID


async def fetch_username(server: str) -> str:
    user_id = await fetch_user_id(server)
    if user_id == FALLBACK_USER_ID:
        return "John Appleseed"
    return "Guest"


async def connect_user(server: str) -> str:
    """Look up id and name side by side, then greet the user."""
    user_id, username = await asyncio.gather(
        fetch_user_id(server), fetch_username(server)
    )
    greeting = f"Hello {username}, user ID {user_id}"
    logger.info(greeting)
    return greeting


def _forget(task: asyncio.Task[Any]) -> None:
    _background_tasks.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("detached task %s failed", task.get_name(), exc_info=exc)


def spawn_detached(coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any]:
    """Schedule ``coro`` on the running loop without waiting for it.

    Must be called from inside a running event loop.
    """
    task = asyncio.get_running_loop().create_task(coro)
    _background_tasks.add(task)
    task.add_done_callback(_forget)
    return task


def pending_detached() -> int:
    return len(_background_tasks)
