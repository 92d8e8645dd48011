"""Coroutines: sequential awaits, concurrent joins and detached tasks."""

from __future__ import annotations

import asyncio

from tour.users import connect_user, fetch_user_id, fetch_username, spawn_detached


async def demo_1_await_chain() -> None:
    """``fetch_username`` awaits ``fetch_user_id`` and consumes its result."""
    user_id = await fetch_user_id("primary")
    username = await fetch_username("secondary")
    print("1. await chain:", user_id, username, sep=" | ")


async def demo_2_concurrent_join() -> None:
    """Both lookups inside ``connect_user`` overlap and are joined."""
    print("2. connect:", await connect_user("secondary"))


async def demo_3_detached_task() -> None:
    """Start work without awaiting it; here we only wait to keep output ordered."""
    task = spawn_detached(connect_user("primary"))
    print("3. detached: scheduled", task.done())
    await asyncio.sleep(0.01)
    print("3b. detached result:", task.result() if task.done() else "pending")


async def _run() -> None:
    await demo_1_await_chain()
    await demo_2_concurrent_join()
    await demo_3_detached_task()


def run_all() -> None:
    """Drive the coroutine demos from synchronous code."""
    asyncio.run(_run())


if __name__ == "__main__":
    run_all()
