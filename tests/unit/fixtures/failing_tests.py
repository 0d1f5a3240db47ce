"""Test file with a failing test, executed by the CLI tests."""

import asyncio

from ticktest import test


async def slow_failure(t):
    await asyncio.sleep(0)
    t.fatal("expected %s, got %s", "ready", "pending")


test("slow-failure", slow_failure)
test("passing", lambda t: None)
