"""Tests for cancelling upstream work when the client disconnects."""

import asyncio

import pytest

from user_relay.domain.users.errors import ClientDisconnectedError
from user_relay.interfaces.users.router import await_unless_disconnected


class FakeRequest:
    def __init__(self, disconnected: bool) -> None:
        self.disconnected = disconnected

    async def is_disconnected(self) -> bool:
        return self.disconnected


class TestAwaitUnlessDisconnected:
    """Tests for await_unless_disconnected."""

    @pytest.mark.asyncio
    async def test_returns_result_when_connected(self) -> None:
        async def lookup() -> str:
            return "done"

        result = await await_unless_disconnected(FakeRequest(False), lookup())

        assert result == "done"

    @pytest.mark.asyncio
    async def test_propagates_lookup_errors(self) -> None:
        async def lookup() -> str:
            raise LookupError("boom")

        with pytest.raises(LookupError):
            await await_unless_disconnected(FakeRequest(False), lookup())

    @pytest.mark.asyncio
    async def test_cancels_pending_lookup_on_disconnect(self) -> None:
        cancelled = asyncio.Event()

        async def slow_lookup() -> str:
            try:
                await asyncio.sleep(30)
            except asyncio.CancelledError:
                cancelled.set()
                raise
            return "too late"

        with pytest.raises(ClientDisconnectedError):
            await await_unless_disconnected(FakeRequest(True), slow_lookup())

        await asyncio.wait_for(cancelled.wait(), timeout=1)
        assert cancelled.is_set()

