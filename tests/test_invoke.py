"""Tests for wren._internal.invoke — uniform sync/async calls."""

import pytest

from wren._internal.invoke import invoke


@pytest.mark.anyio
async def test_sync_callable() -> None:
    assert await invoke(lambda x: x * 2, 21) == 42


@pytest.mark.anyio
async def test_async_callable() -> None:
    async def double(x: int) -> int:
        return x * 2

    assert await invoke(double, 21) == 42


@pytest.mark.anyio
async def test_extra_args_follow_request() -> None:
    assert await invoke(lambda request, env: f"{request}:{env}", "req", "prod") == "req:prod"


@pytest.mark.anyio
async def test_callable_object() -> None:
    class Greeter:
        async def __call__(self, name: str) -> str:
            return f"hi {name}"

    assert await invoke(Greeter(), "ada") == "hi ada"
