"""Tests for wren.routing.chain — outcomes and sequential chains."""

import pytest

from wren.routing.chain import CONTINUE, Continue, Done, run_chain, to_outcome


class TestToOutcome:
    def test_none_continues(self) -> None:
        assert to_outcome(None) is CONTINUE

    def test_sentinel_continues(self) -> None:
        assert to_outcome(CONTINUE) is CONTINUE

    def test_value_is_done(self) -> None:
        assert to_outcome("x") == Done("x")

    @pytest.mark.parametrize("value", [0, "", False, [], {}])
    def test_falsy_values_are_done(self, value: object) -> None:
        assert to_outcome(value) == Done(value)

    def test_done_passes_through(self) -> None:
        done = Done(None)
        assert to_outcome(done) is done

    def test_continue_repr(self) -> None:
        assert repr(CONTINUE) == "CONTINUE"
        assert isinstance(CONTINUE, Continue)


class TestRunChain:
    @pytest.mark.anyio
    async def test_empty_chain_continues(self) -> None:
        assert await run_chain((), object()) is CONTINUE

    @pytest.mark.anyio
    async def test_stops_at_first_value(self) -> None:
        calls: list[int] = []

        def first(request: object) -> None:
            calls.append(1)

        async def second(request: object) -> str:
            calls.append(2)
            return "two"

        def third(request: object) -> str:
            calls.append(3)
            return "three"

        assert await run_chain((first, second, third), object()) == Done("two")
        assert calls == [1, 2]

    @pytest.mark.anyio
    async def test_forwards_extra_args(self) -> None:
        def handler(request: object, a: int, b: int) -> int:
            return a + b

        assert await run_chain((handler,), object(), 2, 3) == Done(5)
