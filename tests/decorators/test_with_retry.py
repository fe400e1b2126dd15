"""Tests for the retry decorator."""

import pytest

from app.decorators import with_retry


class TestWithRetry:
    @pytest.mark.asyncio
    async def test_retries_until_success(self) -> None:
        calls: list[int] = []

        @with_retry(exec_retry=ConnectionError, base_delay=0, max_delay=0)
        async def flaky() -> str:
            calls.append(1)
            if len(calls) == 1:
                msg = "reset"
                raise ConnectionError(msg)
            return "ok"

        assert await flaky() == "ok"
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_reraises_after_last_attempt(self) -> None:
        calls: list[int] = []

        @with_retry(exec_retry=ConnectionError, max_retries=2, base_delay=0, max_delay=0)
        async def down() -> None:
            calls.append(1)
            msg = "down"
            raise ConnectionError(msg)

        with pytest.raises(ConnectionError, match="down"):
            await down()
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_other_errors_are_not_retried(self) -> None:
        calls: list[int] = []

        @with_retry(exec_retry=ConnectionError, base_delay=0, max_delay=0)
        async def bad_input() -> None:
            calls.append(1)
            msg = "bad input"
            raise ValueError(msg)

        with pytest.raises(ValueError, match="bad input"):
            await bad_input()
        assert len(calls) == 1
