"""Tests for weatherfinder._logging — decorators and file logging."""

from __future__ import annotations

import logging

import httpx
import pytest
import respx

from weatherfinder import WeatherClient
from weatherfinder._logging import disable_file_logging, enable_file_logging, log_api_call
from tests.conftest import API_KEY, SAMPLE_SEARCH, SEARCH_URL


class _FakeClient:
    """Minimal class to test the logging decorator."""

    @log_api_call
    def get_items(self, query: str) -> list[dict]:
        return [{"name": "item1"}, {"name": "item2"}]

    @log_api_call
    def get_failing(self, key: int) -> list[dict]:
        raise ValueError("test error")

    @log_api_call
    async def get_items_async(self, query: str) -> dict:
        return {"name": query}

    @log_api_call
    async def get_failing_async(self) -> None:
        raise RuntimeError("async error")


@pytest.fixture
def fake_client() -> _FakeClient:
    return _FakeClient()


@pytest.fixture
def log_file(tmp_path):
    """Route weatherfinder logs to a file under tmp_path."""
    path = tmp_path / "logs" / "api_calls.log"
    enable_file_logging(str(path))
    yield path
    disable_file_logging()
    logging.getLogger("weatherfinder").setLevel(logging.NOTSET)


class TestLogApiCall:
    def test_returns_result(self, fake_client, log_file) -> None:
        assert fake_client.get_items("Paris") == [{"name": "item1"}, {"name": "item2"}]

    def test_logs_call_and_ok(self, fake_client, log_file) -> None:
        fake_client.get_items("Paris")
        content = log_file.read_text(encoding="utf-8")
        assert "CALL: _FakeClient.get_items('Paris')" in content
        assert "OK: _FakeClient.get_items('Paris') -> 2 items" in content

    def test_logs_failure(self, fake_client, log_file) -> None:
        with pytest.raises(ValueError, match="test error"):
            fake_client.get_failing(123)
        content = log_file.read_text(encoding="utf-8")
        assert "FAIL: _FakeClient.get_failing(123)" in content
        assert "ValueError" in content

    def test_preserves_function_name(self, fake_client) -> None:
        assert fake_client.get_items.__name__ == "get_items"
        assert fake_client.get_items_async.__name__ == "get_items_async"

    @pytest.mark.asyncio
    async def test_async_call_logged(self, fake_client, log_file) -> None:
        assert await fake_client.get_items_async(query="Oslo") == {"name": "Oslo"}
        content = log_file.read_text(encoding="utf-8")
        assert "CALL: _FakeClient.get_items_async(query='Oslo')" in content
        assert "OK: _FakeClient.get_items_async(query='Oslo') -> 1 items" in content

    @pytest.mark.asyncio
    async def test_async_failure_logged(self, fake_client, log_file) -> None:
        with pytest.raises(RuntimeError, match="async error"):
            await fake_client.get_failing_async()
        content = log_file.read_text(encoding="utf-8")
        assert "FAIL: _FakeClient.get_failing_async() -> RuntimeError" in content


class TestFileLogging:
    def test_creates_log_directory(self, tmp_path) -> None:
        path = tmp_path / "nested" / "logs" / "api_calls.log"
        try:
            enable_file_logging(str(path))
            _FakeClient().get_items("x")
            assert path.exists()
        finally:
            disable_file_logging()
            logging.getLogger("weatherfinder").setLevel(logging.NOTSET)

    def test_same_path_returns_same_handler(self, log_file) -> None:
        assert enable_file_logging(str(log_file)) is enable_file_logging(str(log_file))

    def test_format(self, fake_client, log_file) -> None:
        fake_client.get_items("Paris")
        first = log_file.read_text(encoding="utf-8").splitlines()[0]
        assert " | INFO | CALL: " in first

    @respx.mock
    def test_api_key_is_not_logged(self, log_file) -> None:
        respx.get(SEARCH_URL).mock(return_value=httpx.Response(200, json=SAMPLE_SEARCH))
        with WeatherClient(api_key=API_KEY) as client:
            client.search_locations("Springfield")
        content = log_file.read_text(encoding="utf-8")
        assert "CALL: WeatherClient.search_locations('Springfield')" in content
        assert "OK: WeatherClient.search_locations('Springfield') -> 3 items" in content
        assert "appid=***" in content
        assert API_KEY not in content
