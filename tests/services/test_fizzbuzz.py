"""Tests for FizzBuzzService."""

import threading
from pathlib import Path

import pytest

from sixtydays.config.settings import SixtySettings
from sixtydays.infrastructure.workspace import Workspace
from sixtydays.services.fizzbuzz import FizzBuzzService


class TestFizzBuzzService:
    def test_sequence(self, workspace: Workspace) -> None:
        result = FizzBuzzService(workspace).sequence(1, 15)
        assert result.ok
        answers = [item["answer"] for item in result.data["items"]]
        assert answers[:5] == ["1", "2", "Fizz", "4", "Buzz"]
        assert answers[-1] == "FizzBuzz"
        assert result.data["count"] == 15

    def test_single_number(self, workspace: Workspace) -> None:
        result = FizzBuzzService(workspace).sequence(9, 9)
        assert result.data["items"] == [{"number": 9, "answer": "Fizz"}]

    def test_invalid_range(self, workspace: Workspace) -> None:
        result = FizzBuzzService(workspace).sequence(10, 1)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_RANGE"

    def test_worker_uses_configured_timeout(self, workspace: Workspace) -> None:
        with FizzBuzzService(workspace).worker() as worker:
            assert worker.ask(30) == "FizzBuzz"


def _settings_with(tmp_path: Path, toml: str) -> SixtySettings:
    (tmp_path / "sixtydays.toml").write_text(toml)
    return SixtySettings.from_cli(root=tmp_path)


class TestFizzBuzzLimits:
    def test_range_above_max_count(self, tmp_path: Path) -> None:
        ws = Workspace(_settings_with(tmp_path, "[fizzbuzz]\nmax_count = 10\n"))
        result = FizzBuzzService(ws).sequence(1, 11)
        assert result.error is not None
        assert result.error.code == "INVALID_RANGE"
        assert result.error.detail["max_count"] == 10
        assert FizzBuzzService(ws).sequence(1, 10).data["count"] == 10

    def test_default_cap(self, workspace: Workspace) -> None:
        result = FizzBuzzService(workspace).sequence(1, 100_000_000)
        assert result.error is not None
        assert result.error.code == "INVALID_RANGE"

    def test_timeout(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        release = threading.Event()

        def stuck(number: int) -> str:
            release.wait(5.0)
            return str(number)

        monkeypatch.setattr("sixtydays.services.fizzbuzz.fizzbuzz", stuck)
        ws = Workspace(_settings_with(tmp_path, "[fizzbuzz]\ntimeout_seconds = 0.05\n"))
        try:
            result = FizzBuzzService(ws).sequence(1, 3)
        finally:
            release.set()
        assert result.error is not None
        assert result.error.code == "TIMEOUT"
        assert result.error.detail == {"number": 1}
