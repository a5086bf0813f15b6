"""Dublês compartilhados pelos testes unitários e de integração."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from gazet_core.domain.contracts import WebResource
from gazet_core.domain.errors import FetchError


class LoggerStub:
    def __init__(self, name: str = "gazet") -> None:
        self.name = name
        self.info_calls: list[tuple[str, dict[str, object]]] = []
        self.warning_calls: list[tuple[str, dict[str, object]]] = []
        self.error_calls: list[tuple[str, dict[str, object]]] = []
        self.exception_calls: list[tuple[str, dict[str, object]]] = []

    def info(self, message: str, *, extra: dict[str, object]) -> None:
        self.info_calls.append((message, extra))

    def warning(self, message: str, *, extra: dict[str, object]) -> None:
        self.warning_calls.append((message, extra))

    def error(self, message: str, *, extra: dict[str, object]) -> None:
        self.error_calls.append((message, extra))

    def exception(self, message: str, *, extra: dict[str, object]) -> None:
        self.exception_calls.append((message, extra))

    def messages(self) -> list[str]:
        calls = self.info_calls + self.warning_calls + self.error_calls + self.exception_calls
        return [message for message, _ in calls]


class ClockStub:
    def __init__(self) -> None:
        self._now = datetime(2024, 1, 1, 12, 0, 0)

    def now(self) -> datetime:
        return self._now


class RecordingSink:
    def __init__(self) -> None:
        self.calls: list[tuple[object, ...]] = []

    def content(self, html: str, url: str) -> None:
        self.calls.append(("content", html, url))

    def finished(self) -> None:
        self.calls.append(("finished",))

    @property
    def fragments(self) -> list[tuple[str, str]]:
        return [(call[1], call[2]) for call in self.calls if call[0] == "content"]

    @property
    def finished_count(self) -> int:
        return sum(1 for call in self.calls if call[0] == "finished")


class RecordingCallback:
    def __init__(self) -> None:
        self.successes: list[WebResource] = []
        self.errors: list[tuple[WebResource, str]] = []

    def on_success(self, resource: WebResource) -> None:
        self.successes.append(resource)

    def on_error(self, resource: WebResource, message: str) -> None:
        self.errors.append((resource, message))


class FakeFetcher:
    def __init__(self, pages: Mapping[str, str]) -> None:
        self._pages = dict(pages)
        self.calls: list[str] = []

    def fetch(self, url: str) -> str:
        self.calls.append(url)
        if url not in self._pages:
            raise FetchError(f"Página inesperada: {url}")
        return self._pages[url]
