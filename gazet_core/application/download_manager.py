"""Fila de downloads de recursos, processados um de cada vez."""

from __future__ import annotations

from logging import Logger

from gazet_core.application.web_scraper import WebScraper
from gazet_core.domain.contracts import ResourceCallback, ScrapePass, WebResource
from gazet_core.domain.errors import GazetError


class _Outcome:
    def __init__(self) -> None:
        self.error: str | None = None

    def on_success(self, resource: WebResource) -> None:
        self.error = None

    def on_error(self, resource: WebResource, message: str) -> None:
        self.error = message


class DownloadManager:
    """Gerencia o download de recursos com uma única passada de scraping.

    Apenas um recurso é baixado por vez, mas vários podem ser agendados (ou
    removidos). Agendar novamente um recurso pendente apenas acrescenta o
    callback; um recurso que já tem conteúdo é entregue imediatamente.
    """

    def __init__(self, scraper: WebScraper, scrape_pass: ScrapePass, *, logger: Logger) -> None:
        self._scraper = scraper
        self._scrape_pass = scrape_pass
        self._logger = logger
        self._pending: dict[WebResource, list[ResourceCallback]] = {}
        self._ongoing: WebResource | None = None
        self._draining = False

    @property
    def ongoing(self) -> WebResource | None:
        return self._ongoing

    @property
    def pending(self) -> tuple[WebResource, ...]:
        return tuple(self._pending)

    def schedule(self, resource: WebResource, callback: ResourceCallback) -> None:
        if resource.content:
            callback.on_success(resource)
            return

        self._pending.setdefault(resource, []).append(callback)
        self._logger.info(
            "download.scheduled",
            extra={"extra": {"url": resource.url, "pending": len(self._pending)}},
        )
        if not self._draining:
            self._drain()

    def remove(self, resource: WebResource) -> None:
        if self._pending.pop(resource, None) is not None:
            self._logger.info("download.removed", extra={"extra": {"url": resource.url}})

    def _drain(self) -> None:
        self._draining = True
        try:
            while self._pending:
                resource = next(iter(self._pending))
                callbacks = self._pending[resource]
                self._ongoing = resource
                outcome = _Outcome()
                try:
                    self._scraper.scrape(resource, self._scrape_pass, outcome)
                except GazetError as exc:
                    outcome.on_error(resource, str(exc))
                finally:
                    self._pending.pop(resource, None)
                    self._ongoing = None

                if outcome.error is not None:
                    self._logger.warning(
                        "download.failed",
                        extra={"extra": {"url": resource.url, "error": outcome.error}},
                    )
                for callback in callbacks:
                    if outcome.error is None:
                        callback.on_success(resource)
                    else:
                        callback.on_error(resource, outcome.error)
        finally:
            self._draining = False
