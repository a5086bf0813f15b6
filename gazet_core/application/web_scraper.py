"""Caso de uso que baixa um recurso e aplica uma passada de scraping."""

from __future__ import annotations

from logging import Logger

from gazet_core.domain.contracts import (
    Clock,
    DocumentParser,
    PageFetcher,
    ResourceCallback,
    ScrapePass,
    TextCleaner,
    UrlNormalizer,
    WebResource,
)
from gazet_core.domain.errors import FetchError, GazetError, ScrapeError
from gazet_core.infrastructure.scraping.resource_sink import ResourceSink

NO_CONNECTION_MESSAGE = "Sem conexão com o site de notícias"


class _Completion:
    """Callback interno que registra o término da passada."""

    def __init__(self) -> None:
        self.finished = False

    def on_success(self, resource: WebResource) -> None:
        self.finished = True

    def on_error(self, resource: WebResource, message: str) -> None:  # pragma: no cover - não usado pelo sink
        self.finished = False


class WebScraper:
    """Busca a página de um recurso e preenche o seu conteúdo.

    Não é reentrante: quem chama deve garantir que apenas um recurso seja
    processado por vez.
    """

    def __init__(
        self,
        *,
        fetcher: PageFetcher,
        parser: DocumentParser,
        text_cleaner: TextCleaner,
        url_normalizer: UrlNormalizer | None,
        clock: Clock,
        logger: Logger,
    ) -> None:
        self._fetcher = fetcher
        self._parser = parser
        self._text_cleaner = text_cleaner
        self._url_normalizer = url_normalizer
        self._clock = clock
        self._logger = logger

    def scrape(
        self,
        resource: WebResource,
        scrape_pass: ScrapePass,
        callback: ResourceCallback,
    ) -> None:
        """Executa a passada sobre a página do recurso e notifica ``callback``.

        Em caso de sucesso, ``resource.content`` é substituído e
        ``callback.on_success`` é chamado; em caso de falha conhecida,
        ``callback.on_error`` recebe uma mensagem legível.
        """

        self._logger.info(
            "scrape.start",
            extra={
                "extra": {
                    "at": self._clock.now().isoformat(),
                    "url": resource.url,
                    "pass": scrape_pass.__class__.__name__,
                }
            },
        )

        try:
            html = self._fetcher.fetch(resource.url)
        except FetchError as exc:
            self._logger.warning(
                "scrape.fetch_error",
                extra={"extra": {"url": resource.url, "error": str(exc)}},
            )
            callback.on_error(resource, NO_CONNECTION_MESSAGE)
            return

        completion = _Completion()
        sink = ResourceSink(
            resource,
            completion,
            text_cleaner=self._text_cleaner,
            url_normalizer=self._url_normalizer,
        )
        try:
            document = self._parser.parse(html)
            scrape_pass.run(document, sink)
        except GazetError as exc:
            self._logger.error(
                "scrape.error",
                extra={
                    "extra": {
                        "url": resource.url,
                        "reason": exc.__class__.__name__,
                        "error": str(exc),
                    }
                },
            )
            callback.on_error(resource, str(exc))
            return
        except Exception as exc:  # noqa: BLE001
            self._logger.exception(
                "scrape.unexpected",
                extra={"extra": {"url": resource.url}},
            )
            raise ScrapeError("Erro inesperado durante o scraping", cause=exc) from exc

        if not completion.finished:
            message = "Passada de scraping terminou sem sinalizar conclusão"
            self._logger.error(
                "scrape.error",
                extra={"extra": {"url": resource.url, "error": message}},
            )
            callback.on_error(resource, message)
            return

        self._logger.info(
            "scrape.finish",
            extra={
                "extra": {
                    "at": self._clock.now().isoformat(),
                    "url": resource.url,
                    "count": len(resource.content),
                }
            },
        )
        callback.on_success(resource)
