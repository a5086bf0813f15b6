"""Sink que acumula os fragmentos emitidos no conteúdo de um ``WebResource``."""

from __future__ import annotations

from gazet_core.domain.contracts import (
    ContentSink,
    ResourceCallback,
    TextCleaner,
    UrlNormalizer,
    WebResource,
)


class ResourceSink(ContentSink):
    """Converte cada fragmento em texto e entrega o recurso ao final.

    Uma série de chamadas a ``content`` é esperada, seguida de ``finished``.
    O conteúdo é indexado pelo texto limpo, na ordem de chegada.
    """

    def __init__(
        self,
        resource: WebResource,
        callback: ResourceCallback,
        *,
        text_cleaner: TextCleaner,
        url_normalizer: UrlNormalizer | None = None,
    ) -> None:
        self._resource = resource
        self._callback = callback
        self._text_cleaner = text_cleaner
        self._url_normalizer = url_normalizer
        self._content: dict[str, str] = {}

    def content(self, html: str, url: str | None) -> None:
        url = (url or "").strip()
        if url and self._url_normalizer is not None:
            url = self._url_normalizer.to_absolute(url, self._resource.url)
        self._content[self._text_cleaner.clean_html_to_text(html)] = url

    def finished(self) -> None:
        self._resource.content = self._content
        self._callback.on_success(self._resource)


__all__ = ["ResourceSink"]
