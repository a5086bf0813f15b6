"""Passadas de scraping sobre documentos já carregados."""

from __future__ import annotations

from collections.abc import Iterable

from gazet_core.domain.contracts import ContentSink, ScrapePass, TreeDocument
from gazet_core.domain.errors import MissingAncestorError
from gazet_core.infrastructure.scraping.class_matching import (
    class_contains_substring,
    find_ancestor,
)


class ArticleScrapePass(ScrapePass):
    """Extrai título, introdução e parágrafos do corpo de um artigo.

    Um elemento é incluído quando a sua própria classe contém algum dos
    ``title_markers`` ou quando o pai ou o avô contêm algum dos
    ``container_markers``. Elementos cujo HTML interno contenha algum dos
    ``excluded_snippets`` são descartados. Todas as verificações de classe são
    por substring no atributo bruto.
    """

    def __init__(
        self,
        *,
        selector: str,
        title_markers: Iterable[str],
        container_markers: Iterable[str],
        excluded_snippets: Iterable[str] = (),
    ) -> None:
        self._selector = selector
        self._title_markers = tuple(title_markers)
        self._container_markers = tuple(container_markers)
        self._excluded_snippets = tuple(excluded_snippets)

    def run(self, document: TreeDocument, sink: ContentSink) -> None:
        for element in document.select(self._selector):
            parent = element.parent_element
            grandparent = parent.parent_element if parent is not None else None
            included = any(
                class_contains_substring(element, marker) for marker in self._title_markers
            ) or any(
                class_contains_substring(parent, marker)
                or class_contains_substring(grandparent, marker)
                for marker in self._container_markers
            )
            if not included:
                continue
            html = element.inner_html
            if any(snippet in html for snippet in self._excluded_snippets):
                continue
            sink.content(html, "")
        sink.finished()


class TocScrapePass(ScrapePass):
    """Extrai os títulos dos teasers do índice e o link do teaser que os contém.

    O ancestral é procurado por pertença exata de classe. Quando nenhum
    ancestral é encontrado, ``require_ancestor`` decide entre falhar com
    ``MissingAncestorError`` (sem sinalizar ``finished``) ou emitir o título
    com URL vazia.
    """

    def __init__(
        self,
        *,
        selector: str,
        container_marker: str,
        require_ancestor: bool = True,
    ) -> None:
        self._selector = selector
        self._container_marker = container_marker
        self._require_ancestor = require_ancestor

    @property
    def require_ancestor(self) -> bool:
        return self._require_ancestor

    def run(self, document: TreeDocument, sink: ContentSink) -> None:
        for element in document.select(self._selector):
            html = element.inner_html
            ancestor = find_ancestor(element, self._container_marker)
            if ancestor is None:
                if self._require_ancestor:
                    raise MissingAncestorError(self._container_marker, html)
                sink.content(html, "")
                continue
            sink.content(html, ancestor.link_target or "")
        sink.finished()


__all__ = ["ArticleScrapePass", "TocScrapePass"]
