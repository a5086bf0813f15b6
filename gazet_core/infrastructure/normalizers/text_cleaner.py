"""Rotinas utilitárias para extrair texto limpo de fragmentos HTML."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from gazet_core.domain.contracts import TextCleaner
from gazet_core.infrastructure.parsing.html_tree import HTMLDocument, HTMLNode

_RE_WHITESPACE = re.compile(r"\s+")

_BREAKING_TAGS: tuple[str, ...] = (
    "br",
    "p",
    "div",
    "li",
    "ul",
    "ol",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "blockquote",
    "figure",
    "figcaption",
)


class HtmlTextCleaner(TextCleaner):
    """Converte HTML em texto usando o parser leve baseado em ``html.parser``.

    Tags inline são removidas sem introduzir espaços; tags de bloco e ``<br>``
    separam o texto por um espaço.
    """

    def __init__(self, *, breaking_tags: Iterable[str] | None = None) -> None:
        self._breaking_tags = frozenset(breaking_tags or _BREAKING_TAGS)

    def clean_html_to_text(self, html: str) -> str:
        soup = HTMLDocument.from_html(html or "")
        for tag in soup(["script", "style"]):
            tag.decompose()
        parts: list[str] = []
        self._collect(soup.root, parts)
        return _RE_WHITESPACE.sub(" ", "".join(parts)).strip()

    def _collect(self, node: HTMLNode, parts: list[str]) -> None:
        for child in node.children:
            if isinstance(child, str):
                parts.append(child)
                continue
            breaking = child.tag in self._breaking_tags
            if breaking:
                parts.append(" ")
            self._collect(child, parts)
            if breaking:
                parts.append(" ")


def build_text_cleaner(options: Mapping[str, object] | None = None) -> HtmlTextCleaner:
    """Factory compatível com opções em configurações."""

    options = options or {}
    breaking = options.get("breaking_tags")
    if isinstance(breaking, Iterable) and not isinstance(breaking, (str, bytes)):
        breaking_tags = tuple(str(tag) for tag in breaking)
    else:
        breaking_tags = None
    return HtmlTextCleaner(breaking_tags=breaking_tags)
