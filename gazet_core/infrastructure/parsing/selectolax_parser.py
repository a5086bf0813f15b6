"""Adapter de documento baseado em selectolax (backend lexbor)."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from selectolax.lexbor import LexborHTMLParser

from gazet_core.domain.contracts import DocumentParser
from gazet_core.domain.errors import ParseError

_LINK_TAGS = frozenset({"a", "area", "link", "base"})


class SelectolaxNode:
    """Expõe um nó do lexbor com a interface ``TreeNode``."""

    __slots__ = ("_node",)

    def __init__(self, node: Any) -> None:
        self._node = node

    @property
    def tag_name(self) -> str:
        return str(self._node.tag).lower()

    @property
    def class_name(self) -> str:
        return self._node.attributes.get("class") or ""

    @property
    def class_names(self) -> frozenset[str]:
        return frozenset(self.class_name.split())

    @property
    def inner_html(self) -> str:
        return self._node.inner_html or ""

    @property
    def parent_element(self) -> SelectolaxNode | None:
        parent = self._node.parent
        # O nó documento do lexbor não é um elemento (tag "-undef"/"#document").
        if parent is None or not _is_element_tag(parent.tag):
            return None
        return SelectolaxNode(parent)

    @property
    def link_target(self) -> str | None:
        if self.tag_name not in _LINK_TAGS:
            return None
        return self._node.attributes.get("href")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectolaxNode):
            return NotImplemented
        return self._node.mem_id == other._node.mem_id

    def __hash__(self) -> int:
        return hash(self._node.mem_id)


class SelectolaxDocument:
    """Documento somente leitura sobre um ``LexborHTMLParser``."""

    def __init__(self, tree: LexborHTMLParser) -> None:
        self._tree = tree

    def select(self, selector: str) -> Sequence[SelectolaxNode]:
        seen: set[int] = set()
        nodes: list[SelectolaxNode] = []
        for node in self._tree.css(selector):
            if node.mem_id in seen:
                continue
            seen.add(node.mem_id)
            nodes.append(SelectolaxNode(node))
        return nodes


class SelectolaxParser(DocumentParser):
    """Realiza o parsing do HTML usando o backend lexbor do selectolax."""

    def parse(self, html: str) -> SelectolaxDocument:
        try:
            tree = LexborHTMLParser(html or "")
        except Exception as exc:  # noqa: BLE001
            raise ParseError(
                "Não foi possível inicializar o parser HTML", cause=exc
            ) from exc
        return SelectolaxDocument(tree)


def _is_element_tag(tag: object) -> bool:
    return isinstance(tag, str) and bool(tag) and tag[0] not in "-#"


__all__ = ["SelectolaxDocument", "SelectolaxNode", "SelectolaxParser"]
