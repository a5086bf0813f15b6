"""Implementação simples de árvore HTML baseada em ``html.parser``."""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from html.parser import HTMLParser
from typing import Iterable, Iterator

from gazet_core.domain.contracts import DocumentParser
from gazet_core.domain.errors import ParseError

_ROOT_TAG = "__root__"

_VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

_RAW_TEXT_TAGS = frozenset({"script", "style"})

# Elementos cujo ``href`` é exposto como destino de link pelo DOM.
_LINK_TAGS = frozenset({"a", "area", "link", "base"})

_HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})

# Tags de abertura que fecham um ``<p>`` aberto (documento sem doctype, como
# os parsers HTML5 o tratam: ``<table>`` não fecha o parágrafo).
_CLOSES_PARAGRAPH = _HEADING_TAGS | frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "center",
        "dd",
        "details",
        "dialog",
        "dir",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "header",
        "hgroup",
        "hr",
        "li",
        "listing",
        "main",
        "menu",
        "nav",
        "ol",
        "p",
        "pre",
        "search",
        "section",
        "summary",
        "ul",
        "xmp",
    }
)

_SCOPE_TAGS = frozenset(
    {"applet", "caption", "html", "marquee", "object", "table", "td", "template", "th"}
)
_BUTTON_SCOPE_TAGS = _SCOPE_TAGS | {"button"}

# Elementos "especiais" do HTML5 que interrompem a busca por um ``<li>``,
# ``<dd>`` ou ``<dt>`` aberto.
_LIST_ITEM_SCOPE_TAGS = _HEADING_TAGS | frozenset(
    {
        "applet",
        "article",
        "aside",
        "blockquote",
        "body",
        "button",
        "caption",
        "center",
        "colgroup",
        "dd",
        "details",
        "dir",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "head",
        "header",
        "hgroup",
        "html",
        "iframe",
        "li",
        "listing",
        "main",
        "marquee",
        "menu",
        "nav",
        "noscript",
        "object",
        "ol",
        "pre",
        "search",
        "section",
        "select",
        "summary",
        "table",
        "tbody",
        "td",
        "template",
        "textarea",
        "tfoot",
        "th",
        "thead",
        "tr",
        "ul",
        "xmp",
    }
)


@dataclass(eq=False)
class HTMLNode:
    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    parent: HTMLNode | None = None
    children: list[HTMLNode | str] = field(default_factory=list)

    @property
    def tag_name(self) -> str:
        return self.tag

    @property
    def class_name(self) -> str:
        return self.attrs.get("class", "")

    @property
    def class_names(self) -> frozenset[str]:
        return frozenset(self.class_name.split())

    @property
    def inner_html(self) -> str:
        return _node_children_to_html(self)

    @property
    def parent_element(self) -> HTMLNode | None:
        if self.parent is None or self.parent.tag == _ROOT_TAG:
            return None
        return self.parent

    @property
    def link_target(self) -> str | None:
        if self.tag not in _LINK_TAGS:
            return None
        return self.attrs.get("href")

    def append_child(self, child: HTMLNode | str) -> None:
        if isinstance(child, HTMLNode):
            child.parent = self
        self.children.append(child)

    def find_all(self, tags: Iterable[str] | bool = True) -> list[HTMLNode]:
        return list(self._find_all(tags))

    def _find_all(self, tags: Iterable[str] | bool) -> Iterator[HTMLNode]:
        tags_set: set[str] | None
        if tags is True:
            tags_set = None
        elif tags is False:
            return iter(())
        elif isinstance(tags, str):
            tags_set = {tags.lower()}
        else:
            tags_set = {str(tag).lower() for tag in tags}

        for node in self.iter_descendants(include_self=False):
            if tags_set is None or node.tag.lower() in tags_set:
                yield node

    def iter_descendants(self, *, include_self: bool = True) -> Iterator[HTMLNode]:
        if include_self and self.tag != _ROOT_TAG:
            yield self
        for child in self.children:
            if isinstance(child, HTMLNode):
                yield from child.iter_descendants(include_self=True)

    def select(self, selector: str) -> list[HTMLNode]:
        groups = _parse_selector_list(selector)
        if not groups:
            return []
        return [
            node
            for node in self.iter_descendants(include_self=False)
            if any(_matches_selector(node, parts) for parts in groups)
        ]

    def select_one(self, selector: str) -> HTMLNode | None:
        results = self.select(selector)
        return results[0] if results else None

    def decompose(self) -> None:
        if not self.parent:
            return
        self.parent.children = [child for child in self.parent.children if child is not self]


class _TreeBuilder(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.root = HTMLNode(_ROOT_TAG)
        self.stack: list[HTMLNode] = [self.root]

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        node_attrs: dict[str, str] = {}
        for key, value in attrs:
            node_attrs.setdefault(key, value or "")
        self._close_implied(tag)
        node = HTMLNode(tag, node_attrs)
        self.stack[-1].append_child(node)
        if tag not in _VOID_TAGS:
            self.stack.append(node)

    def _close_implied(self, tag: str) -> None:
        """Fecha os elementos cujas tags de fechamento são opcionais."""

        if tag in _CLOSES_PARAGRAPH:
            self._pop_until({"p"}, _BUTTON_SCOPE_TAGS)
        if tag == "li":
            self._pop_until({"li"}, _LIST_ITEM_SCOPE_TAGS)
        elif tag in ("dd", "dt"):
            self._pop_until({"dd", "dt"}, _LIST_ITEM_SCOPE_TAGS)
        elif tag in _HEADING_TAGS:
            if self.stack[-1].tag in _HEADING_TAGS:
                self.stack.pop()
        elif tag == "option":
            self._pop_current({"option"})
        elif tag == "optgroup":
            self._pop_current({"option"})
            self._pop_current({"optgroup"})
        elif tag in ("td", "th"):
            self._pop_until({"td", "th"}, {"tr", "table"})
        elif tag == "tr":
            self._pop_until({"tr"}, {"table", "tbody", "thead", "tfoot"})
        elif tag in ("tbody", "thead", "tfoot"):
            self._pop_until({"tbody", "thead", "tfoot"}, {"table"})

    def _pop_until(self, names: set[str], boundaries: frozenset[str] | set[str]) -> None:
        for index in range(len(self.stack) - 1, 0, -1):
            current = self.stack[index].tag
            if current in names:
                self.stack = self.stack[:index]
                return
            if current in boundaries:
                return

    def _pop_current(self, names: set[str]) -> None:
        if len(self.stack) > 1 and self.stack[-1].tag in names:
            self.stack.pop()

    def handle_endtag(self, tag: str) -> None:
        if tag in _VOID_TAGS:
            return
        for index in range(len(self.stack) - 1, 0, -1):
            if self.stack[index].tag == tag:
                self.stack = self.stack[: index]
                break

    def handle_data(self, data: str) -> None:
        if not data:
            return
        self.stack[-1].append_child(data)


@dataclass
class HTMLDocument:
    root: HTMLNode

    @classmethod
    def from_html(cls, html: str) -> HTMLDocument:
        parser = _TreeBuilder()
        parser.feed(html or "")
        parser.close()
        return cls(parser.root)

    def find_all(self, tags: Iterable[str] | bool = True) -> list[HTMLNode]:
        return self.root.find_all(tags)

    def select(self, selector: str) -> list[HTMLNode]:
        return self.root.select(selector)

    def select_one(self, selector: str) -> HTMLNode | None:
        return self.root.select_one(selector)

    def __call__(self, tags: Iterable[str] | bool = True) -> list[HTMLNode]:
        return self.find_all(tags)


class HtmlTreeParser(DocumentParser):
    """``DocumentParser`` baseado na árvore interna."""

    def parse(self, html: str) -> HTMLDocument:
        try:
            return HTMLDocument.from_html(html)
        except Exception as exc:  # noqa: BLE001
            raise ParseError("Não foi possível montar a árvore HTML", cause=exc) from exc


def _node_to_html(node: HTMLNode) -> str:
    attrs = "".join(
        f' {key}="{escape(value, quote=True)}"'
        for key, value in node.attrs.items()
        if value is not None
    )
    if node.tag in _VOID_TAGS:
        return f"<{node.tag}{attrs}>"
    inner = _node_children_to_html(node)
    return f"<{node.tag}{attrs}>{inner}</{node.tag}>"


def _node_children_to_html(node: HTMLNode) -> str:
    parts: list[str] = []
    for child in node.children:
        if isinstance(child, HTMLNode):
            parts.append(_node_to_html(child))
        elif node.tag in _RAW_TEXT_TAGS:
            parts.append(child)
        else:
            parts.append(escape(child, quote=False))
    return "".join(parts)


@dataclass
class _Selector:
    tag: str | None
    classes: tuple[str, ...]
    element_id: str | None


def _parse_selector_list(selector: str) -> list[list[_Selector]]:
    groups: list[list[_Selector]] = []
    for group in selector.split(","):
        parts = [_parse_selector(part) for part in group.split() if part.strip()]
        if parts:
            groups.append(parts)
    return groups


def _parse_selector(selector: str) -> _Selector:
    selector = selector.strip()
    tag: str | None = None
    classes: list[str] = []
    element_id: str | None = None
    i = 0
    length = len(selector)
    while i < length:
        prefix = selector[i]
        if prefix in {".", "#"}:
            i += 1
            start = i
            while i < length and selector[i] not in {".", "#"}:
                i += 1
            token = selector[start:i]
            if not token:
                continue
            if prefix == ".":
                classes.append(token)
            else:
                element_id = token
        else:
            start = i
            while i < length and selector[i] not in {".", "#"}:
                i += 1
            token = selector[start:i]
            if token and token != "*":
                tag = token
    if tag == "":
        tag = None
    return _Selector(tag=tag, classes=tuple(classes), element_id=element_id)


def _matches_selector(node: HTMLNode, selectors: list[_Selector]) -> bool:
    current: HTMLNode | None = node
    for index, selector in enumerate(reversed(selectors)):
        if current is None or current.tag == _ROOT_TAG:
            return False
        if index == 0:
            if not _matches_simple(current, selector):
                return False
            current = current.parent
            continue
        match_node = None
        while current is not None and current.tag != _ROOT_TAG:
            if _matches_simple(current, selector):
                match_node = current
                current = current.parent
                break
            current = current.parent
        if match_node is None:
            return False
    return True


def _matches_simple(node: HTMLNode, selector: _Selector) -> bool:
    if selector.tag and node.tag.lower() != selector.tag.lower():
        return False
    if selector.element_id:
        node_id = node.attrs.get("id")
        if node_id != selector.element_id:
            return False
    if selector.classes:
        node_classes = node.class_names
        if not all(cls in node_classes for cls in selector.classes):
            return False
    return True


__all__ = ["HTMLDocument", "HTMLNode", "HtmlTreeParser"]
