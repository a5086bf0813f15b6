import pytest

pytest.importorskip("selectolax")

from gazet_core.infrastructure.parsing.selectolax_parser import SelectolaxParser  # noqa: E402
from gazet_core.infrastructure.scraping.class_matching import find_ancestor  # noqa: E402


def test_select_returns_nodes_with_tree_node_interface() -> None:
    document = SelectolaxParser().parse(
        '<html><body><a class="vrt-teaser" href="/x">'
        '<h2 class="vrt-teaser__title">T</h2></a></body></html>'
    )

    (title,) = document.select("h2.vrt-teaser__title")

    assert title.tag_name == "h2"
    assert title.inner_html == "T"
    assert title.class_names == frozenset({"vrt-teaser__title"})
    ancestor = find_ancestor(title, "vrt-teaser")
    assert ancestor is not None
    assert ancestor.tag_name == "a"
    assert ancestor.link_target == "/x"


def test_parent_chain_ends_at_root_element() -> None:
    document = SelectolaxParser().parse("<html><body><p>x</p></body></html>")

    (paragraph,) = document.select("p")

    body = paragraph.parent_element
    assert body is not None and body.tag_name == "body"
    html = body.parent_element
    assert html is not None and html.tag_name == "html"
    assert html.parent_element is None


def test_missing_class_attribute_is_empty_string() -> None:
    document = SelectolaxParser().parse("<p>x</p>")

    (paragraph,) = document.select("p")

    assert paragraph.class_name == ""
    assert paragraph.link_target is None
