"""Seleção do backend de parsing a partir das configurações."""

from __future__ import annotations

from gazet_core.domain.contracts import DocumentParser

SUPPORTED_BACKENDS: tuple[str, ...] = ("html_tree", "selectolax")


def build_document_parser(backend: str = "html_tree") -> DocumentParser:
    """Instancia o ``DocumentParser`` correspondente ao backend informado."""

    if backend == "html_tree":
        from gazet_core.infrastructure.parsing.html_tree import HtmlTreeParser

        return HtmlTreeParser()
    if backend == "selectolax":
        from gazet_core.infrastructure.parsing.selectolax_parser import SelectolaxParser

        return SelectolaxParser()
    raise RuntimeError(
        f"Backend de parsing desconhecido: '{backend}' "
        f"(suportados: {', '.join(SUPPORTED_BACKENDS)})"
    )
