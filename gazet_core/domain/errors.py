"""Definições de exceções para o domínio do Gazet."""

from __future__ import annotations


class GazetError(Exception):
    """Exceção base para erros conhecidos da aplicação."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class FetchError(GazetError):
    """Erro ocorrido durante a busca de uma página."""


class ParseError(GazetError):
    """Erro ocorrido durante o parsing do HTML."""


class ScrapeError(GazetError):
    """Erro ocorrido durante uma passada de scraping sobre o documento."""


class MissingAncestorError(ScrapeError):
    """Elemento casado sem o ancestral obrigatório com a classe marcadora."""

    def __init__(self, marker_class: str, html: str) -> None:
        super().__init__(
            f"Nenhum ancestral com a classe '{marker_class}' encontrado para o elemento"
        )
        self.marker_class = marker_class
        self.html = html
