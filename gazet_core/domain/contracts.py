"""Contratos e estruturas de dados compartilhadas no domínio do Gazet."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol


@dataclass(eq=False)
class WebResource:
    """Recurso identificado por uma URL cujo conteúdo é obtido via scraping.

    O conteúdo é um mapeamento ordenado ``texto -> url``; começa vazio e é
    substituído por inteiro quando o scraping termina. A igualdade é por
    identidade, de modo que dois recursos com a mesma URL são distintos.
    """

    url: str
    content: dict[str, str] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.url


class Article(WebResource):
    """Artigo do site: cada chave do conteúdo é um parágrafo, título etc."""

    @property
    def text(self) -> list[str]:
        return list(self.content)


class TableOfContents(WebResource):
    """Índice do site: títulos de artigos associados às suas URLs."""

    @property
    def titles_and_urls(self) -> Mapping[str, str]:
        return self.content


class TreeNode(Protocol):
    """Capacidades mínimas de um elemento do documento usadas pelos scrapers."""

    @property
    def tag_name(self) -> str:
        """Nome da tag em minúsculas."""

    @property
    def class_name(self) -> str:
        """Valor bruto do atributo ``class`` (vazio se ausente)."""

    @property
    def class_names(self) -> frozenset[str]:
        """Conjunto de tokens do atributo ``class``."""

    @property
    def inner_html(self) -> str:
        """HTML serializado dos filhos do elemento."""

    @property
    def parent_element(self) -> TreeNode | None:
        """Elemento pai, ou ``None`` quando o pai é a raiz do documento."""

    @property
    def link_target(self) -> str | None:
        """Destino do link (``href``) para elementos que carregam links."""


class TreeDocument(Protocol):
    """Documento já carregado, somente leitura."""

    def select(self, selector: str) -> Sequence[TreeNode]:
        """Retorna os elementos que casam com o seletor em ordem de documento."""


class ContentSink(Protocol):
    """Interface externa que recebe os fragmentos extraídos."""

    def content(self, html: str, url: str) -> None:
        """Recebe um fragmento extraído."""

    def finished(self) -> None:
        """Sinaliza que não haverá mais chamadas a ``content`` nesta passada."""


class ScrapePass(Protocol):
    """Passada linear sobre um documento, emitindo fragmentos para o sink."""

    def run(self, document: TreeDocument, sink: ContentSink) -> None:
        """Percorre o documento e chama ``sink.finished`` uma única vez ao final."""


class DocumentParser(Protocol):
    """Interface para converter HTML bruto em ``TreeDocument``."""

    def parse(self, html: str) -> TreeDocument:
        """Realiza o parsing do HTML."""


class PageFetcher(Protocol):
    """Interface para componentes responsáveis por buscar páginas."""

    def fetch(self, url: str) -> str:
        """Recupera o HTML da página indicada."""


class ResourceCallback(Protocol):
    """Callback notificado quando o download de um recurso termina."""

    def on_success(self, resource: WebResource) -> None:
        """Recurso baixado e com conteúdo disponível."""

    def on_error(self, resource: WebResource, message: str) -> None:
        """Falha ao obter o recurso."""


class Clock(Protocol):
    """Interface para abstrair o acesso ao relógio do sistema."""

    def now(self) -> datetime:
        """Retorna o instante atual."""


class UrlNormalizer(Protocol):
    """Interface responsável por normalizar URLs relativas."""

    def to_absolute(self, url: str, base_url: str | None = None) -> str:
        """Converte uma URL possivelmente relativa em absoluta."""


class TextCleaner(Protocol):
    """Interface para conversão de fragmentos HTML em texto limpo."""

    def clean_html_to_text(self, html: str) -> str:
        """Remove marcações HTML retornando apenas o texto."""


@dataclass(slots=True)
class SiteConfiguration:
    """Configuração de um site de notícias."""

    name: str
    locale: str
    toc_url: str
    toc_pass: ScrapePass
    article_pass: ScrapePass


__all__ = (
    "Article",
    "Clock",
    "ContentSink",
    "DocumentParser",
    "PageFetcher",
    "ResourceCallback",
    "ScrapePass",
    "SiteConfiguration",
    "TableOfContents",
    "TextCleaner",
    "TreeDocument",
    "TreeNode",
    "UrlNormalizer",
    "WebResource",
)
