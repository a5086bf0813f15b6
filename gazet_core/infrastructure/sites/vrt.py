"""Configuração do site de notícias VRT NWS."""

from __future__ import annotations

from typing import Any

from gazet_core.domain.contracts import SiteConfiguration
from gazet_core.infrastructure.scraping.dom_passes import ArticleScrapePass, TocScrapePass

NAME = "VRT News"
LOCALE = "nl-BE"
TOC_URL = "https://www.vrt.be/vrtnws/nl"

ARTICLE_SELECTOR = "h1, h2, h3, h4, h5, p, li"
TITLE_MARKER = "vrt-title"
INTRO_MARKER = "article__intro"
CONTENT_BLOCK_MARKER = "parbase"
READ_MORE_SNIPPET = "Lees verder onder"

TEASER_TITLE_SELECTOR = "h2.vrt-teaser__title"
TEASER_MARKER = "vrt-teaser"


def build_article_pass() -> ArticleScrapePass:
    return ArticleScrapePass(
        selector=ARTICLE_SELECTOR,
        title_markers=(TITLE_MARKER,),
        container_markers=(INTRO_MARKER, CONTENT_BLOCK_MARKER),
        excluded_snippets=(READ_MORE_SNIPPET,),
    )


def build_toc_pass(*, require_teaser: bool = True) -> TocScrapePass:
    return TocScrapePass(
        selector=TEASER_TITLE_SELECTOR,
        container_marker=TEASER_MARKER,
        require_ancestor=require_teaser,
    )


def build_site(*, settings: Any = None, **_: object) -> SiteConfiguration:
    """Factory compatível com ``GAZET_SITE_FACTORY``."""

    require_teaser = True
    if settings is not None:
        require_teaser = settings.scraper.require_teaser_ancestor
    return SiteConfiguration(
        name=NAME,
        locale=LOCALE,
        toc_url=TOC_URL,
        toc_pass=build_toc_pass(require_teaser=require_teaser),
        article_pass=build_article_pass(),
    )
