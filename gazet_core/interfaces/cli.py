"""Composition root CLI para executar as passadas de scraping."""

from __future__ import annotations

import argparse
import json
from collections.abc import Mapping, Sequence
from importlib import import_module
from pathlib import Path
from typing import Any

from config.settings import Settings, load_settings
from gazet_core.application.download_manager import DownloadManager
from gazet_core.application.web_scraper import WebScraper
from gazet_core.domain.contracts import (
    Article,
    PageFetcher,
    SiteConfiguration,
    TableOfContents,
    WebResource,
)
from gazet_core.infrastructure.http.httpx_fetcher import HttpxPageFetcher, build_http_client
from gazet_core.infrastructure.http.static_fetcher import StaticPageFetcher
from gazet_core.infrastructure.logging.logger import configure_logger
from gazet_core.infrastructure.normalizers.text_cleaner import HtmlTextCleaner
from gazet_core.infrastructure.normalizers.url_normalizer import HrefUrlNormalizer
from gazet_core.infrastructure.parsing.backends import SUPPORTED_BACKENDS, build_document_parser
from gazet_core.infrastructure.time.system_clock import SystemClock


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scraper de sites de notícias do Gazet")
    parser.add_argument(
        "kind",
        choices=("toc", "article"),
        help="Tipo de página: índice (toc) ou artigo.",
    )
    parser.add_argument(
        "urls",
        nargs="*",
        help="URLs a processar. Para 'toc', o padrão é o índice do site.",
    )
    parser.add_argument(
        "--site",
        help="Caminho de importação da factory do site (módulo:atributo).",
    )
    parser.add_argument(
        "--html-file",
        help="Arquivo HTML local usado no lugar da rede para todas as URLs.",
    )
    parser.add_argument(
        "--parser",
        choices=SUPPORTED_BACKENDS,
        help="Backend de parsing HTML.",
    )
    parser.add_argument(
        "--allow-missing-teaser",
        action="store_true",
        help="Emite títulos sem teaser ancestral com URL vazia em vez de falhar.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Inicializa componentes sem executar o scraping.",
    )
    return parser


class _ResultCollector:
    """Callback que acumula o resultado de cada recurso para a saída JSON."""

    def __init__(self) -> None:
        self.results: list[Mapping[str, object]] = []
        self.failed = 0

    def on_success(self, resource: WebResource) -> None:
        self.results.append({"url": resource.url, "status": "ok", **_serialize(resource)})

    def on_error(self, resource: WebResource, message: str) -> None:
        self.failed += 1
        self.results.append({"url": resource.url, "status": "error", "error": message})


def _serialize(resource: WebResource) -> Mapping[str, object]:
    if isinstance(resource, TableOfContents):
        return {
            "entries": [
                {"title": title, "url": url}
                for title, url in resource.titles_and_urls.items()
            ]
        }
    if isinstance(resource, Article):
        return {"text": resource.text}
    return {"content": dict(resource.content)}


def main(argv: Sequence[str] | None = None) -> int:
    arg_parser = _build_parser()
    args = arg_parser.parse_args(argv)

    settings = load_settings()
    logger = configure_logger()
    clock = SystemClock()

    logger.info(
        "cli.start",
        extra={"extra": {"at": clock.now().isoformat(), "kind": args.kind}},
    )

    if args.dry_run:
        logger.info("cli.dry_run", extra={"extra": {"at": clock.now().isoformat()}})
        print(json.dumps([], ensure_ascii=False, indent=2))
        logger.info(
            "cli.finish",
            extra={
                "extra": {
                    "at": clock.now().isoformat(),
                    "count": 0,
                    "dry_run": True,
                }
            },
        )
        return 0

    if args.allow_missing_teaser:
        settings.scraper.require_teaser_ancestor = False
    if args.parser:
        settings.scraper.parser_backend = args.parser

    try:
        site = _build_site(args.site or settings.site.factory, settings)
        parser = build_document_parser(settings.scraper.parser_backend)
    except RuntimeError as exc:
        logger.exception("cli.config_error", extra={"extra": {"error": str(exc)}})
        return 1

    urls = list(args.urls)
    if not urls:
        if args.kind == "article":
            logger.error(
                "cli.config_error",
                extra={"extra": {"error": "nenhuma URL de artigo informada"}},
            )
            return 1
        urls = [site.toc_url]

    client = None
    fetcher: PageFetcher
    if args.html_file:
        fetcher = StaticPageFetcher(fallback=Path(args.html_file))
    else:
        client = build_http_client(
            timeout=settings.http.timeout, user_agent=settings.http.user_agent
        )
        fetcher = HttpxPageFetcher(client, timeout=settings.http.timeout)

    scraper = WebScraper(
        fetcher=fetcher,
        parser=parser,
        text_cleaner=HtmlTextCleaner(),
        url_normalizer=HrefUrlNormalizer(),
        clock=clock,
        logger=logger,
    )
    scrape_pass = site.toc_pass if args.kind == "toc" else site.article_pass
    manager = DownloadManager(scraper, scrape_pass, logger=logger)
    collector = _ResultCollector()

    try:
        for url in urls:
            resource: WebResource = TableOfContents(url) if args.kind == "toc" else Article(url)
            manager.schedule(resource, collector)
    finally:
        if client is not None:
            client.close()

    print(json.dumps(collector.results, ensure_ascii=False, indent=2))
    logger.info(
        "cli.finish",
        extra={
            "extra": {
                "at": clock.now().isoformat(),
                "site": site.name,
                "count": len(collector.results),
                "failed": collector.failed,
                "dry_run": False,
            }
        },
    )
    return 1 if collector.failed else 0


def _build_site(factory_path: str, settings: Settings) -> SiteConfiguration:
    factory = _import_from_string(factory_path)
    try:
        site = factory(settings=settings)
    except TypeError as exc:  # pragma: no cover - validação adicional
        raise RuntimeError(f"Falha ao instanciar a configuração do site '{factory_path}'") from exc
    if not isinstance(site, SiteConfiguration):
        raise RuntimeError(
            f"Factory '{factory_path}' não retornou uma configuração de site"
        )
    return site


def _import_from_string(path: str) -> Any:
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, _, attr = path.rpartition(".")
    if not module_name or not attr:
        raise RuntimeError(f"Caminho de importação inválido: '{path}'")
    try:
        module = import_module(module_name)
    except ImportError as exc:
        raise RuntimeError(f"Módulo '{module_name}' não encontrado") from exc
    try:
        return getattr(module, attr)
    except AttributeError as exc:  # pragma: no cover - proteção adicional
        raise RuntimeError(f"Atributo '{attr}' não encontrado em '{module_name}'") from exc


if __name__ == "__main__":  # pragma: no cover - entrypoint manual
    raise SystemExit(main())
