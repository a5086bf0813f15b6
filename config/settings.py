"""Carregamento de configurações para o serviço Gazet."""

from __future__ import annotations

import os
from dataclasses import dataclass

from gazet_core.infrastructure.parsing.backends import SUPPORTED_BACKENDS

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(slots=True)
class HttpSettings:
    timeout: float = 15.0
    user_agent: str | None = None


@dataclass(slots=True)
class ScraperSettings:
    parser_backend: str = "html_tree"
    require_teaser_ancestor: bool = True


@dataclass(slots=True)
class SiteSettings:
    factory: str = "gazet_core.infrastructure.sites.vrt:build_site"


@dataclass(slots=True)
class Settings:
    http: HttpSettings
    scraper: ScraperSettings
    site: SiteSettings


def _load_bool(name: str, value: str | None, *, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise RuntimeError(f"Variável de ambiente {name} inválida: '{value}'")


def _load_float(name: str, value: str | None, *, default: float) -> float:
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise RuntimeError(f"Variável de ambiente {name} inválida: '{value}'") from exc
    if parsed <= 0:
        raise RuntimeError(f"Variável de ambiente {name} deve ser positiva")
    return parsed


def _load_backend(value: str | None) -> str:
    backend = (value or "html_tree").strip().lower()
    if backend not in SUPPORTED_BACKENDS:
        raise RuntimeError(
            f"Variável de ambiente GAZET_PARSER_BACKEND inválida: '{value}'"
        )
    return backend


def load_settings() -> Settings:
    """Carrega configurações a partir de variáveis de ambiente."""

    http = HttpSettings(
        timeout=_load_float(
            "GAZET_HTTP_TIMEOUT", os.environ.get("GAZET_HTTP_TIMEOUT"), default=15.0
        ),
        user_agent=os.environ.get("GAZET_HTTP_USER_AGENT") or None,
    )

    scraper = ScraperSettings(
        parser_backend=_load_backend(os.environ.get("GAZET_PARSER_BACKEND")),
        require_teaser_ancestor=_load_bool(
            "GAZET_TOC_REQUIRE_TEASER",
            os.environ.get("GAZET_TOC_REQUIRE_TEASER"),
            default=True,
        ),
    )

    site = SiteSettings(
        factory=os.environ.get(
            "GAZET_SITE_FACTORY", "gazet_core.infrastructure.sites.vrt:build_site"
        ),
    )

    return Settings(http=http, scraper=scraper, site=site)
