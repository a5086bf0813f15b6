"""Adapter de busca de páginas baseado em httpx."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import httpx

from gazet_core.domain.contracts import PageFetcher
from gazet_core.domain.errors import FetchError

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; GazetScraper/1.0)"


class HttpxPageFetcher(PageFetcher):
    """Implementação de ``PageFetcher`` usando um cliente httpx síncrono."""

    def __init__(
        self,
        client: Any,
        *,
        timeout: float | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._client = client
        self._timeout = timeout
        self._headers = dict(headers or {})

    def fetch(self, url: str) -> str:
        options: dict[str, Any] = {}
        if self._timeout is not None:
            options["timeout"] = self._timeout
        if self._headers:
            options["headers"] = self._headers
        try:
            response = self._client.get(url, **options)
            response.raise_for_status()
        except Exception as exc:  # noqa: BLE001
            raise FetchError(f"Falha ao buscar página: {url}", cause=exc) from exc

        return getattr(response, "text", "") or ""


def build_http_client(
    *, timeout: float | None = None, user_agent: str | None = None
) -> httpx.Client:
    """Cria o cliente httpx padrão, seguindo redirecionamentos."""

    return httpx.Client(
        follow_redirects=True,
        timeout=timeout,
        headers={"User-Agent": user_agent or DEFAULT_USER_AGENT},
    )
