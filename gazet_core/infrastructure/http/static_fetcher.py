"""Fetcher que serve snapshots HTML já salvos em disco."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from gazet_core.domain.contracts import PageFetcher
from gazet_core.domain.errors import FetchError


class StaticPageFetcher(PageFetcher):
    """Retorna o HTML de arquivos locais, indexados pela URL.

    Com ``fallback`` definido, qualquer URL sem snapshot próprio recebe o
    conteúdo desse arquivo.
    """

    def __init__(
        self,
        snapshots: Mapping[str, str | Path] | None = None,
        *,
        fallback: str | Path | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self._snapshots = {url: Path(path) for url, path in (snapshots or {}).items()}
        self._fallback = Path(fallback) if fallback is not None else None
        self._encoding = encoding

    def fetch(self, url: str) -> str:
        path = self._snapshots.get(url, self._fallback)
        if path is None:
            raise FetchError(f"Nenhum snapshot disponível para {url}")
        try:
            return path.read_text(self._encoding)
        except OSError as exc:
            raise FetchError(f"Falha ao ler snapshot '{path}'", cause=exc) from exc
