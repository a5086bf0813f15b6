"""Resolução de ``href`` relativos contra a URL da página de origem."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urldefrag, urljoin

from gazet_core.domain.contracts import UrlNormalizer


class HrefUrlNormalizer(UrlNormalizer):
    """Resolve ``href`` como o DOM faz ao ler ``anchor.href``.

    Com ``keep_fragment=False`` a âncora (``#...``) é descartada, o que
    evita entradas duplicadas no índice para o mesmo artigo.
    """

    def __init__(self, *, keep_fragment: bool = True) -> None:
        self._keep_fragment = keep_fragment

    def to_absolute(self, url: str, base_url: str | None = None) -> str:
        candidate = (url or "").strip()
        if not candidate:
            raise ValueError("URL não pode ser vazia para normalização")

        resolved = urljoin(base_url.strip(), candidate) if base_url else candidate
        if not self._keep_fragment:
            resolved = urldefrag(resolved).url
        return resolved


def build_url_normalizer(options: Mapping[str, object] | None = None) -> HrefUrlNormalizer:
    """Factory auxiliar compatível com configurações."""

    options = options or {}
    return HrefUrlNormalizer(keep_fragment=bool(options.get("keep_fragment", True)))
