"""Implementações de normalizadores de texto e URL."""

from .text_cleaner import HtmlTextCleaner, build_text_cleaner
from .url_normalizer import HrefUrlNormalizer, build_url_normalizer

__all__ = [
    "HtmlTextCleaner",
    "HrefUrlNormalizer",
    "build_text_cleaner",
    "build_url_normalizer",
]
