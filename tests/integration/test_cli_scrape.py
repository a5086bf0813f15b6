from __future__ import annotations

import json
from pathlib import Path

import pytest

from gazet_core.interfaces import cli
from tests.doubles import ClockStub, LoggerStub

_TOC_HTML = """
<html><body>
<a class="vrt-teaser" href="/vrtnws/nl/2024/01/01/eerste/"><h2 class="vrt-teaser__title">Eerste</h2></a>
<div class="vrt-teaser"><h2 class="vrt-teaser__title">Zonder link</h2></div>
<section><h2 class="vrt-teaser__title">Wees</h2></section>
</body></html>
"""

_ARTICLE_HTML = """
<html><body>
<h1 class="vrt-title">Titel</h1>
<div class="article__intro"><p>Intro.</p></div>
<div class="parbase"><p>Lees verder onder de foto</p><p>Body.</p></div>
</body></html>
"""


@pytest.fixture
def logger(monkeypatch: pytest.MonkeyPatch) -> LoggerStub:
    for name in ("GAZET_PARSER_BACKEND", "GAZET_TOC_REQUIRE_TEASER", "GAZET_SITE_FACTORY"):
        monkeypatch.delenv(name, raising=False)
    stub = LoggerStub()
    monkeypatch.setattr(cli, "configure_logger", lambda: stub)
    monkeypatch.setattr(cli, "SystemClock", lambda: ClockStub())
    return stub


def _write(tmp_path: Path, name: str, html: str) -> Path:
    path = tmp_path / name
    path.write_text(html, encoding="utf-8")
    return path


def test_cli_toc_lenient_uses_site_toc_url(
    logger: LoggerStub, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    page = _write(tmp_path, "toc.html", _TOC_HTML)

    exit_code = cli.main(["toc", "--html-file", str(page), "--allow-missing-teaser"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == [
        {
            "url": "https://www.vrt.be/vrtnws/nl",
            "status": "ok",
            "entries": [
                {"title": "Eerste", "url": "https://www.vrt.be/vrtnws/nl/2024/01/01/eerste/"},
                {"title": "Zonder link", "url": ""},
                {"title": "Wees", "url": ""},
            ],
        }
    ]


def test_cli_toc_strict_reports_missing_teaser(
    logger: LoggerStub, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    page = _write(tmp_path, "toc.html", _TOC_HTML)

    exit_code = cli.main(["toc", "https://example.com/toc", "--html-file", str(page)])

    assert exit_code == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["url"] == "https://example.com/toc"
    assert payload[0]["status"] == "error"
    assert "vrt-teaser" in payload[0]["error"]


def test_cli_article(
    logger: LoggerStub, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    page = _write(tmp_path, "article.html", _ARTICLE_HTML)

    exit_code = cli.main(
        ["article", "https://www.vrt.be/vrtnws/nl/2024/01/01/eerste/", "--html-file", str(page)]
    )

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["text"] == ["Titel", "Intro.", "Body."]
    assert "cli.finish" in logger.messages()


def test_cli_article_requires_urls(logger: LoggerStub) -> None:
    assert cli.main(["article"]) == 1
    assert logger.error_calls[0][0] == "cli.config_error"


def test_cli_rejects_invalid_site_factory(logger: LoggerStub) -> None:
    exit_code = cli.main(["toc", "--site", "gazet_core.nao_existe:build_site"])

    assert exit_code == 1
    assert logger.exception_calls[0][0] == "cli.config_error"


def test_cli_missing_snapshot_reports_no_connection(
    logger: LoggerStub, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli.main(
        ["article", "https://example.com/a", "--html-file", str(tmp_path / "nada.html")]
    )

    assert exit_code == 1
    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["error"] == "Sem conexão com o site de notícias"
