import pytest

from config.settings import load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "GAZET_HTTP_TIMEOUT",
        "GAZET_HTTP_USER_AGENT",
        "GAZET_PARSER_BACKEND",
        "GAZET_TOC_REQUIRE_TEASER",
        "GAZET_SITE_FACTORY",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.http.timeout == 15.0
    assert settings.http.user_agent is None
    assert settings.scraper.parser_backend == "html_tree"
    assert settings.scraper.require_teaser_ancestor is True
    assert settings.site.factory == "gazet_core.infrastructure.sites.vrt:build_site"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GAZET_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("GAZET_PARSER_BACKEND", "Selectolax")
    monkeypatch.setenv("GAZET_TOC_REQUIRE_TEASER", "off")

    settings = load_settings()

    assert settings.http.timeout == 2.5
    assert settings.scraper.parser_backend == "selectolax"
    assert settings.scraper.require_teaser_ancestor is False


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("GAZET_HTTP_TIMEOUT", "rapido"),
        ("GAZET_HTTP_TIMEOUT", "-1"),
        ("GAZET_PARSER_BACKEND", "lxml"),
        ("GAZET_TOC_REQUIRE_TEASER", "talvez"),
    ],
)
def test_invalid_values_raise(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(RuntimeError):
        load_settings()
