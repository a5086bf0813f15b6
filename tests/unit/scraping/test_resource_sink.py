from gazet_core.domain.contracts import Article, TableOfContents
from gazet_core.infrastructure.normalizers.text_cleaner import HtmlTextCleaner
from gazet_core.infrastructure.normalizers.url_normalizer import HrefUrlNormalizer
from gazet_core.infrastructure.scraping.resource_sink import ResourceSink
from tests.doubles import RecordingCallback


def test_finished_assigns_cleaned_content_and_notifies() -> None:
    article = Article("https://www.vrt.be/vrtnws/nl/artikel/")
    callback = RecordingCallback()
    sink = ResourceSink(article, callback, text_cleaner=HtmlTextCleaner())

    sink.content("De <b>intro</b> &amp; meer", "")
    sink.content("Tweede", None)
    assert article.content == {}

    sink.finished()

    assert article.text == ["De intro & meer", "Tweede"]
    assert article.content["Tweede"] == ""
    assert callback.successes == [article]


def test_urls_are_resolved_against_resource_url() -> None:
    toc = TableOfContents("https://www.vrt.be/vrtnws/nl")
    callback = RecordingCallback()
    sink = ResourceSink(
        toc,
        callback,
        text_cleaner=HtmlTextCleaner(),
        url_normalizer=HrefUrlNormalizer(),
    )

    sink.content("Eerste", "/vrtnws/nl/2024/eerste/")
    sink.content("Leeg", "")
    sink.finished()

    assert dict(toc.titles_and_urls) == {
        "Eerste": "https://www.vrt.be/vrtnws/nl/2024/eerste/",
        "Leeg": "",
    }


def test_repeated_text_keeps_first_position_and_last_url() -> None:
    toc = TableOfContents("https://example.com/")
    sink = ResourceSink(toc, RecordingCallback(), text_cleaner=HtmlTextCleaner())

    sink.content("A", "https://example.com/1")
    sink.content("B", "https://example.com/2")
    sink.content("A", "https://example.com/3")
    sink.finished()

    assert list(toc.content.items()) == [
        ("A", "https://example.com/3"),
        ("B", "https://example.com/2"),
    ]


def test_blank_and_padded_urls_are_stripped() -> None:
    toc = TableOfContents("https://www.vrt.be/vrtnws/nl")
    sink = ResourceSink(
        toc,
        RecordingCallback(),
        text_cleaner=HtmlTextCleaner(),
        url_normalizer=HrefUrlNormalizer(),
    )

    sink.content("Leeg", "   ")
    sink.content("Relatief", " /x ")
    sink.finished()

    assert dict(toc.titles_and_urls) == {
        "Leeg": "",
        "Relatief": "https://www.vrt.be/x",
    }


def test_blank_url_is_stored_empty_without_normalizer() -> None:
    article = Article("https://www.vrt.be/vrtnws/nl/artikel/")
    sink = ResourceSink(article, RecordingCallback(), text_cleaner=HtmlTextCleaner())

    sink.content("A", "  \n ")
    sink.finished()

    assert article.content == {"A": ""}
