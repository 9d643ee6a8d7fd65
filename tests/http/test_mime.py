import logging

import pytest

from clean_response import DoesNotExist
from clean_response import MimeOptions
from clean_response import MimeTypes


@pytest.fixture
def mime():
    return MimeTypes()


@pytest.mark.parametrize(
    "name,expected",
    [
        ("json", "application/json"),
        ("JSON", "application/json"),
        (".json", "application/json"),
        ("html", "text/html"),
        ("png", "image/png"),
    ],
)
def test_for_name(mime, name, expected):
    assert mime.for_name(name) == expected


def test_for_name_unknown(mime):
    with pytest.raises(DoesNotExist) as e:
        mime.for_name("nonexisting")

    assert e.value.id == "nonexisting"


@pytest.mark.parametrize(
    "value", ["text/plain", "application/json; charset=UTF-8", "foo/bar"]
)
def test_name_or_type_passes_through(mime, value):
    assert mime.name_or_type(value) == value


def test_name_or_type_resolves(mime):
    assert mime.name_or_type("json") == "application/json"


def test_add_type(mime):
    mime.add_type("foo", "text/foo")

    assert mime.for_name("foo") == "text/foo"
    assert mime.name_or_type("FOO") == "text/foo"


def test_custom_type_takes_precedence(mime):
    mime.add_type("json", "text/x-json")

    assert mime.for_name("json") == "text/x-json"


def test_add_alias(mime):
    assert mime.add_alias("data", "json") == "application/json"
    assert mime.for_name("data") == "application/json"


def test_add_alias_unknown(mime):
    with pytest.raises(DoesNotExist):
        mime.add_alias("data", "nonexisting")


def test_options():
    mime = MimeTypes(
        MimeOptions(default="text/plain", custom_types={"Feed": "application/rss+xml"})
    )

    assert mime.default == "text/plain"
    assert mime.for_name("feed") == "application/rss+xml"


def test_options_defaults(mime):
    assert mime.default == "application/data"
    assert mime.custom_types == {}


def test_for_file(mime):
    assert mime.for_file("data/report.json") == "application/json"


@pytest.mark.parametrize("filename", ["README", "archive.nonexisting", ".hidden."])
def test_for_file_default(mime, filename, caplog):
    caplog.set_level(logging.DEBUG)

    assert mime.for_file(filename) == "application/data"
    assert caplog.record_tuples == [
        (
            "clean_response.http.mime",
            logging.DEBUG,
            f"no mime type for {filename}, using application/data",
        )
    ]
