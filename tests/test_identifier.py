"""Page identifier normalization tests."""

import pytest

from featherbot.graph.identifier import normalize
from featherbot.graph.models import InvalidPageIdentifier


def test_page_url():
    assert normalize("https://www.facebook.com/facebook") == "facebook"


def test_slug_with_numeric_id():
    url = "https://facebook.com/Birds-of-a-Feather-2179257909023050"
    assert normalize(url) == "2179257909023050"


def test_trailing_slash_stripped():
    assert normalize("https://www.facebook.com/facebook/") == "facebook"


def test_query_string_ignored():
    assert normalize("https://www.facebook.com/facebook?ref=bookmarks") == "facebook"


@pytest.mark.parametrize("text", ["facebook", "2179257909023050", "CocaCola", "page_name"])
def test_bare_identifier_unchanged(text):
    assert normalize(text) == text


def test_surrounding_whitespace_ignored():
    assert normalize("  facebook \n") == "facebook"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Birds-of-a-Feather-2179257909023050", "2179257909023050"),
        ("foo-bar", "bar"),
        ("/some-page/", "page"),
    ],
)
def test_keeps_segment_after_last_hyphen(text, expected):
    assert normalize(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "a/b",
        "https://www.facebook.com/groups/python",
        "https://www.facebook.com/pages/Some-Page/123/",
        "www.facebook.com/facebook",
    ],
)
def test_internal_path_rejected(text):
    with pytest.raises(InvalidPageIdentifier):
        normalize(text)


def test_hyphen_before_path_still_rejected():
    # "x-a/b" keeps "a/b", which still has a separator
    with pytest.raises(InvalidPageIdentifier):
        normalize("x-a/b")


@pytest.mark.parametrize("text", ["", "   ", "https://www.facebook.com/", "/", "page-"])
def test_empty_identifier_rejected(text):
    with pytest.raises(InvalidPageIdentifier):
        normalize(text)


def test_invalid_identifier_is_value_error():
    with pytest.raises(ValueError):
        normalize("a/b")
