import pytest

from gitspicefy.errors import InvalidInputError
from gitspicefy.repository import is_valid_github_url, normalize_github_url, parse_github_url


@pytest.mark.parametrize("url", [
    "https://github.com/foo/bar",
    "http://github.com/foo/bar",
    "https://github.com/foo/bar/",
    "https://github.com/foo/bar.git",
    "https://github.com/my-org/my_repo.js",
    "https://github.com/foo/bar/tree/main/src",
    "  https://github.com/foo/bar?tab=readme#top  ",
    "https://GitHub.com/foo/bar",
    "HTTPS://GITHUB.COM/foo/bar",
])
def test_accepts_repository_urls(url):
    assert is_valid_github_url(url)


@pytest.mark.parametrize("url", [
    "https://gitlab.com/foo/bar",
    "https://github.com/foo",
    "https://github.com/",
    "github.com/foo/bar",
    "https://github.com/foo bar/baz",
    "https://github.com/../bar",
    "https://github.com.evil.io/foo/bar",
    "",
    None,
    42,
])
def test_rejects_other_urls(url):
    assert not is_valid_github_url(url)


def test_parse_strips_suffixes():
    assert parse_github_url("https://github.com/foo/bar.git/") == ("foo", "bar")
    assert parse_github_url(" https://github.com/foo/bar?tab=code ") == ("foo", "bar")
    assert parse_github_url("https://github.com/foo/bar/issues/12") == ("foo", "bar")


def test_parse_rejects_invalid_url():
    with pytest.raises(InvalidInputError):
        parse_github_url("https://gitlab.com/foo/bar")


def test_normalize():
    assert normalize_github_url("http://github.com/foo/bar/tree/main") == "https://github.com/foo/bar"


def test_host_is_case_insensitive():
    assert parse_github_url("https://GitHub.com/Foo/Bar") == ("Foo", "Bar")
    assert normalize_github_url("HTTPS://GITHUB.COM/foo/bar/") == "https://github.com/foo/bar"
