import pytest

from urlcanon.core.path import collapse_slashes, normalize_path, remove_dot_segments


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/a/b/c/./../../g", "/a/g"),
        ("mid/content=5/../6", "mid/6"),
        ("/blah/..", "/"),
        ("/a/..", "/"),
        ("/a/.", "/a/"),
        ("/a/./b/../c/", "/a/c/"),
        ("/../../x", "/x"),
        ("../a", "a"),
        ("./a", "a"),
        (".", ""),
        ("..", ""),
        ("/.hidden/...", "/.hidden/..."),
        ("/a/b/", "/a/b/"),
    ],
)
def test_remove_dot_segments(path, expected) -> None:
    assert remove_dot_segments(path) == expected


def test_collapse_slashes() -> None:
    assert collapse_slashes("//a///b//") == "/a/b/"
    assert collapse_slashes("/a/b") == "/a/b"


@pytest.mark.parametrize(
    "path,expected",
    [
        ("", "/"),
        ("/", "/"),
        ("//twoslashes", "/twoslashes"),
        ("/a//..//b/", "/b/"),
        ("/.verify/.eBaysecure=x/", "/.verify/.eBaysecure=x/"),
        ("/foo/bar/../../../..", "/"),
    ],
)
def test_normalize_path(path, expected) -> None:
    assert normalize_path(path) == expected


@pytest.mark.parametrize(
    "path",
    ["/a/./../b//c/.", "//..//..//", "/./././", "/x/y/../../z/..", "/.../..../"],
)
def test_normalized_path_has_no_dot_segments_or_double_slashes(path) -> None:
    result = normalize_path(path)
    assert result.startswith("/")
    assert "//" not in result
    assert "." not in result.split("/") and ".." not in result.split("/")
    assert normalize_path(result) == result
