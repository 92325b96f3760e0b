import json

import pytest

from urlcanon.core.options import CanonicalizeOptions


def test_options_defaults() -> None:
    options = CanonicalizeOptions()
    assert options.snapshot() == {
        "remove_empty_query_delimiter": False,
        "sort_query_params": False,
    }


def test_options_from_yaml(tmp_path) -> None:
    path = tmp_path / "options.yaml"
    path.write_text("sort_query_params: true\n", encoding="utf-8")
    options = CanonicalizeOptions.from_file(str(path))
    assert options.sort_query_params
    assert not options.remove_empty_query_delimiter


def test_options_from_json(tmp_path) -> None:
    path = tmp_path / "options.json"
    path.write_text(json.dumps({"remove_empty_query_delimiter": True}), encoding="utf-8")
    options = CanonicalizeOptions.from_file(str(path))
    assert options.remove_empty_query_delimiter
    assert not options.sort_query_params


def test_empty_yaml_document_uses_defaults(tmp_path) -> None:
    path = tmp_path / "options.yml"
    path.write_text("", encoding="utf-8")
    assert CanonicalizeOptions.from_file(str(path)) == CanonicalizeOptions()


@pytest.mark.parametrize(
    "name,content,message",
    [
        ("options.toml", "sort_query_params = true\n", "Unsupported options file extension"),
        ("options.yaml", "- sort_query_params\n", "must be a mapping"),
        ("options.yaml", "sort_query_parameters: true\n", "Unknown option(s): sort_query_parameters"),
        ("options.yaml", "sort_query_params: 'yes'\n", "must be true or false"),
    ],
)
def test_invalid_options_files(tmp_path, name, content, message) -> None:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError) as exc:
        CanonicalizeOptions.from_file(str(path))
    assert message in str(exc.value)


def test_with_overrides_skips_none() -> None:
    options = CanonicalizeOptions(sort_query_params=True)
    updated = options.with_overrides(sort_query_params=None, remove_empty_query_delimiter=True)
    assert updated == CanonicalizeOptions(sort_query_params=True, remove_empty_query_delimiter=True)
    assert options.remove_empty_query_delimiter is False
