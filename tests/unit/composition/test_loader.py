"""Tests for FragmentLoader."""
from __future__ import annotations

import pytest

from htmlcompose.core.composition.errors import FragmentReadError
from htmlcompose.core.composition.loader import FragmentLoader
from htmlcompose.core.composition.markup import render_markup


def test_resolve_is_relative_to_root(site_root) -> None:
    loader = FragmentLoader(site_root)
    assert loader.resolve("components/button.html") == (site_root / "components" / "button.html").resolve()


def test_absolute_src_stays_absolute(site_root, tmp_path) -> None:
    other = tmp_path / "elsewhere.html"
    assert FragmentLoader(site_root).resolve(str(other)) == other.resolve()


def test_read_missing_file_raises(site_root) -> None:
    with pytest.raises(FragmentReadError) as excinfo:
        FragmentLoader(site_root).read("missing.html")
    assert excinfo.value.path == (site_root / "missing.html").resolve()
    assert "Could not read file" in str(excinfo.value)
    assert isinstance(excinfo.value, OSError)


def test_read_directory_raises(site_root) -> None:
    (site_root / "blocks").mkdir()
    with pytest.raises(FragmentReadError):
        FragmentLoader(site_root).read("blocks")


def test_read_uses_encoding(site_root) -> None:
    (site_root / "latin.html").write_bytes("<p>caf\xe9</p>".encode("latin-1"))
    assert FragmentLoader(site_root, encoding="latin-1").read("latin.html") == "<p>caf\xe9</p>"


def test_undecodable_file_raises(site_root) -> None:
    (site_root / "bad.html").write_bytes(b"<p>\xff\xfe</p>")
    with pytest.raises(FragmentReadError):
        FragmentLoader(site_root, encoding="utf-8").read("bad.html")


def test_load_rewrites_attributes_before_parsing(write_fragment, site_root) -> None:
    write_fragment("card.html", '<div class="card <yield name="c">plain</yield>"></div>')
    tree = FragmentLoader(site_root).load("card.html", {"c": ["featured"]})
    assert tree[0].attrs == {"class": "card featured"}
    assert render_markup(tree) == '<div class="card featured"></div>'
