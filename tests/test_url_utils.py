from __future__ import annotations

from utils.url_utils import (
    i18n_bundle_path,
    join_url,
    resources_debug_url_base,
    resources_url_base,
    with_context,
)


def test_join_url_collapses_separators() -> None:
    assert join_url("/resources/", "/1.0/", "css") == "/resources/1.0/css"
    assert join_url("resources", "1.0") == "/resources/1.0"
    assert join_url("/") == "/"


def test_url_bases() -> None:
    assert resources_url_base("15.01") == "/resources/15.01"
    assert resources_debug_url_base("15.01") == "/resources-debug/15.01"


def test_i18n_bundle_paths() -> None:
    base = resources_url_base("1.0")
    assert i18n_bundle_path(base, "Portal") == "/resources/1.0/i18n/Portal.properties"
    assert i18n_bundle_path(base, "Portal", "en") == "/resources/1.0/i18n/Portal_en.properties"


def test_with_context() -> None:
    assert with_context("/portal", "/resources/1.0") == "/portal/resources/1.0"
    assert with_context("/portal/", "/resources/1.0") == "/portal/resources/1.0"
    assert with_context("", "/resources/1.0") == "/resources/1.0"
    assert with_context(None, "/resources/1.0") == "/resources/1.0"
