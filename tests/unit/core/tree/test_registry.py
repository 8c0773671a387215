from __future__ import annotations

"""
Unit tests for the Website Tree Registration Service.

Verifies placement of files and documents, on-demand directory creation,
full path computation and rejection of conflicting registrations.
"""

import pytest

from linkup.core.tree.registry import normalize_site_path, register_document, register_file
from linkup.core.tree.resolver import resolve, split_path
from linkup.domain.entity_models import create_root
from linkup.domain.errors import DuplicateEntityError


def test_register_file_creates_intermediate_directories() -> None:
    root = create_root()
    leaf = register_file(root, "assets/img/logo.png")

    assets = root.children["assets"]
    img = assets.children["img"]
    assert assets.is_directory and img.is_directory
    assert img.children["logo.png"] is leaf
    assert not leaf.is_directory
    assert leaf.full_path == "assets/img/logo.png"
    assert leaf.parent is img
    assert img.full_path == "assets/img"


def test_root_invariants() -> None:
    root = create_root()
    assert root.parent is None
    assert root.is_directory
    assert root.is_root


def test_leading_slash_and_empty_segments_are_ignored() -> None:
    root = create_root()
    leaf = register_file(root, "/css//site.css")
    assert leaf.full_path == "css/site.css"
    assert normalize_site_path("/index.html") == "index.html"
    assert normalize_site_path("index.html") == "index.html"


def test_register_document_stores_links_and_ids() -> None:
    root = create_root()
    page = register_document(root, "blog/index.html", ["a.html", "#top"], {"top": 1, "x": 2})

    assert page.references == ["a.html", "#top"]
    assert page.identifier_counts["x"] == 2
    assert page.identifier_counts["top"] == 1


def test_registering_same_path_twice_fails_and_leaves_tree_unchanged() -> None:
    root = create_root()
    first = register_document(root, "blog/post.html", ["x.html"], {})

    with pytest.raises(DuplicateEntityError) as exc:
        register_file(root, "blog/post.html")

    assert exc.value.path == "blog/post.html"
    assert root.children["blog"].children["post.html"] is first
    assert first.references == ["x.html"]


def test_registering_existing_directory_fails() -> None:
    root = create_root()
    register_file(root, "blog/post.html")
    with pytest.raises(DuplicateEntityError):
        register_file(root, "blog")


def test_cannot_create_directory_through_file() -> None:
    root = create_root()
    register_file(root, "about.html")

    with pytest.raises(DuplicateEntityError):
        register_file(root, "about.html/team.html")

    assert list(root.children) == ["about.html"]
    assert root.children["about.html"].children == {}


def test_empty_path_is_rejected() -> None:
    root = create_root()
    with pytest.raises(ValueError):
        register_file(root, "/")


@pytest.mark.parametrize(
    "paths",
    [
        ["index.html"],
        ["index.html", "blog/index.html", "blog/2021/post.html"],
        ["a/b/c/d.png", "a/b/e.css", "f.js"],
    ],
)
def test_registered_paths_resolve_to_their_entity(paths) -> None:
    """Resolving a registered path from the root returns the same entity."""
    root = create_root()
    created = {p: register_file(root, p) for p in paths}
    for path, entity in created.items():
        assert resolve(root, split_path(path)) is entity
