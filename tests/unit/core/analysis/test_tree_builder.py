from __future__ import annotations

"""
Unit tests for the Asset Tree Builder.

Verifies:
1. Asset root detection (last segment wins, case-insensitive, backslashes).
2. Group and leaf construction from relative paths.
3. Accumulation of colliding files on a single node.
"""

from assetgen.core.analysis.code_emitter import emit_module
from assetgen.core.analysis.collisions import detect_collisions
from assetgen.core.analysis.tree_builder import (
    build_asset_tree,
    filter_asset_records,
    insert_asset,
    is_asset_path,
    relative_asset_path,
    sibling_key,
)
from assetgen.domain.asset_models import AssetNode, AssetRecord

# -----------------------------------------------------------------------------
# ASSET ROOT DETECTION
# -----------------------------------------------------------------------------

def test_relative_path_after_root() -> None:
    assert relative_asset_path("/project/wwwroot/images/logo.png") == "images/logo.png"


def test_relative_path_accepts_backslashes() -> None:
    path = "C:\\project\\wwwroot\\css\\site.css"
    assert relative_asset_path(path) == "css/site.css"


def test_relative_path_uses_last_root_segment() -> None:
    assert relative_asset_path("/a/wwwroot/b/wwwroot/c.png") == "c.png"
    assert relative_asset_path("/wwwroot/wwwroot/x.png") == "x.png"


def test_relative_path_is_case_insensitive() -> None:
    assert relative_asset_path("/project/WwwRoot/x.png") == "x.png"


def test_paths_outside_root_are_rejected() -> None:
    assert relative_asset_path("/project/public/logo.png") is None
    assert relative_asset_path("/project/mywwwroot/logo.png") is None
    assert relative_asset_path("/project/wwwroot") is None
    assert is_asset_path("/project/public/logo.png") is False


def test_custom_root_directory() -> None:
    assert relative_asset_path("/site/static/app.js", "static") == "app.js"
    assert relative_asset_path("/site/wwwroot/app.js", "static") is None


def test_filter_keeps_order() -> None:
    records = [
        AssetRecord("/p/wwwroot/b.css"),
        AssetRecord("/p/src/app.py"),
        AssetRecord("/p/wwwroot/a.css"),
    ]

    kept = filter_asset_records(records)

    assert [r.source_path for r in kept] == ["/p/wwwroot/b.css", "/p/wwwroot/a.css"]

# -----------------------------------------------------------------------------
# TREE CONSTRUCTION
# -----------------------------------------------------------------------------

def test_build_tree_groups_and_leaves(make_records) -> None:
    tree = build_asset_tree(
        make_records("images/logo.png", "css/site.css", "favicon.ico"),
        class_name="StaticAssets",
    )

    assert tree.name == "StaticAssets"
    assert [leaf.name for leaf in tree.leaves()] == ["FaviconIco"]
    assert [group.name for group in tree.groups()] == ["Css", "Images"]

    images = tree.groups()[1]
    assert images.directory == "images"
    logo = images.leaves()[0]
    assert logo.name == "LogoPng"
    assert logo.relative_path == "images/logo.png"
    assert logo.source_paths == ["/project/wwwroot/images/logo.png"]


def test_deep_nesting_creates_one_group_per_directory(make_records) -> None:
    tree = build_asset_tree(make_records("a/b/c/d/e/f/file.txt"))

    node = tree
    for expected in ["A", "B", "C", "D", "E", "F"]:
        groups = node.groups()
        assert [g.name for g in groups] == [expected]
        node = groups[0]

    assert node.directory == "a/b/c/d/e/f"
    assert node.leaves()[0].relative_path == "a/b/c/d/e/f/file.txt"


def test_records_outside_root_are_ignored() -> None:
    tree = build_asset_tree([AssetRecord("/project/public/logo.png")])
    assert tree.children == {}


def test_flatten_flag_applies_per_record() -> None:
    records = [
        AssetRecord("/p/wwwroot/style.min.css", flatten_extensions=False),
        AssetRecord("/p/wwwroot/app.min.js", flatten_extensions=True),
    ]

    tree = build_asset_tree(records)

    assert sorted(leaf.name for leaf in tree.leaves()) == ["AppMinJs", "StyleMin"]


def test_colliding_files_share_a_node(make_records) -> None:
    tree = build_asset_tree(make_records("images/logo-1.png", "images/logo_1.png"))

    images = tree.groups()[0]
    assert len(images.children) == 1
    assert images.leaves()[0].source_paths == [
        "/project/wwwroot/images/logo-1.png",
        "/project/wwwroot/images/logo_1.png",
    ]


def test_case_variants_share_a_node(make_records) -> None:
    """File names differing only by case are one key; the first spelling wins."""
    tree = build_asset_tree(
        make_records("images/Logo.png", "images/LOGO.png", "images/logo.png")
    )

    leaf = tree.groups()[0].leaves()[0]
    assert leaf.name == "LogoPng"
    assert len(leaf.source_paths) == 3


def test_directory_and_file_with_same_identifier(make_records) -> None:
    """A file 'foo' and a directory 'foo' end up on one conflicted node."""
    tree = build_asset_tree(make_records("foo", "foo/bar.txt"))

    node = tree.groups()[0]
    assert node.name == "Foo"
    assert node.directory == "foo"
    assert node.is_conflicted
    assert node.source_paths == ["/project/wwwroot/foo"]


def test_file_and_directory_without_clash(make_records) -> None:
    tree = build_asset_tree(make_records("test.txt", "test/file.txt"))

    assert [leaf.name for leaf in tree.leaves()] == ["TestTxt"]
    assert [group.name for group in tree.groups()] == ["Test"]
    assert not tree.groups()[0].is_conflicted


def test_insert_skips_directory_entries() -> None:
    root = AssetNode(name="StaticAssets", directory="")
    result = insert_asset(root, AssetRecord("/p/wwwroot/images/"), "images/")

    assert result is None
    assert root.children == {}


def test_insert_drops_empty_segments() -> None:
    root = AssetNode(name="StaticAssets", directory="")
    leaf = insert_asset(root, AssetRecord("/p/wwwroot/css//site.css"), "css//site.css")

    assert leaf is not None
    assert leaf.relative_path == "css/site.css"
    assert [g.name for g in root.groups()] == ["Css"]


def test_identifiers_differing_only_by_word_breaks_coexist(make_records, load_generated) -> None:
    """user-add.svg and useradd.svg are different names, not case variants."""
    tree = build_asset_tree(make_records("icons/user-add.svg", "icons/useradd.svg"))

    icons = tree.groups()[0]
    assert [leaf.name for leaf in icons.leaves()] == ["UserAddSvg", "UseraddSvg"]
    assert detect_collisions(tree) == {}

    assets = load_generated(emit_module(tree))["StaticAssets"]
    assert assets.Icons.UserAddSvg == "/icons/user-add.svg"
    assert assets.Icons.UseraddSvg == "/icons/useradd.svg"


def test_sharp_s_and_double_s_stay_apart(make_records) -> None:
    tree = build_asset_tree(make_records("straße.png", "strasse.png"))

    assert sorted(leaf.name for leaf in tree.leaves()) == ["StrassePng", "StraßePng"]
    assert detect_collisions(tree) == {}


def test_sibling_key_lower_cases_the_raw_segment() -> None:
    assert sibling_key("LOGO.png") == sibling_key("logo.png") == "LogoPng"
    assert sibling_key("user-add.svg") != sibling_key("useradd.svg")
    assert sibling_key("style.min.css", strip_extension=True) == "StyleMin"
