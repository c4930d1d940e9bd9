"""Tests for importsweep.aliases: alias table builder and resolver."""

from __future__ import annotations

import json

import pytest

from importsweep.aliases import (
    AliasEntry,
    extract_alias_table,
    find_alias_for_import,
    is_relative_specifier,
    load_alias_table,
)


@pytest.fixture
def root(tmp_path):
    return tmp_path.resolve()


def _write_json(path, data):
    path.write_text(json.dumps(data))


# ===========================================================================
# load_alias_table
# ===========================================================================


class TestLoadAliasTable:
    def test_basic_paths(self, root):
        _write_json(root / "tsconfig.json", {
            "compilerOptions": {"baseUrl": ".", "paths": {"@/*": ["src/*"]}},
        })
        table = load_alias_table(root)
        assert table == (AliasEntry("@/", str(root / "src")),)

    def test_base_url_defaults_to_dot(self, root):
        _write_json(root / "tsconfig.json", {
            "compilerOptions": {"paths": {"@/*": ["./src/*"]}},
        })
        assert load_alias_table(root) == (AliasEntry("@/", str(root / "src")),)

    def test_base_url_joined_with_target(self, root):
        _write_json(root / "tsconfig.json", {
            "compilerOptions": {"baseUrl": "src", "paths": {"~/*": ["*"]}},
        })
        assert load_alias_table(root) == (AliasEntry("~/", str(root / "src")),)

    def test_only_first_target_used(self, root):
        _write_json(root / "tsconfig.json", {
            "compilerOptions": {"paths": {"@lib/*": ["lib/*", "vendor/lib/*"]}},
        })
        assert load_alias_table(root) == (AliasEntry("@lib/", str(root / "lib")),)

    def test_declaration_order_preserved(self, root):
        _write_json(root / "tsconfig.json", {
            "compilerOptions": {"paths": {
                "@components/*": ["src/components/*"],
                "@/*": ["src/*"],
            }},
        })
        table = load_alias_table(root)
        assert [entry.prefix for entry in table] == ["@components/", "@/"]

    def test_missing_config_returns_empty(self, root):
        assert load_alias_table(root) == ()

    def test_malformed_json_returns_empty(self, root):
        (root / "tsconfig.json").write_text("{ not json")
        assert load_alias_table(root) == ()

    def test_non_object_json_returns_empty(self, root):
        (root / "tsconfig.json").write_text("[1, 2]")
        assert load_alias_table(root) == ()

    def test_invalid_targets_skipped(self, root):
        _write_json(root / "tsconfig.json", {
            "compilerOptions": {"paths": {
                "@a/*": [],
                "@b/*": [42],
                "@c/*": "src/c/*",
                "@d/*": ["src/d/*"],
            }},
        })
        assert load_alias_table(root) == (AliasEntry("@d/", str(root / "src" / "d")),)

    def test_jsconfig_fallback(self, root):
        _write_json(root / "jsconfig.json", {
            "compilerOptions": {"paths": {"@/*": ["src/*"]}},
        })
        assert load_alias_table(root) == (AliasEntry("@/", str(root / "src")),)

    def test_relative_extends_followed(self, root):
        (root / "config").mkdir()
        _write_json(root / "config" / "tsconfig.base.json", {
            "compilerOptions": {"paths": {"@/*": ["../src/*"]}},
        })
        _write_json(root / "tsconfig.json", {"extends": "./config/tsconfig.base.json"})
        assert load_alias_table(root) == (AliasEntry("@/", str(root / "src")),)

    def test_package_extends_ignored(self, root):
        _write_json(root / "tsconfig.json", {"extends": "@tsconfig/node18/tsconfig.json"})
        assert load_alias_table(root) == ()

    def test_custom_config_names(self, root):
        _write_json(root / "tsconfig.app.json", {
            "compilerOptions": {"paths": {"@/*": ["src/*"]}},
        })
        assert load_alias_table(root) == ()
        assert load_alias_table(root, ["tsconfig.app.json"]) == (
            AliasEntry("@/", str(root / "src")),
        )


class TestExtractAliasTable:
    def test_no_compiler_options(self, root):
        assert extract_alias_table({}, root) == ()

    def test_non_string_base_url_treated_as_dot(self, root):
        data = {"compilerOptions": {"baseUrl": 3, "paths": {"@/*": ["src/*"]}}}
        assert extract_alias_table(data, root) == (AliasEntry("@/", str(root / "src")),)


# ===========================================================================
# find_alias_for_import
# ===========================================================================


class TestFindAliasForImport:
    def test_round_trip_example(self, root):
        aliases = (AliasEntry("@/", str(root / "src")),)
        importer = root / "src" / "a" / "b.ts"
        assert find_alias_for_import("../c", importer, aliases) == "@/c"

    def test_same_directory(self, root):
        aliases = (AliasEntry("@/", str(root / "src")),)
        importer = root / "src" / "a" / "b.ts"
        assert find_alias_for_import("./c", importer, aliases) == "@/a/c"

    def test_declared_prefix_is_emitted(self, root):
        aliases = (AliasEntry("~components/", str(root / "src" / "components")),)
        importer = root / "src" / "pages" / "home.tsx"
        assert (
            find_alias_for_import("../components/Button", importer, aliases)
            == "~components/Button"
        )

    @pytest.mark.parametrize("specifier", ["react", "@/c", "lodash/fp", "/abs/path"])
    def test_non_relative_passthrough(self, root, specifier):
        aliases = (AliasEntry("@/", str(root)),)
        assert find_alias_for_import(specifier, root / "src" / "a.ts", aliases) is None

    def test_no_match_outside_targets(self, root):
        aliases = (AliasEntry("@/", str(root / "src")),)
        importer = root / "lib" / "x.ts"
        assert find_alias_for_import("./y", importer, aliases) is None

    def test_prefix_respects_path_boundary(self, root):
        aliases = (AliasEntry("@/", str(root / "src")),)
        importer = root / "srcfoo" / "x.ts"
        assert find_alias_for_import("./y", importer, aliases) is None

    def test_first_declared_entry_wins(self, root):
        aliases = (
            AliasEntry("@/", str(root / "src")),
            AliasEntry("@components/", str(root / "src" / "components")),
        )
        importer = root / "src" / "pages" / "home.tsx"
        assert find_alias_for_import("../components/Button", importer, aliases) == "@/components/Button"

    def test_exact_target_match(self, root):
        aliases = (AliasEntry("@utils", str(root / "src" / "utils")),)
        importer = root / "src" / "pages" / "home.ts"
        assert find_alias_for_import("../utils", importer, aliases) == "@utils"

    def test_empty_table(self, root):
        assert find_alias_for_import("./c", root / "a.ts", ()) is None


class TestIsRelativeSpecifier:
    @pytest.mark.parametrize("specifier", [".", "..", "./a", "../a/b"])
    def test_relative(self, specifier):
        assert is_relative_specifier(specifier)

    @pytest.mark.parametrize("specifier", ["react", ".hidden", "@/a", ""])
    def test_not_relative(self, specifier):
        assert not is_relative_specifier(specifier)
