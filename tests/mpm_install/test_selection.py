"""
MPM Install — Product selection and release answers.
"""

from __future__ import annotations

import pytest

from mpm_installer.core.models.platform import Platform
from mpm_installer.core.models.release import Release
from mpm_installer.core.services.mpm_install.domain.selection import (
    expand_shorthands,
    shorthands_touching,
    split_products,
    validate_selection,
)
from mpm_installer.core.services.mpm_install.resolver.catalog_resolution import (
    resolve_platform_catalog,
)
from mpm_installer.core.services.mpm_install.resolver.release_selection import (
    choose_release,
    default_release,
)


class TestSplitProducts:

    def test_whitespace(self):
        assert split_products("MATLAB  Simulink\tSimscape ") == ["MATLAB", "Simulink", "Simscape"]

    def test_empty(self):
        assert split_products("   ") == []


class TestExpandShorthands:

    def test_parallel_products(self):
        assert expand_shorthands(["parallel_products"]) == [
            "MATLAB", "Parallel_Computing_Toolbox", "MATLAB_Parallel_Server",
        ]

    def test_duplicates_dropped_first_wins(self):
        expanded = expand_shorthands(["Simulink", "MATLAB", "parallel_products", "Simulink"])
        assert expanded == [
            "Simulink", "MATLAB", "Parallel_Computing_Toolbox", "MATLAB_Parallel_Server",
        ]

    def test_plain_tokens_pass_through(self):
        assert expand_shorthands(["NotAProduct"]) == ["NotAProduct"]

    def test_custom_shorthands(self):
        assert expand_shorthands(["core"], {"core": ("MATLAB", "Simulink")}) == ["MATLAB", "Simulink"]


class TestValidateSelection:

    def test_all_available(self):
        catalog = frozenset({"MATLAB", "Simulink"})
        assert validate_selection(["MATLAB"], catalog) == frozenset()

    def test_unknown_product(self):
        catalog = resolve_platform_catalog(Platform.LINUX, Release.parse("R2024b"))
        assert validate_selection(["NotAProduct"], catalog) == frozenset({"NotAProduct"})

    def test_empty_selection(self):
        assert validate_selection([], frozenset({"MATLAB"})) == frozenset()

    def test_parallel_products_before_parallel_server(self):
        catalog = resolve_platform_catalog(Platform.LINUX, Release.parse("R2018b"))
        missing = validate_selection(expand_shorthands(["parallel_products"]), catalog)
        assert missing == frozenset({"MATLAB_Parallel_Server"})

    def test_parallel_products_from_r2019a(self):
        catalog = resolve_platform_catalog(Platform.LINUX, Release.parse("R2019a"))
        assert validate_selection(expand_shorthands(["parallel_products"]), catalog) == frozenset()


class TestShorthandsTouching:

    def test_reports_shorthand(self):
        tokens = ["parallel_products", "Simulink"]
        assert shorthands_touching(tokens, {"MATLAB_Parallel_Server"}) == ["parallel_products"]

    def test_ignores_unrelated_missing(self):
        assert shorthands_touching(["parallel_products", "Foo"], {"Foo"}) == []

    def test_reported_once(self):
        tokens = ["parallel_products", "parallel_products"]
        assert shorthands_touching(tokens, {"MATLAB_Parallel_Server"}) == ["parallel_products"]


class TestChooseRelease:

    def test_empty_answer_selects_newest(self, linux_spec):
        result = choose_release("", linux_spec)
        assert result["ok"] is True
        assert result["release"] == Release.parse("R2024b")
        assert default_release(linux_spec) == Release.parse("R2024b")

    def test_case_insensitive(self, linux_spec):
        assert choose_release("r2020A", linux_spec)["release"] == Release.parse("R2020a")

    @pytest.mark.parametrize("answer", ["R2016b", "R2017a", "R2025a", "latest"])
    def test_out_of_window(self, linux_spec, answer):
        result = choose_release(answer, linux_spec)
        assert result["ok"] is False
        assert result["error"] == "Invalid release. Enter a release between R2017b-R2024b."

    def test_windows_r2023b(self, windows_spec):
        result = choose_release("R2023b", windows_spec)
        assert result["ok"] is False
        assert "does not support R2023b on Windows" in result["error"]

    def test_windows_neighbours_allowed(self, windows_spec):
        assert choose_release("R2023a", windows_spec)["ok"] is True
        assert choose_release("R2024a", windows_spec)["ok"] is True

    def test_apple_silicon_window(self):
        from mpm_installer.core.services.mpm_install.data.platforms import PLATFORM_SPECS

        spec = PLATFORM_SPECS[Platform.MACOS_ARM]
        result = choose_release("R2023a", spec)
        assert result["ok"] is False
        assert "R2023b-R2024b" in result["error"]
        assert choose_release("R2023b", spec)["ok"] is True
