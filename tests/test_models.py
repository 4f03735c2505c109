"""
Tests for the core models — releases, platforms and catalog tables.
"""

import random

import pytest

from mpm_installer.core.models import Half, Platform, Release, ReleaseFormatError, release_range
from mpm_installer.core.models.catalog import ProductCatalog, ProductRecord


class TestReleaseParse:
    """Release labels → (year, half)."""

    def test_canonical_label(self):
        release = Release.parse("R2024a")
        assert release.year == 2024
        assert release.half == Half.A

    def test_case_and_prefix_are_optional(self):
        assert Release.parse("r2024B") == Release(2024, Half.B)
        assert Release.parse("2024b") == Release(2024, Half.B)
        assert Release.parse("  R2019a  ") == Release(2019, Half.A)

    @pytest.mark.parametrize("label", ["", "R2024", "R2024c", "R24a", "2024ab", "latest", "R 2024a"])
    def test_invalid_labels(self, label):
        with pytest.raises(ReleaseFormatError):
            Release.parse(label)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            Release.parse("nope")

    def test_label_round_trip(self):
        assert Release(2017, Half.B).label == "R2017b"
        assert str(Release.parse("r2021a")) == "R2021a"


class TestReleaseOrdering:
    """Chronological order, independent of string sorting."""

    def test_half_then_year(self):
        assert Release.parse("R2024a") < Release.parse("R2024b") < Release.parse("R2025a")

    def test_sorting_shuffled_releases(self):
        ordered = release_range(Release.parse("R2017b"), Release.parse("R2024b"))
        shuffled = ordered[:]
        random.Random(7).shuffle(shuffled)
        assert sorted(shuffled) == ordered

    def test_year_dominates_half(self):
        assert Release(2019, Half.B) < Release(2020, Half.A)

    def test_next(self):
        assert Release.parse("R2023a").next() == Release.parse("R2023b")
        assert Release.parse("R2023b").next() == Release.parse("R2024a")

    def test_releases_are_hashable(self):
        table = {Release.parse("R2020a"): "x"}
        assert table[Release(2020, Half.A)] == "x"


class TestReleaseRange:

    def test_inclusive(self):
        labels = [r.label for r in release_range(Release.parse("R2022b"), Release.parse("R2024a"))]
        assert labels == ["R2022b", "R2023a", "R2023b", "R2024a"]

    def test_single(self):
        only = Release.parse("R2020a")
        assert release_range(only, only) == [only]

    def test_empty_when_reversed(self):
        assert release_range(Release.parse("R2021a"), Release.parse("R2020a")) == []


class TestPlatform:

    def test_values(self):
        assert {p.value for p in Platform} == {"windows", "linux", "macos-x64", "macos-arm"}

    def test_is_macos(self):
        assert Platform.MACOS_ARM.is_macos
        assert Platform.MACOS_X64.is_macos
        assert not Platform.LINUX.is_macos

    def test_display_name(self):
        assert Platform.MACOS_ARM.display_name == "macOS (Apple silicon)"
        assert Platform.WINDOWS.display_name == "Windows"


class TestProductCatalog:
    """ProductRecord → per-platform tables."""

    def test_records_filtered_by_platform(self):
        records = [
            ProductRecord("MATLAB"),
            ProductRecord("Spreadsheet_Link", platforms=frozenset({Platform.WINDOWS})),
        ]
        linux = ProductCatalog.from_records(Platform.LINUX, records)
        windows = ProductCatalog.from_records(Platform.WINDOWS, records)
        assert linux.additions[Release.parse("R2017b")] == frozenset({"MATLAB"})
        assert "Spreadsheet_Link" in windows.additions[Release.parse("R2017b")]

    def test_platform_specific_added_release(self):
        record = ProductRecord("Simulink_PLC_Coder", "R2019a", added_on={Platform.WINDOWS: "R2017b"})
        windows = ProductCatalog.from_records(Platform.WINDOWS, [record])
        linux = ProductCatalog.from_records(Platform.LINUX, [record])
        assert Release.parse("R2017b") in windows.additions
        assert Release.parse("R2019a") in linux.additions

    def test_removal_recorded(self):
        record = ProductRecord("Trading_Toolbox", removed="R2021a")
        catalog = ProductCatalog.from_records(Platform.LINUX, [record])
        assert catalog.removals[Release.parse("R2021a")] == frozenset({"Trading_Toolbox"})

    def test_excluded(self):
        catalog = ProductCatalog.from_records(
            Platform.MACOS_ARM, [ProductRecord("MATLAB"), ProductRecord("GPU_Coder")],
            excluded=["GPU_Coder"],
        )
        assert catalog.additions[Release.parse("R2017b")] == frozenset({"MATLAB"})

    def test_tables_are_read_only(self):
        catalog = ProductCatalog.from_records(Platform.LINUX, [ProductRecord("MATLAB")])
        with pytest.raises(TypeError):
            catalog.additions[Release.parse("R2030a")] = frozenset()  # type: ignore[index]
