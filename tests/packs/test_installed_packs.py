#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for installed pack lookup."""

from __future__ import annotations

from pathlib import Path

import pytest

from vpm.packs import (
    find_existing_pack,
    installed_pack_names,
    is_alias_existing,
    packs_dir_for,
)


@pytest.fixture
def packs_dir(vvvv_install: Path) -> Path:
    return vvvv_install.parent / "packs"


class TestPacksDirFor:
    """Tests for locating the packs directory."""

    def test_beside_executable(self, temp_dir: Path) -> None:
        """Test the packs directory sits next to vvvv.exe."""
        assert packs_dir_for(temp_dir / "vvvv_45beta" / "vvvv.exe") == temp_dir / "vvvv_45beta" / "packs"

    def test_accepts_string_path(self) -> None:
        """Test that str paths are accepted."""
        assert packs_dir_for("C:/vvvv/vvvv.exe") == Path("C:/vvvv/packs")


class TestInstalledPackNames:
    """Tests for listing installed packs."""

    def test_lists_directories_only(self, packs_dir: Path) -> None:
        """Test that only directories count as packs."""
        assert installed_pack_names(packs_dir) == ["VVVV.Packs.Image", "mp.dx"]

    def test_missing_directory(self, temp_dir: Path) -> None:
        """Test that a missing packs directory means no packs."""
        assert installed_pack_names(temp_dir / "packs") == []


class TestIsAliasExisting:
    """Tests for is_alias_existing."""

    def test_exact_name(self, packs_dir: Path) -> None:
        """Test an exact directory name."""
        assert is_alias_existing("mp.dx", packs_dir)

    @pytest.mark.parametrize("name", ["MP.DX", "vvvv.packs.image", "Vvvv.Packs.IMAGE"])
    def test_case_insensitive(self, packs_dir: Path, name: str) -> None:
        """Test that the comparison ignores case."""
        assert is_alias_existing(name, packs_dir)

    def test_not_installed(self, packs_dir: Path) -> None:
        """Test a name with no directory."""
        assert not is_alias_existing("dx11", packs_dir)

    def test_files_are_not_packs(self, packs_dir: Path) -> None:
        """Test that a regular file with the name does not count."""
        assert not is_alias_existing("readme.txt", packs_dir)

    def test_missing_packs_directory(self, temp_dir: Path) -> None:
        """Test that a missing packs directory yields False."""
        assert not is_alias_existing("mp.dx", temp_dir / "nowhere")


class TestFindExistingPack:
    """Tests for find_existing_pack."""

    def test_found_by_name(self, packs_dir: Path) -> None:
        """Test that the canonical name wins."""
        assert find_existing_pack("mp.dx", ["VVVV.Packs.Image"], packs_dir) == "mp.dx"

    def test_found_by_alias(self, packs_dir: Path) -> None:
        """Test that the first installed alias is returned."""
        assert find_existing_pack("mp.directx", ["dx11", "MP.DX", "vvvv.packs.image"], packs_dir) == "MP.DX"

    def test_not_found(self, packs_dir: Path) -> None:
        """Test None when neither name nor aliases are installed."""
        assert find_existing_pack("dx11", ["dx11.mp"], packs_dir) is None

    def test_no_aliases(self, packs_dir: Path) -> None:
        """Test lookup with an empty alias list."""
        assert find_existing_pack("other", [], packs_dir) is None


# 🌶️📦🔚
