#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for vpm tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
import shutil
import struct
import tempfile

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

VALID_MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<vpack>
  <meta>
    <name>mp.dx</name>
    <source>https://github.com/example/mp.dx.git</source>
    <author>example</author>
    <aliases>
      <alias>mp-dx</alias>
      <alias>dx11.mp</alias>
    </aliases>
  </meta>
  <dependencies>
    <dependency>
      <name>VVVV.Packs.Image</name>
      <source>https://example.com/image.vpack</source>
    </dependency>
  </dependencies>
  <install>CopyDirectory(Pack.TempDir, Pack.InstallDir);</install>
</vpack>
"""


def build_executable(machine: int = 0x8664, pe_offset: int = 0x80, size: int | None = None) -> bytes:
    """Build a minimal executable image with only the fields the sniffer reads.

    Args:
        machine: Machine code written after the PE signature
        pe_offset: Value of the e_lfanew pointer at 0x3C
        size: Total length; defaults to just enough to hold the machine field
    """
    length = size if size is not None else pe_offset + 6
    data = bytearray(max(length, pe_offset + 6))

    data[0:2] = b"MZ"
    struct.pack_into("<i", data, 0x3C, pe_offset)
    data[pe_offset : pe_offset + 4] = b"PE\x00\x00"
    struct.pack_into("<H", data, pe_offset + 4, machine)

    return bytes(data[:length])


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    # Reset again after test to ensure clean state
    reset_foundation_setup_for_testing()


@pytest.fixture(autouse=True)
def isolated_vpm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep VPM_* settings from the developer's shell out of tests."""
    for var in ("VPM_LOG_LEVEL", "VPM_SETUP_LOG_LEVEL", "VPM_QUIET", "VPM_TEMP_DIR", "VPM_VVVV_EXE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for tests.

    This fixture provides a clean temporary directory that is automatically
    cleaned up after the test completes.
    """
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    # Cleanup
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def write_executable(temp_dir: Path) -> Callable[..., Path]:
    """Factory writing a minimal executable into temp_dir."""

    def _write(name: str = "app.exe", **kwargs: int) -> Path:
        path = temp_dir / name
        path.write_bytes(build_executable(**kwargs))
        return path

    return _write


@pytest.fixture
def manifest_file(temp_dir: Path) -> Path:
    """A valid .vpack manifest."""
    path = temp_dir / "mp.dx.vpack"
    path.write_text(VALID_MANIFEST, encoding="utf-8")
    return path


@pytest.fixture
def vvvv_install(temp_dir: Path) -> Path:
    """A fake vvvv installation with two packs; returns the path of vvvv.exe."""
    root = temp_dir / "vvvv"
    (root / "packs" / "VVVV.Packs.Image").mkdir(parents=True)
    (root / "packs" / "mp.dx").mkdir()
    (root / "packs" / "readme.txt").write_text("not a pack")
    exe = root / "vvvv.exe"
    exe.write_bytes(build_executable(machine=0x8664))
    return exe


# 🌶️📦🔚
