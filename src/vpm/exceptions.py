#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for vpm."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class VpmError(FoundationError):
    """Base exception for all vpm errors."""

    pass


class MalformedHeaderError(VpmError):
    """Raised when an executable is too short to hold the header fields being read."""

    def _default_code(self) -> str:
        return "VPM_MALFORMED_HEADER"


class ManifestValidationError(VpmError):
    """Raised when a .vpack manifest fails DTD validation."""

    def __init__(self, message: str, *, errors: list[str] | None = None, **kwargs: object) -> None:
        super().__init__(message, **kwargs)  # type: ignore[arg-type]
        self.errors = list(errors or [])

    def _default_code(self) -> str:
        return "VPM_MANIFEST_INVALID"


class DtdLoadError(VpmError):
    """Raised when the DTD used to validate manifests cannot be parsed."""

    def _default_code(self) -> str:
        return "VPM_DTD_INVALID"


class CloneError(VpmError):
    """Raised when cloning a git repository fails."""

    def _default_code(self) -> str:
        return "VPM_CLONE_FAILED"


class InstallationCancelled(VpmError):
    """Raised when the user declines to continue an installation."""

    def _default_code(self) -> str:
        return "VPM_CANCELLED"


# 🌶️📦🔚
