#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

""".vpack manifest parsing and DTD validation.

Validation reports problems as a ManifestValidation result; load_manifest
is the raising convenience for callers that only want a valid document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib.resources import files
from pathlib import Path
from typing import Any

from lxml import etree
from provide.foundation import logger

from vpm.config.defaults import MANIFEST_DTD_RESOURCE, MANIFEST_ERROR_PREFIX
from vpm.exceptions import DtdLoadError, ManifestValidationError


@dataclass
class ManifestValidation:
    """Outcome of validating a manifest against the DTD."""

    path: Path
    valid: bool
    errors: list[str] = field(default_factory=list)
    document: Any = None  # lxml ElementTree when the file parsed


def _make_parser() -> etree.XMLParser:
    # Never fetch or expand anything the manifest points at
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        dtd_validation=False,
    )


def _format_log_entry(entry: Any) -> str:
    return f"line {entry.line}, column {entry.column}: {entry.message}"


def load_dtd(dtd_path: str | Path | None = None) -> etree.DTD:
    """
    Load the DTD from dtd_path, or the one bundled with vpm.

    Raises:
        DtdLoadError: If the DTD cannot be read or parsed
    """
    source = str(dtd_path) if dtd_path is not None else MANIFEST_DTD_RESOURCE
    try:
        if dtd_path is not None:
            return etree.DTD(str(dtd_path))

        resource = files("vpm") / "data" / MANIFEST_DTD_RESOURCE
        with resource.open("rb") as f:
            return etree.DTD(f)
    except etree.DTDError as e:
        errors = [_format_log_entry(entry) for entry in e.error_log] or [str(e)]
        logger.error("Could not load DTD", dtd=source, errors=errors)
        raise DtdLoadError(f"Invalid DTD {source}: {errors[0]}", cause=e, dtd=source) from e


def validate_manifest(path: str | Path, dtd_path: str | Path | None = None) -> ManifestValidation:
    """
    Parse a manifest and validate it against the .vpack DTD.

    Syntax and schema problems are returned as diagnostics, not raised.

    Args:
        path: Manifest file
        dtd_path: Alternative DTD; the bundled one when None

    Returns:
        ManifestValidation with the parsed document when parsing succeeded

    Raises:
        FileNotFoundError: If the manifest does not exist
        DtdLoadError: If the DTD cannot be parsed
    """
    manifest = Path(path)
    if not manifest.is_file():
        raise FileNotFoundError(f"Manifest not found: {manifest}")

    try:
        document = etree.parse(str(manifest), _make_parser())
    except etree.XMLSyntaxError as e:
        errors = [_format_log_entry(entry) for entry in e.error_log] or [str(e)]
        logger.debug("Manifest is not well-formed", path=str(manifest), errors=errors)
        return ManifestValidation(path=manifest, valid=False, errors=errors)

    dtd = load_dtd(dtd_path)
    if dtd.validate(document):
        logger.debug("Manifest is valid", path=str(manifest))
        return ManifestValidation(path=manifest, valid=True, document=document)

    errors = [_format_log_entry(entry) for entry in dtd.error_log.filter_from_errors()]
    logger.debug("Manifest failed DTD validation", path=str(manifest), errors=errors)
    return ManifestValidation(path=manifest, valid=False, errors=errors, document=document)


def load_manifest(path: str | Path, dtd_path: str | Path | None = None) -> Any:
    """
    Validate a manifest and return its parsed document.

    Raises:
        FileNotFoundError: If the manifest does not exist
        ManifestValidationError: If the manifest is malformed or invalid
        DtdLoadError: If the DTD cannot be parsed
    """
    result = validate_manifest(path, dtd_path)
    if not result.valid:
        first = result.errors[0] if result.errors else "unknown error"
        raise ManifestValidationError(
            f"{MANIFEST_ERROR_PREFIX}{first}",
            errors=result.errors,
            path=str(result.path),
        )
    return result.document


def manifest_aliases(document: Any) -> list[str]:
    """Return the pack name followed by its declared aliases."""
    root = document.getroot()
    names = [root.findtext("meta/name", default="").strip()]
    names.extend((alias.text or "").strip() for alias in root.iterfind("meta/aliases/alias"))
    return [n for n in names if n]


# 🌶️📦🔚
