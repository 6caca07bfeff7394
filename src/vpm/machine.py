#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Target architecture detection for native executables.

Reads just enough of a PE file to answer "which CPU is this built for":
the DOS header's pointer to the PE header, then the machine field that
follows the PE signature. No full PE parsing is done.
"""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
import struct

from provide.foundation import logger

from vpm.exceptions import MalformedHeaderError

HEADER_READ_SIZE = 4096  # Only this much of the file is ever read
DOS_HEADER_SIZE = 0x40
PE_POINTER_OFFSET = 0x3C  # e_lfanew, last field of the DOS header
MACHINE_OFFSET = 4  # Machine field follows the "PE\0\0" signature
MACHINE_FIELD_SIZE = 2


class MachineType(IntEnum):
    """CPU architecture code from the PE file header.

    Codes outside the known set are kept rather than rejected:
    ``MachineType(0xAA64)`` yields a pseudo-member equal to ``0xAA64``
    whose ``is_known`` is False.
    """

    NATIVE = 0x0000
    X86 = 0x014C
    ITANIUM = 0x0200
    X64 = 0x8664

    @classmethod
    def _missing_(cls, value: object) -> MachineType | None:
        if isinstance(value, int) and 0 <= value <= 0xFFFF:
            pseudo = int.__new__(cls, value)
            pseudo._name_ = f"UNKNOWN_0x{value:04X}"
            pseudo._value_ = value
            return pseudo
        return None

    @property
    def is_known(self) -> bool:
        return self._name_ in type(self).__members__

    @property
    def label(self) -> str:
        """Human-readable architecture name."""
        return _LABELS.get(self._value_, f"Unknown (0x{self._value_:04x})")


_LABELS = {
    0x0000: "Native",
    0x014C: "x86",
    0x0200: "Itanium",
    0x8664: "x64",
}


def machine_type_from_bytes(data: bytes) -> MachineType:
    """
    Decode the machine type from the leading bytes of an executable.

    Args:
        data: Leading bytes of the file; anything past HEADER_READ_SIZE is ignored

    Returns:
        The machine type, widened to a pseudo-member for unknown codes

    Raises:
        MalformedHeaderError: If the data is too short for either header field
    """
    data = data[:HEADER_READ_SIZE]

    if len(data) < DOS_HEADER_SIZE:
        raise MalformedHeaderError(
            f"File too small for DOS header: {len(data)} bytes, need {DOS_HEADER_SIZE}",
            size=len(data),
        )

    pe_offset: int = struct.unpack_from("<i", data, PE_POINTER_OFFSET)[0]
    if pe_offset < 0:
        raise MalformedHeaderError(
            f"Negative PE header offset: {pe_offset}",
            pe_offset=pe_offset,
        )

    machine_offset = pe_offset + MACHINE_OFFSET
    if machine_offset + MACHINE_FIELD_SIZE > len(data):
        raise MalformedHeaderError(
            f"Machine field at 0x{machine_offset:x} lies beyond the {len(data)} bytes read",
            pe_offset=pe_offset,
            size=len(data),
        )

    machine: int = struct.unpack_from("<H", data, machine_offset)[0]
    logger.trace(
        "Read machine field",
        pe_offset=f"0x{pe_offset:x}",
        machine=f"0x{machine:04x}",
    )
    return MachineType(machine)


def get_machine_type(path: str | Path) -> MachineType:
    """
    Determine the target architecture of an executable file.

    Args:
        path: Path to the executable

    Returns:
        The machine type read from the file header

    Raises:
        OSError: If the file cannot be opened or read
        MalformedHeaderError: If the file is too short for the header fields
    """
    with Path(path).open("rb") as f:
        data = f.read(HEADER_READ_SIZE)

    machine = machine_type_from_bytes(data)
    if not machine.is_known:
        logger.debug("Unrecognized machine type", path=str(path), machine=f"0x{int(machine):04x}")
    return machine


# 🌶️📦🔚
