"""In-memory form of an IR binary: header, tables, data pools and instructions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

MAGIC = 0x74694952  # "tiIR"


@dataclass
class Header:
    """Identification and entry information of a binary."""

    magic: int = MAGIC
    version_major: int = 0
    version_minor: int = 0
    flags: int = 0
    entrypoint_offset: int = 0
    executable_name: str = ""


@dataclass
class Capability:
    """A host capability the binary asks for."""

    cap_id: Any
    version_major: int = 0
    version_minor: int = 0
    flags: int = 0


@dataclass
class TypeEntry:
    """A type record pointing into the types pool."""

    offset: int = 0
    subtype_count: int = 0


@dataclass
class Symbol:
    """A named item of the binary, located by offset and size."""

    type: Any
    offset: int = 0
    size: int = 0
    flags: int = 0


@dataclass
class DynamicLib:
    """A dynamic library the binary links against."""

    version: int = 0
    symbol_offset: int = 0
    flags: int = 0


@dataclass
class EntryPoint:
    """A place where execution may start."""

    type: Any
    instruction_offset: int = 0
    flags: int = 0


@dataclass
class Function:
    """A run of instructions callable as a function."""

    start_instruction_offset: int = 0
    instruction_count: int = 0
    param_count: int = 0
    flags: int = 0


@dataclass
class DataEntry:
    """A block of read-only or read-write data inside its pool."""

    size: int = 0
    data_offset: int = 0
    alignment: int = 0


@dataclass
class Instruction:
    """One instruction: an opcode and three operands."""

    op_code: int = 0
    a: int = 0
    b: int = 0
    c: int = 0


@dataclass
class BinaryDescription:
    """Offsets, counts and sizes of every section of a binary file."""

    executable_name_offset: int = 0
    capabilities_offset: int = 0
    types_offset: int = 0
    types_pool_offset: int = 0
    symbols_offset: int = 0
    dynamic_libs_offset: int = 0
    entrypoints_offset: int = 0
    functions_offset: int = 0
    ro_data_offset: int = 0
    ro_data_pool_offset: int = 0
    rw_data_offset: int = 0
    rw_data_pool_offset: int = 0
    instructions_offset: int = 0

    executable_name_char_count: int = 0
    capabilities_count: int = 0
    types_count: int = 0
    symbols_count: int = 0
    dynamic_libs_count: int = 0
    entrypoints_count: int = 0
    functions_count: int = 0
    ro_data_count: int = 0
    rw_data_count: int = 0
    instructions_count: int = 0

    types_pool_size: int = 0
    ro_data_pool_size: int = 0
    rw_data_pool_size: int = 0
    uninitialized_data_size: int = 0


@dataclass
class Binary:
    """A whole binary, ready to be inspected or executed."""

    header: Header = field(default_factory=Header)
    capabilities: list[Capability] = field(default_factory=list)
    types: list[TypeEntry] = field(default_factory=list)
    types_pool: bytearray = field(default_factory=bytearray)
    symbols: list[Symbol] = field(default_factory=list)
    dynamic_libs: list[DynamicLib] = field(default_factory=list)
    entrypoints: list[EntryPoint] = field(default_factory=list)
    functions: list[Function] = field(default_factory=list)
    read_only_data: list[DataEntry] = field(default_factory=list)
    read_only_data_pool: bytearray = field(default_factory=bytearray)
    read_only_data_size: int = 0
    read_write_data: list[DataEntry] = field(default_factory=list)
    read_write_data_pool: bytearray = field(default_factory=bytearray)
    read_write_data_size: int = 0
    uninitialized_data_size: int = 0
    instructions: list[Instruction] = field(default_factory=list)

    def add_read_only_data(self, data: bytes | str) -> int:
        """Append *data* to the read-only pool and return the new entry's index."""
        raw = data.encode() if isinstance(data, str) else bytes(data)
        self.read_only_data.append(
            DataEntry(size=len(raw), data_offset=len(self.read_only_data_pool), alignment=0)
        )
        self.read_only_data_pool.extend(raw)
        self.read_only_data_size = len(self.read_only_data_pool)
        return len(self.read_only_data) - 1