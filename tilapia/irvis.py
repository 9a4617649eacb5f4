"""Reading IR binary files and rendering their contents as text."""

from __future__ import annotations

import os
from typing import Any, Iterable

from tilapia.model import Binary, BinaryDescription

_DESCRIPTION_FIELDS = (
    ("executableNameOffset   : ", "executable_name_offset"),
    ("capabilitiesOffset     : ", "capabilities_offset"),
    ("typesOffset            : ", "types_offset"),
    ("typesPoolOffset        : ", "types_pool_offset"),
    ("symbolsOffset          : ", "symbols_offset"),
    ("dynamicLibsOffset      : ", "dynamic_libs_offset"),
    ("entrypointsOffset      : ", "entrypoints_offset"),
    ("functionsOffset        : ", "functions_offset"),
    ("roDataOffset           : ", "ro_data_offset"),
    ("roDataPoolOffset       : ", "ro_data_pool_offset"),
    ("rwDataOffset           : ", "rw_data_offset"),
    ("rwDataPoolOffset       : ", "rw_data_pool_offset"),
    ("Instructions Offset    : ", "instructions_offset"),
    ("executableNameCharCount : ", "executable_name_char_count"),
    ("capabilitiesCount      : ", "capabilities_count"),
    ("typesCount             : ", "types_count"),
    ("symbolsCount           : ", "symbols_count"),
    ("dynamicLibsCount       : ", "dynamic_libs_count"),
    ("entrypointsCount       : ", "entrypoints_count"),
    ("functionsCount         : ", "functions_count"),
    ("roDataCount            : ", "ro_data_count"),
    ("rwDataCount            : ", "rw_data_count"),
    ("Instructions Count     : ", "instructions_count"),
    ("typesPoolSize          : ", "types_pool_size"),
    ("roDataPoolSize         : ", "ro_data_pool_size"),
    ("rwDataPoolSize         : ", "rw_data_pool_size"),
    ("uninitializedDataSize  : ", "uninitialized_data_size"),
)


def load_file(path: str | os.PathLike) -> bytes:
    """Return the whole contents of the file at *path*."""
    with open(path, "rb") as handle:
        return handle.read()


def wants_description(args: Iterable[str]) -> bool:
    """True when the command-line arguments ask for the binary description."""
    return "d" in args


def _name(value: Any) -> str:
    return str(getattr(value, "name", value))


def format_description(desc: BinaryDescription) -> str:
    """Render the section table of a binary file."""
    lines = ["DESCRIPTION (FIRST 192 BYTES)"]
    lines.extend(f"{label}{getattr(desc, attr)} " for label, attr in _DESCRIPTION_FIELDS)
    return "\n".join(lines)


def format_binary(binary: Binary) -> str:
    """Render the header and every table of *binary*."""
    header = binary.header
    lines = [
        "HEADER",
        f"Magic Number       : {header.magic:#010x}",
        f"Version Major      : {header.version_major}",
        f"Version Minor      : {header.version_minor}",
        f"Flags              : {header.flags}",
        f"Entry Point Offset : {header.entrypoint_offset}",
        f"Executable Name    : {header.executable_name}",
        f"RO Size            : {binary.read_only_data_size}",
        f"RW Size            : {binary.read_write_data_size}",
        f"BSS Size           : {binary.uninitialized_data_size}",
    ]

    lines.append("CAPABILITIES")
    lines.extend(
        f"[{i}] {_name(cap.cap_id):<16} v{cap.version_major}.{cap.version_minor} "
        f"flags=0x{cap.flags:08X}"
        for i, cap in enumerate(binary.capabilities)
    )

    lines.append("TYPES")
    lines.extend(
        f"[{i}] offset={typ.offset} subtypeCount={typ.subtype_count}"
        for i, typ in enumerate(binary.types)
    )

    lines.append("SYMBOLS")
    lines.extend(
        f"[{i}] {_name(sym.type):<12} offset={sym.offset} size={sym.size} "
        f"flags=0x{sym.flags:08X}"
        for i, sym in enumerate(binary.symbols)
    )

    lines.append("DYNAMIC LIBRARIES")
    lines.extend(
        f"[{i}] version={lib.version} symbolOffset={lib.symbol_offset} "
        f"flags=0x{lib.flags:08X}"
        for i, lib in enumerate(binary.dynamic_libs)
    )

    lines.append("ENTRY POINTS")
    lines.extend(
        f"[{i}] {_name(ep.type):<12} instructionOffset={ep.instruction_offset} "
        f"flags=0x{ep.flags:08X}"
        for i, ep in enumerate(binary.entrypoints)
    )

    lines.append("FUNCTIONS")
    lines.extend(
        f"[{i}] start={fn.start_instruction_offset} count={fn.instruction_count} "
        f"params={fn.param_count} flags=0x{fn.flags:04X}"
        for i, fn in enumerate(binary.functions)
    )

    for title, entries in (
        ("READ ONLY DATA", binary.read_only_data),
        ("READ WRITE DATA", binary.read_write_data),
    ):
        lines.append(title)
        lines.extend(
            f"[{i}] size={entry.size} dataOffset={entry.data_offset} "
            f"alignment={entry.alignment}"
            for i, entry in enumerate(entries)
        )

    lines.append("INSTRUCTIONS")
    lines.extend(
        f"[{i}] {_name(inst.op_code):<12} {inst.a} {inst.b} {inst.c}"
        for i, inst in enumerate(binary.instructions)
    )
    return "\n".join(lines)