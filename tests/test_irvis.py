import enum

import pytest

from tilapia.irvis import format_binary, format_description, load_file, wants_description
from tilapia.model import (
    Binary,
    BinaryDescription,
    Capability,
    EntryPoint,
    Function,
    Header,
    Instruction,
)


class Cap(enum.Enum):
    print = 1


class EntryKind(enum.Enum):
    executable = 0


def _binary() -> Binary:
    binary = Binary(header=Header(version_major=1, executable_name="test exec"))
    binary.capabilities.append(Capability(Cap.print, 1, 0, 0))
    binary.entrypoints.append(EntryPoint(EntryKind.executable, 0, 0))
    binary.functions.append(Function(0, 3, 0, 0))
    binary.add_read_only_data("hello world")
    binary.instructions.extend([Instruction(4), Instruction(25), Instruction(26)])
    return binary


def test_load_file_returns_bytes(tmp_path):
    path = tmp_path / "prog.tir"
    path.write_bytes(b"tiIR\x01\x00")
    assert load_file(path) == b"tiIR\x01\x00"


def test_load_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_file(tmp_path / "absent.tir")


def test_wants_description():
    assert wants_description(["irvis", "d", "file.tir"]) is True
    assert wants_description(["irvis", "file.tir"]) is False


def test_format_description_lists_every_field():
    fields = list(BinaryDescription.__dataclass_fields__)
    desc = BinaryDescription(**{name: 1000 + n for n, name in enumerate(fields)})
    lines = format_description(desc).split("\n")
    assert lines[0] == "DESCRIPTION (FIRST 192 BYTES)"
    assert len(lines) == len(fields) + 1
    for n, line in enumerate(lines[1:]):
        assert line.endswith(f": {1000 + n} ")


def test_format_binary_header():
    text = format_binary(_binary())
    assert "Magic Number       : 0x74694952" in text
    assert "Executable Name    : test exec" in text
    assert f"RO Size            : {len('hello world')}" in text


def test_format_binary_sections_in_order():
    lines = format_binary(_binary()).split("\n")
    titles = [
        "HEADER",
        "CAPABILITIES",
        "TYPES",
        "SYMBOLS",
        "DYNAMIC LIBRARIES",
        "ENTRY POINTS",
        "FUNCTIONS",
        "READ ONLY DATA",
        "READ WRITE DATA",
        "INSTRUCTIONS",
    ]
    positions = [lines.index(title) for title in titles]
    assert positions == sorted(positions)
    assert len(lines) - 1 - lines.index("INSTRUCTIONS") == len(_binary().instructions)


def test_format_binary_capability_line():
    lines = format_binary(_binary()).split("\n")
    cap_line = lines[lines.index("CAPABILITIES") + 1]
    assert cap_line.startswith("[0] print ")
    assert cap_line.endswith("v1.0 flags=0x00000000")


def test_format_binary_read_only_entry():
    lines = format_binary(_binary()).split("\n")
    entry = lines[lines.index("READ ONLY DATA") + 1]
    assert entry == f"[0] size={len('hello world')} dataOffset=0 alignment=0"