import enum

from tilapia.model import (
    MAGIC,
    Binary,
    Capability,
    DataEntry,
    EntryPoint,
    Function,
    Header,
    Instruction,
)


class Cap(enum.Enum):
    print = 1


class EntryKind(enum.Enum):
    executable = 0


def _hello_world() -> Binary:
    binary = Binary()
    binary.header = Header(
        magic=0x74694952,
        version_major=1,
        version_minor=0,
        flags=0,
        entrypoint_offset=0,
        executable_name="test exec",
    )
    binary.capabilities.append(Capability(Cap.print, 1, 0, 0))
    binary.entrypoints.append(EntryPoint(EntryKind.executable, 0, 0))
    binary.functions.append(Function(0, 3, 0, 0))
    binary.add_read_only_data("hello world")
    binary.instructions.append(Instruction(4, 0, len("hello world"), 0))
    binary.instructions.append(Instruction(25, 1, 0, 0))
    binary.instructions.append(Instruction(26))
    return binary


def test_magic_spells_tiir():
    assert MAGIC.to_bytes(4, "big") == b"tiIR"
    assert Header().magic == 0x74694952


def test_hello_world_read_only_data():
    binary = _hello_world()
    assert binary.read_only_data == [DataEntry(len("hello world"), 0, 0)]
    assert bytes(binary.read_only_data_pool) == b"hello world"
    assert binary.read_only_data_size == len("hello world")


def test_hello_world_header_and_tables():
    binary = _hello_world()
    assert binary.header.executable_name == "test exec"
    assert binary.header.version_major == 1
    assert binary.capabilities[0].cap_id is Cap.print
    assert binary.functions[0].instruction_count == len(binary.instructions)


def test_instruction_defaults_are_zero():
    inst = Instruction(7)
    assert (inst.op_code, inst.a, inst.b, inst.c) == (7, 0, 0, 0)


def test_add_read_only_data_appends_after_previous():
    binary = Binary()
    first = binary.add_read_only_data(b"abc")
    second = binary.add_read_only_data("defgh")
    assert (first, second) == (0, 1)
    assert binary.read_only_data[1].data_offset == len(b"abc")
    assert binary.read_only_data[1].size == len("defgh")
    assert bytes(binary.read_only_data_pool) == b"abcdefgh"
    assert binary.read_only_data_size == len(binary.read_only_data_pool)


def test_empty_binary_has_no_entries():
    binary = Binary()
    assert binary.instructions == []
    assert binary.read_only_data_size == 0
    assert binary.uninitialized_data_size == 0