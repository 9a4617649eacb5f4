"""Process launching, single-instance locking and named shared memory."""

from __future__ import annotations

import os
import re
import signal
import subprocess
import tempfile
from dataclasses import dataclass
from multiprocessing import shared_memory
from pathlib import Path
from typing import Iterable

from filelock import FileLock, Timeout

_QUOTE_TRIGGERS = frozenset(' \t"')


def make_cmd(args: Iterable[str]) -> str:
    """Join arguments into a Windows command line, quoting where needed."""
    parts = []
    for arg in args:
        if arg and not _QUOTE_TRIGGERS.intersection(arg):
            parts.append(arg)
            continue

        out = ['"']
        backslashes = 0
        for ch in arg:
            if ch == "\\":
                backslashes += 1
            elif ch == '"':
                out.append("\\" * (backslashes * 2 + 1))
                out.append('"')
                backslashes = 0
            else:
                out.append("\\" * backslashes)
                backslashes = 0
                out.append(ch)
        out.append("\\" * (backslashes * 2))
        out.append('"')
        parts.append("".join(out))
    return " ".join(parts)


class SingleInstance:
    """A held system-wide lock that marks a running instance."""

    def __init__(self, name: str, lock: FileLock) -> None:
        self.name = name
        self._lock: FileLock | None = lock

    @property
    def held(self) -> bool:
        return self._lock is not None

    def release(self) -> None:
        """Give the lock up; calling it again does nothing."""
        if self._lock is not None:
            self._lock.release()
            self._lock = None


def _lock_path(name: str) -> Path:
    safe = re.sub(r"[^\w.-]", "_", name)
    return Path(tempfile.gettempdir()) / f"{safe}.lock"


def ensure_single(name: str) -> SingleInstance | None:
    """Claim the instance lock *name*; return None if another holder has it."""
    lock = FileLock(str(_lock_path(name)), timeout=0)
    try:
        lock.acquire()
    except Timeout:
        return None
    return SingleInstance(name, lock)


@dataclass
class Process:
    """A started child process; ``popen`` is dropped once detached."""

    pid: int
    popen: subprocess.Popen | None = None


def run_process(app_path: str | os.PathLike, args: Iterable[str]) -> Process:
    """Start *app_path* with *args* as its full argument vector (argv[0] first)."""
    argv = list(args) or [os.fspath(app_path)]
    command = make_cmd(argv) if os.name == "nt" else argv
    popen = subprocess.Popen(command, executable=os.fspath(app_path))
    return Process(popen.pid, popen)


def detach_process(process: Process) -> None:
    """Stop tracking *process* and leave it running on its own."""
    process.popen = None


def kill_process(process: Process) -> None:
    """Terminate *process* immediately."""
    if process.popen is not None:
        process.popen.kill()
        process.popen.wait()
    else:
        os.kill(process.pid, getattr(signal, "SIGKILL", signal.SIGTERM))


class SharedMemory:
    """A named block of memory that other processes can open."""

    def __init__(self, block: shared_memory.SharedMemory, owner: bool) -> None:
        self._block: shared_memory.SharedMemory | None = block
        self._owner = owner
        self.name = block.name
        self.size = block.size

    @property
    def data(self) -> memoryview:
        if self._block is None:
            raise ValueError("shared memory is closed")
        return self._block.buf

    @property
    def closed(self) -> bool:
        return self._block is None

    def close(self) -> None:
        """Unmap the block; the creator also removes it."""
        if self._block is None:
            return
        block, self._block = self._block, None
        block.close()
        if self._owner:
            block.unlink()

    def __enter__(self) -> SharedMemory:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def shared_alloc(size: int) -> SharedMemory:
    """Create a new shared block of at least *size* bytes."""
    if size <= 0:
        raise ValueError("shared memory size must be positive")
    return SharedMemory(shared_memory.SharedMemory(create=True, size=size), owner=True)


def shared_open(name: str) -> SharedMemory:
    """Open a shared block created elsewhere."""
    return SharedMemory(shared_memory.SharedMemory(name=name), owner=False)