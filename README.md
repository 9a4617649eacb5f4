# tilapia

Tilapia is a small UDP packet daemon, a command that launches it, and a few
helpers around them:

- `tilapia.udpserver` receives UDP datagrams into a fixed pool of packet
  slots and counts packets and bytes per second.
- `tilapia.platform` builds Windows-style command lines, starts, detaches and
  kills child processes, makes sure only one instance of something runs at a
  time, and allocates named shared memory blocks.
- `tilapia.model` holds the in-memory form of a tiIR binary, and
  `tilapia.irvis` turns it into a readable text listing.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the daemon

```
tilapia-daemon
```

The daemon prints its version and its arguments, then takes a system-wide
instance lock (a lock file named `Tilapia_Daemon_UniqueMutex.lock` in the
temporary directory). If another daemon already holds it, the daemon prints
`Tilapia Daemon is already running` and exits.

Otherwise it allocates a 1024-byte shared memory block and listens on UDP
port 8888 with a pool of 64 slots of 1024 bytes each. While packets are
arriving, it prints a line like this at most once a second:

```
[STATS] packets/s: 120345 bytes/s: 61616640
```

Press Ctrl-C to stop it; it closes the socket, frees the shared memory and
releases the lock.

## Starting the daemon from the CLI

```
tilapia-cli [--daemon PATH] [DAEMON_ARGS ...]
```

The CLI prints its version, starts the daemon program as a separate process
and detaches from it, so the daemon keeps running after the CLI exits. The
daemon receives `arg0` as its first argument, followed by any
`DAEMON_ARGS`. `--daemon` names the program to start; it defaults to
`Tilapia.Daemon.exe`. To start the installed daemon command instead, give its
path, for example:

```
tilapia-cli --daemon "$(command -v tilapia-daemon)"
```

If the program cannot be started, the CLI prints why and exits with status 1.

## Using the library

Running a UDP server from your own code:

```python
import threading

from tilapia.udpserver import UdpServer, UdpServerDesc

stop = threading.Event()
desc = UdpServerDesc(port=8888, packet_size=1024, packet_count=64)

with UdpServer(desc) as server:
    stats = server.run(stop)  # returns once `stop` is set from another thread
```

`UdpServerDesc` checks its values (port 0–65535, positive sizes) and also
takes a `host`, `"0.0.0.0"` by default. With port 0 the system picks a free
port, which `server.port` then holds. `run` returns the server's
`PacketStats`: `record(size)` counts one packet, `report(now)` returns a
stats line and resets the per-interval counters once `interval` seconds
(one by default) have passed since the last report, and `total_packets` and
`total_bytes` keep running totals.

Processes, the instance lock and shared memory:

```python
from tilapia.platform import (
    detach_process,
    ensure_single,
    kill_process,
    make_cmd,
    run_process,
    shared_alloc,
    shared_open,
)

print(make_cmd(["prog", "two words", 'say "hi"']))
# prog "two words" "say \"hi\""

guard = ensure_single("my-daemon")   # None if another holder has the lock
if guard is not None:
    try:
        with shared_alloc(1024) as block:
            block.data[:5] = b"hello"
            other = shared_open(block.name)   # e.g. in another process
            other.close()
    finally:
        guard.release()
```

`run_process(app_path, args)` starts `app_path` with `args` as its whole
argument vector (the first item is the child's `argv[0]`) and returns a
`Process` with its `pid`. `detach_process` stops tracking it and leaves it
running; `kill_process` terminates it.

Listing a tiIR binary:

```python
from tilapia.irvis import format_binary, format_description, load_file
from tilapia.model import Binary, Instruction

binary = Binary()
binary.header.executable_name = "test exec"
binary.add_read_only_data("hello world")
binary.instructions.append(Instruction(op_code=0))
print(format_binary(binary))
```

`format_binary` lists the header and then the capabilities, types, symbols,
dynamic libraries, entry points, functions, read-only and read-write data
and instructions of a `Binary`. `format_description` lists the section
offsets, counts and sizes of a `BinaryDescription`. `load_file(path)` reads
a file as bytes, and `wants_description(args)` tells whether the `d` flag is
among a list of arguments.

## What this package does not do

- It does not read or write the tiIR file format: there is no way to turn
  the bytes from `load_file` into a `Binary` or `BinaryDescription`, or a
  `Binary` back into bytes. Build these objects in code.
- It has no command for viewing binaries; use `format_binary` and
  `format_description` from your own code.
- It does not execute tiIR instructions: there is no interpreter or
  runtime, and opcodes, capabilities and symbol types are plain values
  without named meanings.
- The daemon only counts incoming UDP traffic; it does not answer packets or
  speak any protocol on top of UDP.