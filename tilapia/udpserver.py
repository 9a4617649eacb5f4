"""A UDP receiver that counts packets and bytes per second."""

from __future__ import annotations

import selectors
import socket
import threading
import time
from dataclasses import dataclass, field

_WSAEMSGSIZE = 10040


@dataclass(frozen=True)
class UdpServerDesc:
    """Where to listen and how the receive buffer is laid out."""

    port: int = 8888
    packet_size: int = 1024
    packet_count: int = 64
    host: str = "0.0.0.0"

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 65535:
            raise ValueError(f"port out of range: {self.port}")
        if self.packet_size <= 0:
            raise ValueError("packet_size must be positive")
        if self.packet_count <= 0:
            raise ValueError("packet_count must be positive")

    @property
    def buffer_size(self) -> int:
        return self.packet_size * self.packet_count


@dataclass
class PacketStats:
    """Per-interval and running totals of received traffic."""

    interval: float = 1.0
    last_print: float = field(default_factory=time.monotonic)
    packets: int = 0
    byte_count: int = 0
    total_packets: int = 0
    total_bytes: int = 0

    def record(self, size: int) -> None:
        self.packets += 1
        self.byte_count += size
        self.total_packets += 1
        self.total_bytes += size

    def report(self, now: float) -> str | None:
        """Return a stats line once the interval has passed, resetting the counters."""
        if now - self.last_print < self.interval:
            return None
        line = f"[STATS] packets/s: {self.packets} bytes/s: {self.byte_count}"
        self.packets = 0
        self.byte_count = 0
        self.last_print = now
        return line


class UdpServer:
    """Receives datagrams into a fixed pool of packet slots."""

    POLL_INTERVAL = 0.1

    def __init__(self, desc: UdpServerDesc) -> None:
        self.desc = desc
        self.stats = PacketStats()
        self._buffer = bytearray(desc.buffer_size)
        view = memoryview(self._buffer)
        self._slots = [
            view[n * desc.packet_size:(n + 1) * desc.packet_size]
            for n in range(desc.packet_count)
        ]
        self._closed = False

        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        except OSError:
            print(f"UDP: Can't share port {desc.port}")
        try:
            sock.bind((desc.host, desc.port))
        except OSError:
            sock.close()
            raise
        sock.setblocking(False)
        self.socket = sock
        self.port: int = sock.getsockname()[1]
        print(f"UDP: Server listening to port {self.port}")

    def _drain(self) -> None:
        for slot in self._slots:
            try:
                received = self.socket.recv_into(slot)
            except BlockingIOError:
                return
            except OSError as exc:
                if getattr(exc, "winerror", None) != _WSAEMSGSIZE:
                    raise
                received = len(slot)
            self.stats.record(received)

    def run(self, stop: threading.Event | None = None) -> PacketStats:
        """Receive until *stop* is set (forever without one) and return the stats."""
        with selectors.DefaultSelector() as selector:
            selector.register(self.socket, selectors.EVENT_READ)
            while stop is None or not stop.is_set():
                if not selector.select(self.POLL_INTERVAL):
                    continue
                self._drain()
                line = self.stats.report(time.monotonic())
                if line is not None:
                    print(line)
        return self.stats

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        print("Closing UDP Server...")
        self.socket.close()

    def __enter__(self) -> UdpServer:
        return self

    def __exit__(self, *args) -> None:
        self.close()