"""The background daemon: one instance per machine, serving UDP."""

from __future__ import annotations

import sys

from tilapia.platform import ensure_single, shared_alloc
from tilapia.udpserver import UdpServer, UdpServerDesc

INSTANCE_NAME = "Tilapia_Daemon_UniqueMutex"
SHARED_MEMORY_SIZE = 1024
SERVER_DESC = UdpServerDesc(port=8888, packet_size=1024, packet_count=64)


def main(argv=None) -> int:
    args = list(sys.argv if argv is None else argv)
    print("Tilapia Daemon v0.1")
    print("args:")
    print("".join(f"  > {arg} " for arg in args))

    instance = ensure_single(INSTANCE_NAME)
    if instance is None:
        print("Tilapia Daemon is already running")
        return 0

    try:
        with shared_alloc(SHARED_MEMORY_SIZE), UdpServer(SERVER_DESC) as server:
            server.run()
    except KeyboardInterrupt:
        pass
    finally:
        instance.release()
    return 0


if __name__ == "__main__":
    sys.exit(main())