"""Command-line front end that starts the daemon in the background."""

from __future__ import annotations

import argparse
import sys

from tilapia.platform import detach_process, run_process

DAEMON_PATH = "Tilapia.Daemon.exe"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tilapia", description="Start the Tilapia daemon.")
    parser.add_argument("--daemon", default=DAEMON_PATH, help="path of the daemon program")
    parser.add_argument("daemon_args", nargs="*", help="extra arguments for the daemon")
    return parser


def main(argv=None) -> int:
    options = _parser().parse_args(argv)
    print("Tilapia CLI v0.1")
    try:
        daemon = run_process(options.daemon, ["arg0", *options.daemon_args])
    except OSError as exc:
        print(f"Could not start daemon {options.daemon}: {exc}")
        return 1
    detach_process(daemon)
    return 0


if __name__ == "__main__":
    sys.exit(main())