import sys

from tilapia import cli


def test_cli_starts_and_detaches_daemon(capsys):
    assert cli.main(["--daemon", sys.executable, "--", "-c", "pass"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "Tilapia CLI v0.1"


def test_cli_reports_missing_daemon(tmp_path, capsys):
    missing = tmp_path / "no-daemon"
    assert cli.main(["--daemon", str(missing)]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Tilapia CLI v0.1")
    assert "Could not start daemon" in out
    assert str(missing) in out