import io

from conftest import read_lines
from main import main


def test_cli_writes_messages(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)
    log_dir = tmp_path / "cli_logs"

    code = main(["--name", "cli", "--dir", str(log_dir), "--no-date", "--no-prefix", "one", "two"])

    assert code == 0
    assert read_lines(log_dir / "cli.txt") == ["one", "two", "", "", ""]
    assert capsys.readouterr().out.strip().endswith("cli.txt")


def test_cli_reads_stdin_through_the_queue(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("alpha\nbeta\n"))
    log_dir = tmp_path / "cli_logs"

    code = main(["--name", "piped", "--dir", str(log_dir), "--no-date", "--no-prefix", "--queue"])

    assert code == 0
    assert read_lines(log_dir / "piped.txt") == ["alpha", "beta", "", "", ""]
    assert capsys.readouterr().out.strip() == str(log_dir / "piped.txt")


def test_cli_rejects_missing_name(tmp_path, capsys, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert main(["hello"]) == 2
    assert "base_name" in capsys.readouterr().err
