import pytest

from main import main


def test_cli_prints_bordered_map(capsys):
    assert main(["--width", "30", "--height", "20", "--seed", "7", "--fill-percent", "0", "--border-size", "1", "-q"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 22
    assert all(len(line) == 32 for line in lines)
    assert set(lines[0]) == {"#"}


def test_cli_reports_metrics_and_rooms(capsys):
    main(["--width", "30", "--height", "20", "--seed", "cave", "--fill-percent", "0", "--metrics", "--show-rooms"])

    out = capsys.readouterr().out
    assert "Stage timings:" in out
    assert "M" in out


def test_cli_rejects_invalid_dimensions():
    with pytest.raises(SystemExit, match="width and height"):
        main(["--width", "0"])
