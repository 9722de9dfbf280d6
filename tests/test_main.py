import io

import pytest

from snesjam.main import main, parse_pad
from snesjam.world import Keys


def test_parse_pad_combines_keys():
    assert parse_pad("up a") == Keys.UP | Keys.A
    assert parse_pad("Left+DOWN") == Keys.LEFT | Keys.DOWN
    assert parse_pad("right, a") == Keys.RIGHT | Keys.A


def test_parse_pad_empty_line_is_no_keys():
    assert parse_pad("   ") == Keys(0)


def test_parse_pad_rejects_unknown_key():
    with pytest.raises(ValueError, match="jump"):
        parse_pad("up jump")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main([]) == 0
    assert "Global: 256 ; 256" in capsys.readouterr().out


def test_main_trace_prints_every_frame(tmp_path, capsys):
    script = tmp_path / "pad.txt"
    script.write_text("# start\nup\n", encoding="utf-8")
    assert main(["--trace", str(script)]) == 0
    out = capsys.readouterr().out
    assert "-- frame 1" in out
    assert "-- frame 2" in out
    assert out.index("Global: 256 ; 256") < out.index("-- frame 2")


def test_main_reports_bad_key(tmp_path, capsys):
    script = tmp_path / "pad.txt"
    script.write_text("up\njump\n", encoding="utf-8")
    assert main([str(script)]) == 2
    err = capsys.readouterr().err
    assert "line 2" in err
    assert "jump" in err


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 2
    assert "absent.txt" in capsys.readouterr().err