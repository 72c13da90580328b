import io
import json

import pytest

from plotscript.cli import EXIT_IO_ERROR, EXIT_SPEC_ERROR, main


def test_new_then_render(tmp_path, capsys):
    path = tmp_path / "key.json"
    assert main(["new", str(path), "--boxed", "--title", "Legend"]) == 0
    capsys.readouterr()

    assert main(["render", str(path)]) == 0
    assert capsys.readouterr().out == "set key on title 'Legend' box \n"


def test_render_several_files_to_output(tmp_path):
    shown = tmp_path / "shown.json"
    hidden = tmp_path / "hidden.json"
    main(["new", str(shown)])
    main(["new", str(hidden), "--hidden"])
    out = tmp_path / "key.gp"

    assert main(["render", str(shown), str(hidden), "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "set key on \nset key off\n"


def test_render_reads_stdin(monkeypatch, capsys):
    spec = {"position": {"placement": "inside", "vertical": "top", "horizontal": "right"}, "stacking": "vertically"}
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(spec)))
    assert main(["render"]) == 0
    assert capsys.readouterr().out == "set key on inside top right vertically \n"


def test_render_invalid_spec_exits_with_spec_error(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"order": "sideways"}), encoding="utf-8")
    assert main(["render", str(path)]) == EXIT_SPEC_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid key spec" in captured.err


def test_render_missing_file_exits_with_io_error(tmp_path):
    assert main(["render", str(tmp_path / "missing.json")]) == EXIT_IO_ERROR


def test_render_non_utf8_file_exits_with_spec_error(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"title": "\xff\xfe"}')
    assert main(["render", str(path)]) == EXIT_SPEC_ERROR


def test_render_non_utf8_stdin_exits_with_spec_error(monkeypatch):
    raw = io.TextIOWrapper(io.BytesIO(b'{"title": "\xff\xfe"}'), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", raw)
    assert main(["render", "-"]) == EXIT_SPEC_ERROR


def test_new_accepts_layout_options(tmp_path, capsys):
    path = tmp_path / "key.json"
    assert main(
        [
            "new",
            str(path),
            "--position",
            "outside:bottom:center",
            "--stacking",
            "horizontally",
            "--justification",
            "left",
            "--order",
            "sample_then_text",
        ]
    ) == 0
    capsys.readouterr()

    main(["render", str(path)])
    assert capsys.readouterr().out == "set key on outside bottom center horizontally Left reverse \n"


def test_new_rejects_malformed_position(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["new", str(tmp_path / "key.json"), "--position", "inside:top"])
    assert excinfo.value.code == 2
    assert not (tmp_path / "key.json").exists()
