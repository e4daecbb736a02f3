from bermap.cli import main

VALID = "1111111\n1P0C0E1\n1111111\n"
BAD_TILE = "1111111\n1P0X0E1\n1111111\n"
BLOCKED = "1111111\n1P0C1E1\n1111111\n"


def _write(tmp_path, text, name="map.ber"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_valid_tiles_print_zero(tmp_path, capsys):
    path = _write(tmp_path, VALID)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "0"


def test_bad_tile_prints_one(tmp_path, capsys):
    path = _write(tmp_path, BAD_TILE)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "1"


def test_default_path_is_map_ber(tmp_path, monkeypatch, capsys):
    _write(tmp_path, VALID)
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    assert capsys.readouterr().out == "0"


def test_missing_file_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "absent.ber" in captured.err


def test_full_check_rejects_unreachable_exit(tmp_path, capsys):
    path = _write(tmp_path, BLOCKED)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "0"
    assert main([str(path), "--full"]) == 0
    assert capsys.readouterr().out == "1"


def test_full_check_accepts_playable_map(tmp_path, capsys):
    path = _write(tmp_path, VALID)
    assert main(["--full", str(path)]) == 0
    assert capsys.readouterr().out == "0"