import pytest

from solong.game import MapError
from solong.mapfile import parse_rows, read_map


def test_parse_rows_strips_newlines():
    assert parse_rows(["111\n", "1P1\n", "111"]) == ["111", "1P1", "111"]


def test_parse_rows_rejects_ragged_map():
    with pytest.raises(MapError, match="rectangular"):
        parse_rows(["1111\n", "1P1\n", "1111"])


def test_parse_rows_rejects_blank_line_inside():
    with pytest.raises(MapError, match="rectangular"):
        parse_rows(["111\n", "\n", "111"])


def test_parse_rows_rejects_empty_input():
    with pytest.raises(MapError, match="empty"):
        parse_rows([])


def test_read_map_round_trip(tmp_path):
    rows = ["11111", "1PCE1", "11111"]
    path = tmp_path / "level.ber"
    path.write_text("\n".join(rows) + "\n")
    assert read_map(path) == rows


def test_read_map_without_final_newline(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("111\n1P1\n111")
    assert read_map(str(path)) == ["111", "1P1", "111"]


def test_read_map_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    with pytest.raises(MapError, match="empty"):
        read_map(path)


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="Couldn't open file"):
        read_map(tmp_path / "missing.ber")