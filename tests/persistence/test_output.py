from anno_consumption.persistence.output import format_row, write_rows


def test_format_row_uses_repr():
    assert format_row(["Fish", "0.0025"]) == "['Fish', '0.0025']"


def test_write_rows_overwrites_file(tmp_path):
    path = tmp_path / "out" / "consumption.txt"
    path.parent.mkdir()
    path.write_text("stale\n", encoding="utf-8")

    count = write_rows(path, [["Farmers"], ["Fish", "0.0025"]])

    assert count == 2
    assert path.read_text(encoding="utf-8") == "['Farmers']\n['Fish', '0.0025']\n"


def test_write_rows_creates_parent_directory(tmp_path):
    path = tmp_path / "new" / "consumption.txt"
    assert write_rows(path, []) == 0
    assert path.read_text(encoding="utf-8") == ""
