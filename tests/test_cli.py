"""
Tests for the leaderboard CLI.
"""

from ladder.cli import format_rankings, main


def write_log(tmp_path):
    path = tmp_path / "mtgscores.csv"
    path.write_text(
        "1,2024-01-01,Alice,Bob\n"
        "2,2024-01-02,Alice,Bob,Carol\n",
        encoding="utf-8",
    )
    return path


class TestFormatRankings:
    """Tests for format_rankings function."""

    def test_lines(self):
        assert format_rankings({"B": 1480, "A": 1520}) == [
            "1 --- A --- 1520",
            "2 --- B --- 1480",
        ]


class TestMain:
    """Tests for the CLI entry point."""

    def test_prints_rankings(self, tmp_path, capsys):
        path = tmp_path / "one.csv"
        path.write_text("1,2024-01-01,Alice,Bob\n", encoding="utf-8")
        assert main(["--path", str(path)]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["1 --- Alice --- 1520", "2 --- Bob --- 1480"]

    def test_table_output(self, tmp_path, capsys):
        assert main(["--path", str(write_log(tmp_path)), "--table"]) == 0
        out = capsys.readouterr().out
        assert "player_name" in out
        assert "Carol" in out

    def test_window(self, tmp_path, capsys):
        assert main(["--path", str(write_log(tmp_path)), "--window", "1"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["1 --- Alice --- 1540", "2 --- Bob --- 1500", "3 --- Carol --- 1460"]

    def test_missing_file_fails(self, tmp_path):
        assert main(["--path", str(tmp_path / "missing.csv")]) == 1

    def test_invalid_game_fails(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("1,2024-01-01,Alice,Bob,Alice\n", encoding="utf-8")
        assert main(["--path", str(path)]) == 1

    def test_bad_k_factor_fails(self, tmp_path):
        assert main(["--path", str(write_log(tmp_path)), "--k", "0"]) == 1
