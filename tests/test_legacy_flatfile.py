from pathlib import Path

from nhltracker.legacy import export_players, import_players, load_players, save_players
from nhltracker.models import PlayerRecord
from nhltracker.persistence import PlayerStore


def test_load_players_reads_fields_in_order(tmp_path: Path):
    path = tmp_path / "players.txt"
    path.write_text(
        "Connor McDavid,Edmonton Oilers,35,60,25\n"
        "Nathan MacKinnon, Colorado Avalanche ,40,55,22\n",
        encoding="utf-8",
    )

    players = load_players(path)

    assert players == [
        PlayerRecord(name="Connor McDavid", team="Edmonton Oilers", goals=35, assists=60, plus_minus=25),
        PlayerRecord(name="Nathan MacKinnon", team="Colorado Avalanche", goals=40, assists=55, plus_minus=22),
    ]


def test_load_players_missing_file_is_empty(tmp_path: Path):
    assert load_players(tmp_path / "does-not-exist.txt") == []


def test_load_players_skips_malformed_lines(tmp_path: Path):
    path = tmp_path / "players.txt"
    path.write_text(
        "Too,Few,Fields\n"
        "Bad Number,Team,ten,1,1\n"
        "\n"
        "Cale Makar,Colorado Avalanche,21,69,-3\n",
        encoding="utf-8",
    )

    players = load_players(path)

    assert [p.name for p in players] == ["Cale Makar"]
    assert players[0].plus_minus == -3


def test_save_players_writes_one_line_per_player(tmp_path: Path):
    path = tmp_path / "players.txt"
    players = [
        PlayerRecord(name="Sidney Crosby", team="Pittsburgh Penguins", goals=33, assists=47, plus_minus=10),
        PlayerRecord(name="Auston Matthews", team="Toronto Maple Leafs", goals=45, assists=35, plus_minus=15),
    ]

    assert save_players(path, players) is True
    assert path.read_text(encoding="utf-8") == (
        "Sidney Crosby,Pittsburgh Penguins,33,47,10\n"
        "Auston Matthews,Toronto Maple Leafs,45,35,15\n"
    )
    assert load_players(path) == players


def test_save_players_reports_write_failure(tmp_path: Path):
    assert save_players(tmp_path, []) is False


def test_import_and_export_through_store(tmp_path: Path):
    source = tmp_path / "legacy.txt"
    source.write_text(
        "Sidney Crosby,Pittsburgh Penguins,33,47,10\n"
        "sidney crosby,Elsewhere,1,1,1\n"
        "Auston Matthews,Toronto Maple Leafs,45,35,15\n",
        encoding="utf-8",
    )
    target = tmp_path / "exported.txt"

    with PlayerStore(tmp_path / "players.db") as store:
        report = import_players(store, load_players(source))
        assert report.total_players == 3
        assert report.added == 2
        assert report.duplicates == ["sidney crosby"]

        assert export_players(store, target) is True

    assert target.read_text(encoding="utf-8").splitlines() == [
        "Auston Matthews,Toronto Maple Leafs,45,35,15",
        "Sidney Crosby,Pittsburgh Penguins,33,47,10",
    ]
