from datetime import datetime

import pytest

from scoreledger.records import User
from scoreledger.storage import (
    Stats,
    compute_stats,
    format_record,
    load_file,
    parse_line,
    read_records,
    render_stats,
    save_file,
    write_stat_file,
)

USERS = [
    User(1, "Ann Lee", "annie", 20, 10, "Go"),
    User(2, "Bob", "bobby", 40, 30, "Temple Run"),
]


def test_parse_line_fields():
    user = parse_line("5,Ann Lee,annie,22,99,Chess\n")
    assert user == User(5, "Ann Lee", "annie", 22, 99, "Chess")


def test_parse_line_ignores_extra_fields():
    assert parse_line("5,a,b,1,2,g,extra").game == "g"


@pytest.mark.parametrize("line", ["1,a,b,2,3", "x,a,b,2,3,g", "1,a,b,old,3,g"])
def test_parse_line_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_line(line)


def test_format_parse_round_trip():
    for user in USERS:
        assert parse_line(format_record(user)) == user


def test_read_records_skips_blank_lines():
    lines = [format_record(u) + "\n" for u in USERS] + ["\n"]
    assert read_records(lines) == USERS


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "records.csv"
    save_file(USERS, path)
    assert load_file(path) == USERS
    assert path.read_text(encoding="utf-8").splitlines() == [format_record(u) for u in USERS]


def test_save_truncates(tmp_path):
    path = tmp_path / "records.csv"
    save_file(USERS, path)
    save_file(USERS[:1], path)
    assert load_file(path) == USERS[:1]


def test_load_missing_file_is_empty(tmp_path):
    assert load_file(tmp_path / "absent.csv") == []


def test_compute_stats_empty():
    assert compute_stats([]) is None


def test_compute_stats_invariants():
    stats = compute_stats(USERS)
    assert isinstance(stats, Stats)
    assert stats.count == len(USERS)
    assert stats.oldest == max(u.age for u in USERS)
    assert stats.highest_score == max(u.score for u in USERS)
    assert min(u.age for u in USERS) <= stats.average_age <= stats.oldest
    assert min(u.score for u in USERS) <= stats.average_score <= stats.highest_score


def test_compute_stats_single_user_average_is_own_value():
    stats = compute_stats(USERS[:1])
    assert stats.average_age == USERS[0].age
    assert stats.average_score == USERS[0].score


def test_render_stats_empty():
    assert render_stats([]) == "No records found."


def test_render_stats_layout():
    moment = datetime(2024, 1, 2, 15, 4, 5)
    lines = render_stats(USERS, moment).splitlines()
    assert [line.split(":")[0] for line in lines] == [
        "Number of records",
        "Average age",
        "Average score",
        "Oldest person",
        "Highest score",
        "Last update",
    ]
    assert lines[0] == f"Number of records: {len(USERS)}"
    assert lines[-1] == "Last update: 2024-01-02 03:04:05 PM"


def test_write_stat_file(tmp_path):
    path = tmp_path / "stats.txt"
    moment = datetime(2024, 1, 2, 9, 0, 0)
    write_stat_file(USERS, path, moment)
    assert path.read_text(encoding="utf-8") == render_stats(USERS, moment)
    write_stat_file([], path)
    assert path.read_text(encoding="utf-8") == "No records found."