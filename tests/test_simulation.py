import io
import re

from philosophers.parsing import Settings
from philosophers.simulation import Table, current_millis, run_simulation

LINE = re.compile(r"^(\d+) (\d+) (has taken a fork|is eating|is sleeping|is thinking|died)$")


def _lines(buffer):
    return buffer.getvalue().splitlines()


def test_current_millis_advances():
    first = current_millis()
    second = current_millis()
    assert second >= first


def test_table_seats_and_forks():
    table = Table(Settings(3, 100, 10, 10), io.StringIO())
    ids = [p.id for p in table.philosophers]
    assert ids == [1, 2, 3]
    assert table.philosophers[2].right_fork is table.philosophers[0].left_fork
    assert table.philosophers[0].right_fork is table.philosophers[1].left_fork


def test_stop_flag():
    table = Table(Settings(2, 100, 10, 10), io.StringIO())
    assert table.stopped() is False
    table.stop()
    assert table.stopped() is True


def test_print_status_format():
    out = io.StringIO()
    table = Table(Settings(2, 100, 10, 10), out)
    table.print_status(table.philosophers[1], "is eating")
    match = LINE.match(out.getvalue().rstrip("\n"))
    assert match is not None
    assert match.group(2) == "2"
    assert out.getvalue().endswith("is eating\n")


def test_all_full_without_limit_is_false():
    table = Table(Settings(2, 100, 10, 10), io.StringIO())
    for p in table.philosophers:
        p.meals_eaten = 50
    assert table.all_full() is False


def test_all_full_with_limit():
    table = Table(Settings(2, 100, 10, 10, max_meals=3), io.StringIO())
    table.philosophers[0].meals_eaten = 3
    assert table.all_full() is False
    table.philosophers[1].meals_eaten = 4
    assert table.all_full() is True


def test_single_philosopher_dies():
    out = io.StringIO()
    dead = run_simulation(Settings(1, 60, 10, 10), out)
    lines = _lines(out)
    assert dead == 1
    assert lines[0].endswith(" 1 has taken a fork")
    died = [line for line in lines if line.endswith("died")]
    assert len(died) == 1
    assert int(died[0].split()[0]) >= 60


def test_meal_limit_ends_without_death():
    out = io.StringIO()
    table = Table(Settings(4, 600, 40, 40, max_meals=2), out)
    dead = table.run()
    assert dead is None
    assert all(p.meals_eaten >= 2 for p in table.philosophers)
    assert not any(line.endswith("died") for line in _lines(out))


def test_starvation_is_reported_once():
    out = io.StringIO()
    dead = run_simulation(Settings(2, 50, 200, 200), out)
    lines = _lines(out)
    assert dead in (1, 2)
    died = [line for line in lines if line.endswith("died")]
    assert len(died) == 1
    assert died[0].split()[1] == str(dead)


def test_output_lines_well_formed_and_ordered():
    out = io.StringIO()
    run_simulation(Settings(3, 500, 30, 30, max_meals=2), out)
    lines = _lines(out)
    assert lines
    stamps = []
    for line in lines:
        match = LINE.match(line)
        assert match is not None
        assert 1 <= int(match.group(2)) <= 3
        stamps.append(int(match.group(1)))
    assert stamps == sorted(stamps)