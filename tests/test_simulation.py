import io

import pytest

from diningphilo.arguments import Settings
from diningphilo.simulation import Table, run_simulation


def _lines(output):
    result = []
    for line in output.getvalue().splitlines():
        stamp, ident, message = line.split(" ", 2)
        result.append((int(stamp), int(ident), message))
    return result


def test_single_philosopher_takes_one_fork_and_dies():
    out = io.StringIO()
    run_simulation(Settings(1, 50, 10, 10), out)
    lines = _lines(out)
    assert [message for _, _, message in lines] == ["has taken a fork", "dead"]
    assert all(ident == 1 for _, ident, _ in lines)
    assert lines[-1][0] >= 50


def test_meal_limit_stops_simulation_without_death():
    out = io.StringIO()
    table = run_simulation(Settings(3, 1000, 20, 20, meals=2), out)
    assert all(p.meals() >= 2 for p in table.philosophers)
    assert not table.running()
    lines = _lines(out)
    assert all(message != "dead" for _, _, message in lines)
    stamps = [stamp for stamp, _, _ in lines]
    assert stamps == sorted(stamps)


def test_starving_philosopher_is_reported_once():
    out = io.StringIO()
    table = run_simulation(Settings(2, 50, 100, 100), out)
    dead = [line for line in _lines(out) if line[2] == "dead"]
    assert len(dead) == 1
    assert dead[0][1] in (1, 2)
    assert not table.running()


def test_eat_sequence_and_forks_released():
    out = io.StringIO()
    table = Table(Settings(2, 1000, 1, 1), out)
    philosopher = table.philosophers[0]
    philosopher.eat()
    messages = [message for _, _, message in _lines(out)]
    assert messages == [
        "is thinking",
        "has taken a fork",
        "has taken a fork",
        "is eating",
    ]
    assert philosopher.meals() == 1
    assert philosopher.last_meal() >= table.start
    assert not any(fork.locked() for fork in table.forks)


def test_forks_are_shared_between_neighbours():
    table = Table(Settings(4, 1000, 1, 1), io.StringIO())
    phils = table.philosophers
    for index, philosopher in enumerate(phils):
        assert philosopher.right_fork is table.forks[index]
        assert philosopher.left_fork is phils[(index + 1) % len(phils)].right_fork


def test_lone_philosopher_has_no_left_fork_and_cannot_eat():
    table = Table(Settings(1, 1000, 1, 1), io.StringIO())
    philosopher = table.philosophers[0]
    assert philosopher.left_fork is None
    with pytest.raises(RuntimeError):
        philosopher.eat()


def test_stop_suppresses_announcements():
    out = io.StringIO()
    table = Table(Settings(2, 1000, 1, 1), out)
    assert table.running() is True
    table.announce(table.philosophers[1], "is sleeping")
    table.stop()
    table.announce(table.philosophers[0], "is sleeping")
    assert table.running() is False
    assert [(i, m) for _, i, m in _lines(out)] == [(2, "is sleeping")]


def test_all_fed_requires_meal_limit():
    table = Table(Settings(2, 1000, 1, 1), io.StringIO())
    for philosopher in table.philosophers:
        philosopher.eat()
    assert table.all_fed() is False


def test_all_fed_counts_every_philosopher():
    table = Table(Settings(2, 1000, 1, 1, meals=1), io.StringIO())
    table.philosophers[0].eat()
    assert table.all_fed() is False
    table.philosophers[1].eat()
    assert table.all_fed() is True


def test_monitor_stops_when_everyone_is_fed():
    table = Table(Settings(2, 1000, 1, 1, meals=1), io.StringIO())
    for philosopher in table.philosophers:
        philosopher.eat()
    table.monitor()
    assert table.running() is False


def test_monitor_returns_immediately_for_one_philosopher():
    table = Table(Settings(1, 1000, 1, 1), io.StringIO())
    table.monitor()
    assert table.running() is True