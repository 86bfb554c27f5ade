import re

from philo.cli import main
from philo.parsing import USAGE
from philo.status import BLUE, RESET

_ANSI = re.compile(r"\033\[\d+m")


def test_wrong_argument_count(capsys):
    assert main(["5", "800", "200"]) == 1
    assert USAGE in capsys.readouterr().out


def test_negative_value_rejected(capsys):
    assert main(["5", "-800", "200", "200"]) == 1
    assert "valeurs négatives interdites" in capsys.readouterr().out


def test_short_duration_rejected(capsys):
    assert main(["5", "800", "59", "200"]) == 1
    assert "les valeurs doivent dépasser 60ms" in capsys.readouterr().out


def test_non_digit_rejected(capsys):
    assert main(["abc", "800", "200", "200"]) == 1
    assert "les valeurs doivent être des chiffres" in capsys.readouterr().out


def test_zero_meals_only_prints_end(capsys):
    assert main(["3", "800", "200", "200", "0"]) == 0
    assert capsys.readouterr().out == f"{BLUE}simulation terminer{RESET}"


def test_meal_limit_run(capsys):
    assert main(["2", "800", "60", "60", "1"]) == 0
    out = capsys.readouterr().out
    assert out.endswith(f"{BLUE}simulation terminer{RESET}")
    lines = _ANSI.sub("", out).splitlines()
    assert sum("mange" in line for line in lines) == 2
    assert not any("est mort" in line for line in lines)