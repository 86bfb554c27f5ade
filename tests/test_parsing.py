import pytest

from philo.parsing import INT_MAX, Config, ParseError, parse_input, parse_number


def test_parse_plain_number():
    assert parse_number("42") == 42


def test_parse_leading_space_and_plus():
    assert parse_number(" \t+7") == 7


def test_parse_stops_at_non_digit():
    assert parse_number("12abc") == 12


def test_parse_int_max_accepted():
    assert parse_number(str(INT_MAX)) == INT_MAX


def test_parse_above_int_max_rejected():
    with pytest.raises(ParseError, match="INT_MAX"):
        parse_number(str(INT_MAX + 1))


def test_parse_too_long_rejected():
    with pytest.raises(ParseError, match="INT_MAX"):
        parse_number("00000000001")


def test_parse_negative_rejected():
    with pytest.raises(ParseError, match="négatives"):
        parse_number("-5")


@pytest.mark.parametrize("text", ["abc", "", "  ", "+", "+-3"])
def test_parse_non_digit_rejected(text):
    with pytest.raises(ParseError, match="chiffres"):
        parse_number(text)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_number("x")


def test_parse_input_without_limit():
    config = parse_input(["5", "800", "200", "200"])
    assert config.philo_nbr == 5
    assert config.time_to_die == 800 * 1000
    assert config.time_to_eat == 200 * 1000
    assert config.time_to_sleep == config.time_to_eat
    assert config.nbr_limit_meals == -1


def test_parse_input_with_limit():
    config = parse_input(["4", "410", "200", "200", "7"])
    assert config.nbr_limit_meals == 7
    assert config == Config(4, 410_000, 200_000, 200_000, 7)


def test_parse_input_zero_limit():
    assert parse_input(["2", "100", "100", "100", "0"]).nbr_limit_meals == 0


@pytest.mark.parametrize(
    "args",
    [
        ["5", "59", "200", "200"],
        ["5", "800", "59", "200"],
        ["5", "800", "200", "59"],
    ],
)
def test_parse_input_short_durations_rejected(args):
    with pytest.raises(ParseError, match="60ms"):
        parse_input(args)


def test_parse_input_sixty_ms_accepted():
    config = parse_input(["3", "60", "60", "60"])
    assert config.time_to_die == config.time_to_eat == config.time_to_sleep


@pytest.mark.parametrize("args", [[], ["5", "800", "200"], ["1", "2", "3", "4", "5", "6"]])
def test_parse_input_wrong_count(args):
    with pytest.raises(ParseError, match="wrong input"):
        parse_input(args)


def test_parse_input_bad_value_rejected():
    with pytest.raises(ParseError):
        parse_input(["5", "800", "-200", "200"])