import pytest

from dining.cli import main
from dining.parsing import ERR_ARGS, ERR_NUM, ERR_NUM_MAX, USAGE


@pytest.mark.parametrize(
    "argv, message",
    [
        ([], ERR_ARGS),
        (["1", "2", "3"], ERR_ARGS),
        (["1", "2", "3", "4", "5", "6"], ERR_ARGS),
        (["5", "abc", "200", "200"], ERR_NUM),
        (["5", "-800", "200", "200"], ERR_NUM),
        (["2147483648", "800", "200", "200"], ERR_NUM_MAX),
    ],
)
def test_invalid_input(capsys, argv, message):
    assert main(argv) == 1
    assert capsys.readouterr().out == message + USAGE


def test_lone_philosopher_run(capsys):
    assert main(["1", "60", "20", "20"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(" 1 has taken a fork")
    assert lines[-1].endswith(" 1 died")


def test_meal_limit_run(capsys):
    assert main(["3", "1000", "50", "50", "1"]) == 0
    out = capsys.readouterr().out
    assert "died" not in out
    assert out.count("is eating") > 3