import logging

import pytest

import cli


def test_batch_prints_four_lines(capsys):
    assert cli.main(["--n", "1", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split()[0] for line in lines] == ["min", "med", "90p", "max"]
    values = {int(line.split()[1]) for line in lines}
    assert len(values) == 1
    assert values.pop() > 0


def test_batch_two_players_ordered(capsys):
    assert cli.main(["--n", "1000", "--players", "2", "--seed", "8"]) == 0
    values = [int(line.split()[1]) for line in capsys.readouterr().out.splitlines()]
    assert values == sorted(values)


def test_verbose_traces_one_game(capsys):
    assert cli.main(["--verbose", "--players", "2", "--seed", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    turns = [line for line in lines if "=>" in line]
    assert turns[-1].endswith(" WIN")
    assert not any(line.endswith(" WIN") for line in turns[:-1])
    moves_line = [line for line in lines if line.startswith("moves: ")]
    assert moves_line == [f"moves: {len(turns)}"]
    players = [line for line in lines if line.startswith("  player: ")]
    assert len(players) == 2
    assert "stucks=" in players[0]
    assert not any(line.startswith("min ") for line in lines)


def test_allow_back_accepts_explicit_value():
    parser = cli.build_parser()
    assert parser.parse_args([]).allow_back is True
    assert parser.parse_args(["--allow-back=false"]).allow_back is False
    assert parser.parse_args(["--allow-back"]).allow_back is True
    assert parser.parse_args(["--verbose"]).verbose is True
    assert parser.parse_args([]).n == 10000
    assert parser.parse_args([]).players == 1


@pytest.mark.parametrize("argv", [["--players", "0"], ["--n", "-3"], ["--allow-back=maybe"]])
def test_bad_arguments_exit_2(argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 2


def test_broken_track_is_fatal(monkeypatch, caplog):
    monkeypatch.setattr(cli, "TRACK", "r g>nowhere b")
    with caplog.at_level(logging.ERROR):
        assert cli.main(["--n", "1"]) == 1
    assert "nowhere" in caplog.text


def test_turn_limit_is_fatal(caplog):
    with caplog.at_level(logging.ERROR):
        assert cli.main(["--n", "5", "--max-turns", "1", "--seed", "1"]) == 1
    assert "no winner" in caplog.text
