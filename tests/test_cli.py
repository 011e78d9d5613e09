import io

import pytest

from onemax.cli import is_num, main, prompt_int


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("0", True), ("", False), ("12a", False), ("-1", False), (" 1", False)],
)
def test_is_num(text, expected):
    assert is_num(text) is expected


def test_prompt_int_retries_until_number():
    answers = iter(["abc", "", "7"])
    out = io.StringIO()
    assert prompt_int("n = ", lambda: next(answers), out) == 7
    text = out.getvalue()
    assert text.count("n = ") == 3
    assert text.count("Please retype and make sure the form is number.") == 2


def test_unknown_algorithm_prints_choices(capsys):
    assert main(["4", "1", "10", "4", "xyz"]) == 0
    assert "Choose Algorithm ( ES / HC / SA / GA / TB )" in capsys.readouterr().out


def test_exhaustive_search(capsys):
    assert main(["3", "1", "1", "1", "es"]) == 0
    assert "Best Value : 3 Best Solution : 111" in capsys.readouterr().out


def test_exhaustive_search_rejects_too_many_bits(capsys):
    assert main(["65", "1", "1", "1", "ES"]) == 1
    assert "onemax:" in capsys.readouterr().err


def test_hill_climbing_writes_files(tmp_path, capsys):
    assert main(["5", "2", "12", "0", "hc", "-d", str(tmp_path)]) == 0
    assert "Algorithm : HillClimbing" in capsys.readouterr().out
    lines = (tmp_path / "values_average_HC.txt").read_text().splitlines()
    assert len(lines) == 12
    assert (tmp_path / "values_of_run_2_HC.txt").exists()


def test_annealing_writes_files(tmp_path):
    assert main(["5", "1", "9", "0", "Sa", "--directory", str(tmp_path)]) == 0
    lines = (tmp_path / "values_average_SA.txt").read_text().splitlines()
    assert len(lines) == 9


def test_genetic_writes_plot(tmp_path, capsys):
    assert main(["6", "2", "3", "4", "GA", "-d", str(tmp_path)]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 2
    plot = (tmp_path / "plot_GA.plt").read_text()
    assert "set xrange [0:12]" in plot


def test_genetic_rejects_small_population(capsys):
    assert main(["6", "1", "3", "1", "GA"]) == 1
    assert "pop_size" in capsys.readouterr().err


def test_tabu_prompts_for_parameters(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n2\n3\n"))
    assert main(["4", "1", "10", "0", "tb", "-d", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Please type tabu_size = " in out
    assert "Please type tweak_num = " in out
    assert out.count("Please retype and make sure the form is number.") == 1
    lines = (tmp_path / "fitness_average_TB_4bit_size2_tweak3.txt").read_text().splitlines()
    assert len(lines) == 10


def test_non_numeric_argument_exits():
    with pytest.raises(SystemExit):
        main(["four", "1", "1", "1", "ES"])