import io

from dslab.queues.cli import change_data, main, menu_text, welcome_text
from dslab.queues.simulation import SimulationParams


def _change(text):
    out = io.StringIO()
    params = change_data(SimulationParams(), io.StringIO(text), out)
    return params, out.getvalue()


def test_welcome_text_header():
    assert welcome_text().splitlines()[0] == "================= Welcome! ================="


def test_menu_lists_options_and_prompts():
    text = menu_text()
    assert "| 1 - Run programme (array)" in text
    assert "| 0 - Exit" in text
    assert text.endswith("Your choice: ")


def test_change_shows_current_values():
    _, out = _change("9\n")
    assert "1 : Number of 1st queue requests      : 1000" in out
    assert "from 1.00 to 5.00" in out


def test_change_requests_number():
    params, _ = _change("1\n500\n")
    assert params.requests_num == 500
    assert params.min_t1 == SimulationParams().min_t1


def test_change_requests_number_out_of_range():
    params, out = _change("1\n0\n")
    assert params == SimulationParams()
    assert "Wrong input!" in out


def test_change_arrival_range():
    params, _ = _change("2\n2 6\n")
    assert (params.min_t1, params.max_t1) == (2.0, 6.0)


def test_change_processing_range():
    params, _ = _change("4\n0.5 1.5\n")
    assert (params.min_pr1, params.max_pr1) == (0.5, 1.5)


def test_change_rejects_reversed_range():
    params, out = _change("3\n5 2\n")
    assert params == SimulationParams()
    assert "Wrong input!" in out


def test_change_rejects_too_large_range():
    params, out = _change("5\n1 20000\n")
    assert params == SimulationParams()
    assert "Wrong input!" in out


def test_change_rejects_non_number_choice():
    params, out = _change("abc\n")
    assert params == SimulationParams()
    assert out.endswith("Wrong input!\n")


def test_main_unknown_command(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n0\n"))
    assert main([]) == 0
    assert "Unknown command!" in capsys.readouterr().out


def test_main_wrong_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n0\n"))
    assert main([]) == 0
    assert "Wrong input!" in capsys.readouterr().out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert "Welcome!" in capsys.readouterr().out


def test_main_runs_array_model(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1\n1\n1\n0\n"))
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "FINISH!" in out
    assert "Requests out: 1" in out


def test_main_runs_list_model_and_shows_addresses(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1\n1\n2\nY\n0\n"))
    assert main(["--seed", "2"]) == 0
    out = capsys.readouterr().out
    assert "FINISH!" in out
    assert "Do you want to see the free addresses? [Y / N] : " in out
    assert "Free addresses:" in out


def test_main_list_model_without_addresses(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1\n1\n2\nN\n0\n"))
    assert main(["--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "FINISH!" in out
    assert "Free addresses:" not in out