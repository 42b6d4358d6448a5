from pipe_heating.run_calculator import main


def test_prints_summary(capsys):
    assert main(["--volume", "5", "--target", "60", "--minutes", "10"]) == 0
    out = capsys.readouterr().out
    assert "Required power" in out
    assert "target_reached" in out


def test_trace_and_sizing(capsys):
    assert main(["--volume", "5", "--target", "60", "--minutes", "10", "--step", "5", "--trace", "--size-heater"]) == 0
    out = capsys.readouterr().out
    assert "Min heater power" in out
    assert " s " in out


def test_configuration_error_exit_code(capsys):
    assert main(["--minutes", "0"]) == 2
    assert "error:" in capsys.readouterr().err


def test_zero_volume_prints_summary(capsys):
    assert main(["--volume", "0"]) == 0
    assert "Required power" in capsys.readouterr().out
