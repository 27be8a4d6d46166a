import main


def test_keys_prints_final_display(capsys):
    assert main.main(["--keys", "2+3*4="]) == 0
    assert capsys.readouterr().out.strip() == "20"


def test_keys_divide_by_zero(capsys):
    assert main.main(["--keys", "6/0="]) == 0
    assert capsys.readouterr().out.strip() == "inf"


def test_unknown_key_exits_with_error(capsys):
    assert main.main(["--keys", "2?3"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unknown calculator key" in captured.err


def test_debug_log_file(tmp_path, capsys):
    log_file = tmp_path / "calc.log"
    assert main.main(["--debug", "--log-file", str(log_file), "--keys", "1+1="]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert out[-1] == "2"
    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "backend.engine" in text
