from singlylist.demo import main


def test_main_prints_first_values(capsys):
    status = main()
    captured = capsys.readouterr()
    assert status == 0
    assert captured.out.splitlines() == ["First value: 5", "First value: 4"]


def test_main_accepts_empty_argv(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert all(line.startswith("First value: ") for line in lines)