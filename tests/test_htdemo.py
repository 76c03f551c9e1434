import io

from probetable.htdemo import main, run_demo


def test_run_demo_output():
    buf = io.StringIO()
    run_demo(buf)
    assert buf.getvalue().splitlines() == [
        "Found hi1",
        "Incremented hi1's value to: 2",
        "Did not find: doesnotexist",
        "HT size: 10",
        "HT size: 8",
        "Did not find hi9",
        "size: 9",
    ]


def test_main_prints_and_succeeds(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Found hi1"
    assert lines[-1] == "size: 9"