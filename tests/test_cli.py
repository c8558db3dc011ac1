import pytest

from crealiz.cli import main


def test_main_prints_round_tripped_fields(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["p2.ptr: Z", "p2.ptr2: 42"]


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2