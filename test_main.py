import pytest

import main
from menu_shell import MenuShell


def test_version(capsys):
    assert main.main(["-v"]) == 0
    assert capsys.readouterr().out.strip() == main.__version__


def test_help(capsys):
    assert main.main(["-h"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_missing_file_is_fatal(tmp_path, capsys):
    assert main.main([str(tmp_path / "absent.csv")]) == 1
    err = capsys.readouterr().err
    assert "Error loading CSV file: [Errno" in err
    assert "CSV Error:" not in err


def test_malformed_file_is_fatal(tmp_path, capsys):
    path = tmp_path / "bad.csv"
    path.write_text("a,b\n1,2,3", encoding="utf-8")
    assert main.main([str(path)]) == 1
    assert "Inconsistent number of fields" in capsys.readouterr().err


def test_too_many_arguments(capsys):
    assert main.main(["a.csv", "b.csv"]) == 2
    assert "Usage:" in capsys.readouterr().err


@pytest.mark.parametrize("extra", [[], ["--debug"]])
def test_runs_shell_on_loaded_table(tmp_path, monkeypatch, extra):
    path = tmp_path / "data.csv"
    path.write_text("a,b\n1,2", encoding="utf-8")
    seen = {}

    def fake_run(self):
        seen["rows"] = self.state.table.rows

    monkeypatch.setattr(MenuShell, "run", fake_run)
    assert main.main(extra + [str(path)]) == 0
    assert seen["rows"] == [["a", "b"], ["1", "2"]]
