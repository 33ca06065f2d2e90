import io

import pytest

from hcsbench.app import Application, main
from hcsbench.config import ConfigError


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_application_creates_default_directories(workdir):
    app = Application()
    assert app.computing_system_repository.dir_name == "ComputingSystemRepository"
    assert app.app_config.comp_system_id == 1
    assert (workdir / "CalcTestResults").is_dir()
    assert (workdir / "ComputingSystemRepository" / "List.txt").is_file()
    assert (workdir / "AlgTestingResultRepository").is_dir()


def test_start_without_config_raises(workdir):
    with pytest.raises(ConfigError):
        Application().start("config.txt")


def test_main_without_config_fails(workdir, capsys):
    assert main([]) == -1
    captured = capsys.readouterr()
    assert 'Error! Config file "config.txt" not found!' in captured.err
    assert "Starting application..." in captured.out


def test_main_with_config_runs_menu(workdir, monkeypatch, capsys):
    (workdir / "config.txt").write_text(
        "AppConfig\ndir_computingSystemRepository systems\n", encoding="utf-8"
    )
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Application initialization: OK" in out
    assert "Computing system repository initialization: OK" in out
    assert "--- Good bye! ---" in out
    assert (workdir / "systems" / "List.txt").is_file()


def test_start_uses_configured_repository(workdir, monkeypatch):
    (workdir / "custom.txt").write_text(
        "AppConfig compSystemId 3 dir_computingSystemRepository systems",
        encoding="utf-8",
    )
    monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))
    app = Application()
    app.start("custom.txt")
    assert app.app_config.comp_system_id == 3
    assert app.computing_system_repository.dir_name == "systems"


def test_main_with_bad_config_fails(workdir, capsys):
    (workdir / "config.txt").write_text("NotAConfig\n", encoding="utf-8")
    assert main(["--config", "config.txt"]) == -1
    assert "format is not AppConfig!" in capsys.readouterr().err