import pytest

from hcsbench.config import AppConfig, ConfigError


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_missing_file_raises(tmp_path):
    missing = str(tmp_path / "nope.txt")
    with pytest.raises(ConfigError) as info:
        AppConfig.from_file(missing)
    assert str(info.value) == f'Error! Config file "{missing}" not found!'


def test_wrong_header_raises(tmp_path):
    path = _write(tmp_path / "c.txt", "Other compSystemId 3\n")
    with pytest.raises(ConfigError, match="format is not AppConfig"):
        AppConfig.from_file(path)


def test_unknown_parameter_raises(tmp_path):
    path = _write(tmp_path / "c.txt", "AppConfig colour blue\n")
    with pytest.raises(ConfigError, match='parameter "colour" with value "blue"'):
        AppConfig.from_file(path)


def test_bad_comp_system_id_raises(tmp_path):
    path = _write(tmp_path / "c.txt", "AppConfig compSystemId abc\n")
    with pytest.raises(ConfigError, match="compSystemId parameter is not recognized"):
        AppConfig.from_file(path)


def test_reads_values_and_creates_directories(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = _write(
        tmp_path / "config.txt",
        "AppConfig\ncompSystemId 7\ndir_calcTestResults res\n"
        "dir_computingSystemRepository repo\n",
    )
    config = AppConfig.from_file(path)
    assert config.comp_system_id == 7
    assert config.dir_calc_test_results == "res"
    assert config.dir_computing_system_repository == "repo"
    assert config.is_initialized
    assert (tmp_path / "res").is_dir()
    assert (tmp_path / "repo").is_dir()


def test_leading_integer_prefix_is_accepted(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = _write(tmp_path / "config.txt", "AppConfig compSystemId 12abc")
    assert AppConfig.from_file(path).comp_system_id == 12


def test_trailing_unpaired_token_is_ignored(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = _write(tmp_path / "config.txt", "AppConfig compSystemId 4 dangling")
    config = AppConfig.from_file(path)
    assert config.comp_system_id == 4
    assert config.dir_calc_test_results == "CalcTestResults"


def test_format_initialized():
    config = AppConfig(comp_system_id=2, dir_calc_test_results="a",
                       dir_computing_system_repository="b")
    assert config.format() == (
        "AppConfig: [compSystemId: 2; dir_calcTestResults: a; "
        "dir_computingSystemRepository: b]"
    )


def test_format_not_initialized():
    config = AppConfig(is_initialized=False, message="broken")
    assert config.format() == "AppConfig: [NOT INITIALIZED; broken]"


def test_ensure_directories_is_idempotent(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = AppConfig()
    config.ensure_directories()
    config.ensure_directories()
    assert config.format() == (
        "AppConfig: [compSystemId: 1; dir_calcTestResults: CalcTestResults; "
        "dir_computingSystemRepository: ComputingSystemRepository]"
    )
    assert (tmp_path / "CalcTestResults").is_dir()
    assert (tmp_path / "ComputingSystemRepository").is_dir()
    assert list((tmp_path / "CalcTestResults").iterdir()) == []