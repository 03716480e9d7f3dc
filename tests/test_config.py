import pytest

from file_log.constants import file_logger as constants
from file_log.entity.config_entity import FileLoggerConfig
from file_log.exception.exception import FileLogException
from file_log.utils.main_utils.config_utils import load_logger_config, read_config_yaml


@pytest.fixture
def yaml_file(tmp_path):
    def write(text):
        path = tmp_path / "file_log.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)

    return write


def test_defaults():
    config = FileLoggerConfig(base_name="app")

    assert config.log_dir == "Logs"
    assert config.use_date is True
    assert config.use_prefix is True
    assert config.retention_days == 7
    assert config.shutdown_timeout == 1.0
    assert config.encoding == "utf-8"
    assert config.mark_queued_lines is False


def test_config_is_immutable():
    config = FileLoggerConfig(base_name="app")

    with pytest.raises(AttributeError):
        config.use_date = False


@pytest.mark.parametrize(
    "options",
    [
        {"retention_days": -1},
        {"retention_days": "7"},
        {"shutdown_timeout": -0.5},
        {"log_dir": ""},
    ],
)
def test_invalid_values_are_rejected(options):
    with pytest.raises(FileLogException):
        FileLoggerConfig(base_name="app", **options)


def test_exception_reports_where_it_was_raised():
    with pytest.raises(FileLogException) as info:
        FileLoggerConfig(base_name="")

    assert info.value.file_name.endswith("config_entity.py")
    assert "base_name must be a non-empty string" in str(info.value)


def test_read_yaml_section(yaml_file):
    path = yaml_file("file_log:\n  base_name: svc\n  use_date: false\n")

    assert read_config_yaml(path) == {"base_name": "svc", "use_date": False}


def test_read_yaml_top_level(yaml_file):
    path = yaml_file("base_name: svc\nretention_days: 3\n")

    assert read_config_yaml(path) == {"base_name": "svc", "retention_days": 3}


def test_read_yaml_rejects_unknown_settings(yaml_file):
    path = yaml_file("base_name: svc\nlevel: DEBUG\n")

    with pytest.raises(FileLogException) as info:
        read_config_yaml(path)
    assert "level" in info.value.message


def test_read_yaml_rejects_broken_files(yaml_file, tmp_path):
    with pytest.raises(FileLogException):
        read_config_yaml(yaml_file("base_name: [unclosed\n"))
    with pytest.raises(FileLogException):
        read_config_yaml(str(tmp_path / "missing.yaml"))


def test_load_layers_yaml_env_and_arguments(yaml_file, monkeypatch, tmp_path):
    path = yaml_file(
        "file_log:\n"
        "  base_name: from_yaml\n"
        "  log_dir: yaml_logs\n"
        "  use_prefix: true\n"
        "  retention_days: 3\n"
    )
    monkeypatch.setenv(constants.ENV_USE_PREFIX, "false")
    monkeypatch.setenv(constants.ENV_LOG_DIR, "env_logs")

    config = load_logger_config(config_file_path=path, log_dir=str(tmp_path / "arg_logs"))

    assert config.base_name == "from_yaml"
    assert config.use_prefix is False
    assert config.retention_days == 3
    assert config.log_dir == str(tmp_path / "arg_logs")


def test_load_from_environment_only(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(constants.ENV_BASE_NAME, "env_app")
    monkeypatch.setenv(constants.ENV_USE_DATE, "no")
    monkeypatch.setenv(constants.ENV_RETENTION_DAYS, "14")

    config = load_logger_config()

    assert config.base_name == "env_app"
    assert config.use_date is False
    assert config.retention_days == 14


def test_load_picks_up_the_default_config_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "file_log.yaml").write_text("base_name: default_file\n", encoding="utf-8")

    assert load_logger_config().base_name == "default_file"


def test_load_without_a_base_name_fails(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)

    with pytest.raises(FileLogException):
        load_logger_config()


def test_load_rejects_bad_numbers(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(constants.ENV_RETENTION_DAYS, "a week")

    with pytest.raises(FileLogException):
        load_logger_config(base_name="app")
