"""
Tests for configuration loading in gist-log.
"""
import pytest
import yaml

from gist_log.config import DEFAULT_CONFIG, ConfigError, load_config, load_settings


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({"env_file": str(tmp_path / "app.env"),
                               "log_file": str(tmp_path / "gist_log.log")}))
    return path


def test_default_config_created_when_missing(tmp_path):
    path = tmp_path / "nested" / "config.yaml"
    settings = load_settings(path)
    assert settings == DEFAULT_CONFIG
    assert yaml.safe_load(path.read_text()) == DEFAULT_CONFIG


def test_user_config_overrides_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("log_filename: work.md\ntimeout: 10\n")
    settings = load_settings(path)
    assert settings["log_filename"] == "work.md"
    assert settings["timeout"] == 10
    assert settings["api_url"] == DEFAULT_CONFIG["api_url"]


def test_invalid_yaml_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("log_filename: [unclosed\n")
    assert load_settings(path) == DEFAULT_CONFIG


def test_missing_credentials_raise(config_file):
    with pytest.raises(ConfigError, match="GITHUB_TOKEN and GIST_ID"):
        load_config(config_file, environ={"GITHUB_TOKEN": "t"})
    with pytest.raises(ConfigError):
        load_config(config_file, environ={"GIST_ID": "g"})


def test_environment_values(config_file, tmp_path):
    config = load_config(config_file, environ={"GITHUB_TOKEN": "t", "GIST_ID": "g"})
    assert config.token == "t"
    assert config.gist_id == "g"
    assert config.filename == "daily-log.md"
    assert config.log_file == tmp_path / "gist_log.log"
    assert config.api_url == "https://api.github.com"


def test_filename_override(config_file):
    config = load_config(config_file, environ={"GITHUB_TOKEN": "t", "GIST_ID": "g",
                                               "LOG_FILENAME": "standup.md"})
    assert config.filename == "standup.md"


def test_env_files_fill_gaps(config_file, tmp_path):
    (tmp_path / ".env").write_text("GIST_ID=from-cwd\nLOG_FILENAME=cwd.md\n")
    (tmp_path / "app.env").write_text("GITHUB_TOKEN=from-file\nLOG_FILENAME=file.md\n")
    config = load_config(config_file, environ={"GIST_ID": "from-environ"})
    assert config.token == "from-file"
    assert config.gist_id == "from-environ"
    assert config.filename == "file.md"


def test_repr_hides_token():
    from gist_log.config import GistLogConfig

    assert "secret" not in repr(GistLogConfig(token="secret", gist_id="g"))
