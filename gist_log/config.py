"""
Configuration for gist-log.

Non-secret settings live in ~/.config/gist-log/config.yaml (created with
defaults on first run). The GitHub token and gist id come from the
environment, optionally populated from a .env file.
"""
import logging
import os
from pathlib import Path

import yaml
from dotenv import dotenv_values

CONFIG_DIR = Path.home() / ".config" / "gist-log"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

DEFAULT_CONFIG = {
    "log_filename": "daily-log.md",
    "log_file": "/tmp/gist_log.log",
    "api_url": "https://api.github.com",
    "timeout": 30,
    "env_file": str(CONFIG_DIR / ".env"),
}

MISSING_CREDENTIALS = "Please set GITHUB_TOKEN and GIST_ID in your .env file."


class ConfigError(Exception):
    pass


class GistLogConfig:
    def __init__(self, token, gist_id, filename="daily-log.md",
                 log_file="/tmp/gist_log.log", api_url="https://api.github.com",
                 timeout=30):
        self.token = token
        self.gist_id = gist_id
        self.filename = filename
        self.log_file = Path(log_file)
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    def __repr__(self):
        return (f"GistLogConfig(gist_id={self.gist_id!r}, filename={self.filename!r}, "
                f"api_url={self.api_url!r})")


def load_settings(config_file: Path = CONFIG_FILE) -> dict:
    settings = DEFAULT_CONFIG.copy()
    if config_file.exists():
        try:
            with config_file.open("r", encoding="utf-8") as f:
                user_config = yaml.safe_load(f) or {}
                settings.update(user_config)
        except Exception as e:
            logging.error(f"Error loading config file {config_file}: {e}")
    else:
        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with config_file.open("w", encoding="utf-8") as f:
                yaml.dump(DEFAULT_CONFIG, f, indent=2)
            logging.info(f"Default config file created at {config_file}")
        except Exception as e:
            logging.error(f"Error creating default config file: {e}")
    return settings


def load_environment(env_file: Path, environ=None) -> dict:
    """Return environment values, filling gaps from .env files.

    Variables already present in ``environ`` win over both the configured
    env file and a .env in the working directory.
    """
    if environ is None:
        environ = os.environ
    merged = {}
    for path in (Path.cwd() / ".env", env_file):
        if path.is_file():
            merged.update({k: v for k, v in dotenv_values(path).items() if v is not None})
            logging.debug(f"Loaded environment from {path}")
    merged.update(environ)
    return merged


def load_config(config_file: Path = CONFIG_FILE, environ=None) -> GistLogConfig:
    settings = load_settings(config_file)
    env = load_environment(Path(settings["env_file"]).expanduser(), environ)

    token = env.get("GITHUB_TOKEN", "").strip()
    gist_id = env.get("GIST_ID", "").strip()
    if not token or not gist_id:
        raise ConfigError(MISSING_CREDENTIALS)

    return GistLogConfig(
        token=token,
        gist_id=gist_id,
        filename=env.get("LOG_FILENAME") or settings["log_filename"],
        log_file=settings["log_file"],
        api_url=settings["api_url"],
        timeout=settings["timeout"],
    )
