"""用户设置：以 JSON 形式保存在 appdirs 给出的用户配置目录中"""
import errno
import json
import logging
import os
import tempfile
import warnings

from appdirs import AppDirs

from .errors import ConfigError, SettingsWarning

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"

# 字段名 -> (类型, 默认值)
FIELDS = {
    "expression": (str, "x^2 - 4x - 10"),
    "x1": (float, 0.0),
    "x2": (float, 1.0),
    "use_eps": (bool, True),
    "eps": (float, 1e-5),
    "iterations": (int, 5),
    "max_iterations": (int, 100),
    "precision": (int, 6),
    "unicode": (bool, True),
}


def default_config_dir():
    return AppDirs("shunt").user_config_dir


def settings_path(config_dir=None):
    if config_dir is None:
        config_dir = default_config_dir()
    return os.path.join(config_dir, SETTINGS_FILE)


def _coerce(name, value):
    expected, _ = FIELDS[name]
    # bool 是 int 的子类，需要单独排除
    if expected is bool:
        ok = isinstance(value, bool)
    elif expected is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    elif expected is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    else:
        ok = isinstance(value, expected)
    if not ok:
        raise ConfigError(f"Setting {name!r} must be of type {expected.__name__}, not {type(value).__name__}")
    return expected(value)


class Settings:
    def __init__(self, **kwargs):
        for name, (_, default) in FIELDS.items():
            setattr(self, name, default)
        for name, value in kwargs.items():
            if name not in FIELDS:
                raise ConfigError(f"Unknown setting {name!r}")
            setattr(self, name, _coerce(name, value))

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ConfigError("Settings file must contain a JSON object")
        known = {}
        for name, value in data.items():
            if name in FIELDS:
                known[name] = value
            else:
                warnings.warn(f"Unknown setting {name!r} ignored", SettingsWarning, stacklevel=3)
        return cls(**known)

    def to_dict(self):
        return {name: getattr(self, name) for name in FIELDS}

    def __eq__(self, other):
        if not isinstance(other, Settings):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"Settings({fields})"


def load_settings(config_dir=None):
    path = settings_path(config_dir)
    if not os.path.exists(path):
        logger.debug("no settings file at %s, using defaults", path)
        return Settings()
    with open(path) as f:
        try:
            data = json.load(f)
        except ValueError as e:
            raise ConfigError(f"Cannot parse {path}: {e}") from e
    return Settings.from_dict(data)


def save_settings(settings, config_dir=None):
    if config_dir is None:
        config_dir = default_config_dir()
    if not os.path.exists(config_dir):
        try:
            os.makedirs(config_dir, mode=0o0700)
        except OSError as e:
            if e.errno == errno.EROFS:
                logger.warning("read-only filesystem, settings not saved to %s", config_dir)
                return None
            raise

    path = settings_path(config_dir)
    with tempfile.NamedTemporaryFile(dir=config_dir, delete=False, mode="w") as f:
        json.dump(settings.to_dict(), f, indent=2)
    os.replace(f.name, path)
    logger.debug("settings saved to %s", path)
    return path
