import os
from pathlib import Path

import yaml

from family_tree.core.exceptions import ConfigError

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "family_tree.yml"
CONFIG_ENV_VAR = "FAMILY_TREE_CONFIG"

DEFAULT_ENGINE = {
    "infer_siblings_for_display": True,
    "drop_dangling_references": False,
}


class FTConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.engine = {**DEFAULT_ENGINE, **(data.get("engine", {}) or {})}
        self.debug = data.get("debug", False)

    @property
    def infer_siblings_for_display(self) -> bool:
        return bool(self.engine.get("infer_siblings_for_display"))

    @property
    def drop_dangling_references(self) -> bool:
        return bool(self.engine.get("drop_dangling_references"))


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path: Path | None = None) -> 'FTConfig':
    path = path or config_path()
    if not path.exists():
        # Built-in defaults keep the engine usable without a config file.
        return FTConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")

    return FTConfig(data)

_config_cache = None

def get_config() -> 'FTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config_cache() -> None:
    global _config_cache
    _config_cache = None
