import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "genealogy_tree.yml"
CONFIG_ENV_VAR = "GENEALOGY_TREE_CONFIG"

DEFAULTS = {
    "paths": {"data_dir": "data", "logs_dir": "logs"},
    "store": {"default_tree_id": "main", "writer_role": "admin"},
    "display": {"language": "en"},
    "chart": {"transition_time": 1000, "card_x_spacing": 250, "card_y_spacing": 150},
    "logging": {},
    "debug": False,
}


class TreeConfig:
    def __init__(self, data):
        self.paths = {**DEFAULTS["paths"], **(data.get("paths") or {})}
        self.store = {**DEFAULTS["store"], **(data.get("store") or {})}
        self.display = {**DEFAULTS["display"], **(data.get("display") or {})}
        self.chart = {**DEFAULTS["chart"], **(data.get("chart") or {})}
        self.logging = data.get("logging") or {}
        self.debug = data.get("debug", False)


def resolve_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path: Path | None = None) -> 'TreeConfig':
    path = path or resolve_config_path()
    if not path.exists():
        if path != CONFIG_PATH:
            raise FileNotFoundError(f"Config file not found: {path}")
        # Installed without the repo checkout: run on built-in defaults.
        return TreeConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return TreeConfig(data)

_config_cache = None

def get_config() -> 'TreeConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
