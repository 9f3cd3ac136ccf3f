import json
from pathlib import Path

CONFIG_DIR = Path.home() / ".config" / "gpx-model"
CONFIG_PATH = CONFIG_DIR / "gpx-model.json"
LOCAL_CONFIG_PATH = Path("gpx-model.json")

DEFAULTS = {
    "log_level": "WARNING",
    "indent": 2,
}


def load_config(paths: list[Path] | None = None) -> dict:
    """Load configuration from config files.

    Merges config from global and local files:
    1. ~/.config/gpx-model/gpx-model.json (global, loaded first)
    2. ./gpx-model.json (local, overrides global)

    Files that are missing, unreadable or not valid JSON objects are skipped.

    Returns:
        Dict with DEFAULTS overlaid by the merged file values.
    """
    if paths is None:
        paths = [CONFIG_PATH, LOCAL_CONFIG_PATH]

    config = dict(DEFAULTS)
    for config_path in paths:
        if config_path.exists():
            try:
                with config_path.open() as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError):
                continue
            if isinstance(data, dict):
                config.update(data)
    return config
