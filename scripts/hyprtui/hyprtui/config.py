"""Profile resolution and user config merging for the switcher and clock."""

from __future__ import annotations

import json
import os
from pathlib import Path

CONFIG_ENV = "HYPRTUI_CONFIG"
HYPRCTL_ENV = "HYPRTUI_HYPRCTL"

BUILTIN_PROFILES: dict[str, dict] = {
    "switcher": {
        "tick_ms": 200,
        "cell_height": 10,
        "status_seconds": 3,
        "hyprctl": "hyprctl",
        "mouse": True,
    },
    "clock": {
        "tick_ms": 100,
        "box_width": 50,
        "box_height": 25,
    },
}

# key -> minimum accepted value
INT_MINIMUMS = {
    "tick_ms": 10,
    "cell_height": 3,
    "status_seconds": 1,
    "box_width": 10,
    "box_height": 5,
}


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path).expanduser()
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        data = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError("config must be a JSON object")
    return data


def resolve_profile(app: str, config_path: str | None = None) -> dict:
    if app not in BUILTIN_PROFILES:
        raise ValueError(f"unknown app profile: {app}")

    resolved = dict(BUILTIN_PROFILES[app])
    user_config = load_user_config(config_path or os.environ.get(CONFIG_ENV))

    # flat keys first, then the per-app section wins
    overrides = {k: v for k, v in user_config.items() if k not in BUILTIN_PROFILES}
    section = user_config.get(app)
    if isinstance(section, dict):
        overrides.update(section)

    for key, value in overrides.items():
        if key not in resolved:
            continue
        if key in INT_MINIMUMS:
            try:
                value = int(value)
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{key} must be an integer") from exc
            resolved[key] = max(INT_MINIMUMS[key], value)
        elif isinstance(resolved[key], bool):
            if not isinstance(value, bool):
                raise ValueError(f"{key} must be true or false")
            resolved[key] = value
        else:
            resolved[key] = str(value)

    if app == "switcher" and os.environ.get(HYPRCTL_ENV):
        resolved["hyprctl"] = os.environ[HYPRCTL_ENV]

    resolved["name"] = app
    return resolved
