"""
Load and expose engine config (YAML). Used by the generation factory and the scripts to get
attempt budgets, distance thresholds and default category/steps.
"""
from pathlib import Path
from typing import Any

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    merged = _defaults()
    for section, values in data.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section] = {**merged[section], **values}
        else:
            merged[section] = values
    return merged


def _defaults() -> dict[str, Any]:
    return {
        "generation": {
            "max_attempts": 10000,
            "min_color_distance": 5.0,
            "default_category": "Random",
            "default_steps": 7,
            "batch_max_attempts": None,
        },
        "logging": {"level": "INFO"},
    }


def resolve_generation_config(config: dict[str, Any] | None) -> dict[str, Any]:
    """Resolve generation settings: missing or invalid values fall back to defaults."""
    defaults = _defaults()["generation"]
    gen = dict(defaults)
    gen.update((config or {}).get("generation") or {})
    try:
        gen["max_attempts"] = max(1, int(gen["max_attempts"]))
    except (TypeError, ValueError):
        gen["max_attempts"] = defaults["max_attempts"]
    try:
        gen["min_color_distance"] = float(gen["min_color_distance"])
    except (TypeError, ValueError):
        gen["min_color_distance"] = defaults["min_color_distance"]
    try:
        gen["default_steps"] = max(1, int(gen["default_steps"]))
    except (TypeError, ValueError):
        gen["default_steps"] = defaults["default_steps"]
    if gen.get("batch_max_attempts") is not None:
        try:
            gen["batch_max_attempts"] = max(1, int(gen["batch_max_attempts"]))
        except (TypeError, ValueError):
            gen["batch_max_attempts"] = None
    return gen
