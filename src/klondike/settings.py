# settings.py - audio settings owned by the presentation layer
import os
import json
import logging

logger = logging.getLogger(__name__)

# Defaults (may be overridden by persisted settings)
_DEFAULT_SETTINGS = {
    "music_enabled": True,
    "sound_enabled": True,
    "music_volume": 0.5,
    "sound_volume": 0.7,
}

_BOOL_KEYS = ("music_enabled", "sound_enabled")
_VOLUME_KEYS = ("music_volume", "sound_volume")

_CURRENT_SETTINGS = dict(_DEFAULT_SETTINGS)


def _settings_dir() -> str:
    override = os.environ.get("KLONDIKE_SETTINGS_DIR")
    if override:
        return override
    # Prefer %APPDATA% on Windows, else ~/.klondike_solitaire
    base = os.environ.get("APPDATA")
    if base:
        return os.path.join(base, "KlondikeSolitaire")
    return os.path.join(os.path.expanduser("~"), ".klondike_solitaire")


def _settings_path() -> str:
    return os.path.join(_settings_dir(), "settings.json")


def _clamp_volume(v) -> float:
    v = round(float(v), 1)
    return min(1.0, max(0.0, v))


def _sanitize(values: dict) -> dict:
    out = {}
    for k in _BOOL_KEYS:
        if k in values and isinstance(values[k], bool):
            out[k] = values[k]
    for k in _VOLUME_KEYS:
        if k not in values:
            continue
        try:
            out[k] = _clamp_volume(values[k])
        except (TypeError, ValueError):
            logger.debug("Ignoring bad %s value %r", k, values[k])
    return out


def get_current_settings():
    return dict(_CURRENT_SETTINGS)


def load_settings():
    """Reset to defaults, then merge whatever the settings file holds."""
    global _CURRENT_SETTINGS
    _CURRENT_SETTINGS = dict(_DEFAULT_SETTINGS)
    path = _settings_path()
    if not os.path.isfile(path):
        return get_current_settings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Could not read settings from %s: %s", path, exc)
        return get_current_settings()
    if isinstance(data, dict):
        _CURRENT_SETTINGS.update(_sanitize(data))
    return get_current_settings()


def save_settings(new_values: dict):
    # Merge and write to disk
    _CURRENT_SETTINGS.update(_sanitize(new_values))
    try:
        os.makedirs(_settings_dir(), exist_ok=True)
        with open(_settings_path(), "w", encoding="utf-8") as f:
            json.dump(_CURRENT_SETTINGS, f, indent=2)
    except OSError as exc:
        logger.warning("Could not save settings: %s", exc)
    return get_current_settings()


def toggle(key: str) -> bool:
    if key not in _BOOL_KEYS:
        raise KeyError(key)
    value = not _CURRENT_SETTINGS[key]
    save_settings({key: value})
    return value


def step_volume(key: str) -> float:
    """Raise a volume by 0.1, wrapping back to 0 after 1.0."""
    if key not in _VOLUME_KEYS:
        raise KeyError(key)
    value = round(_CURRENT_SETTINGS[key] + 0.1, 1)
    if value > 1:
        value = 0.0
    save_settings({key: value})
    return value
