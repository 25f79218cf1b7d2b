"""Persistent bangumatch settings.

Settings live in ``$XDG_CONFIG_HOME/bangumatch/config.toml`` (default
``~/.config/bangumatch``). Values are read with tomli and written with tomli-w.
resolve_setting() layers CLI value > environment > config file > default.
"""

import contextlib
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import tomli
import tomli_w

_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
CONFIG_DIR = _xdg_config_home / "bangumatch"
CONFIG_FILE = CONFIG_DIR / "config.toml"

ENV_PREFIX = "BANGUMATCH_"

# Settings the CLI may persist, with their defaults.
SUPPORTED_SETTINGS: dict[str, Any] = {
    "episode.always_replace_number": False,
    "episode.use_original_name": False,
}

_TRUTHY = {"1", "true", "yes", "on"}

T = TypeVar("T")


def _read_config_file() -> dict[str, Any]:
    if not CONFIG_FILE.exists():
        return {}
    with CONFIG_FILE.open("rb") as f:
        return tomli.load(f)


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Retrieve ``data["a"]["b"]`` for ``"a.b"``, or None if any level is missing."""
    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str, prefix: str = ENV_PREFIX) -> str:
    """Example: "episode.use_original_name" -> "BANGUMATCH_EPISODE_USE_ORIGINAL_NAME"."""
    return prefix + dotted_key.replace(".", "_").upper()


def _coerce(raw: Any, default: T) -> T:
    """Coerce *raw* to the type of *default*, falling back to *default*."""
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return cast(T, raw)
        if isinstance(raw, str):
            return cast(T, raw.lower() in _TRUTHY)
        return default
    if isinstance(default, int):
        if isinstance(raw, int) and not isinstance(raw, bool):
            return cast(T, raw)
        if isinstance(raw, str):
            with contextlib.suppress(ValueError):
                return cast(T, int(raw))
        return default
    if isinstance(default, float):
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return cast(T, float(raw))
        if isinstance(raw, str):
            with contextlib.suppress(ValueError):
                return cast(T, float(raw))
        return default
    if default is None and isinstance(raw, str):
        if raw.isdigit():
            return cast(T, int(raw))
        with contextlib.suppress(ValueError):
            return cast(T, float(raw))
    return cast(T, raw)


def resolve_setting(
    key: str,
    *,
    default: T,
    cli_value: T | None = None,
) -> T:
    """Resolve a configuration *key* using precedence CLI > env > config > default.

    Args:
        key: Dotted key path, e.g. ``"episode.always_replace_number"``.
        default: Value to fall back to when no overrides found; its type drives
            coercion of environment and config file values.
        cli_value: Value passed from a CLI option (``None`` when not provided).

    Returns:
        The resolved value.
    """
    if cli_value is not None:
        return cli_value

    env_var = _make_env_var_name(key)
    if env_var in os.environ:
        return _coerce(os.environ[env_var], default)

    file_val = _lookup_nested(_read_config_file(), key)
    if file_val is not None:
        return _coerce(file_val, default)

    return default


def set_setting(key: str, value: Any) -> None:
    """Persist *value* under the dotted *key* in config.toml.

    Raises:
        KeyError: If *key* is not a supported setting.
    """
    if key not in SUPPORTED_SETTINGS:
        raise KeyError(key)
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    data = _read_config_file()
    *parents, leaf = key.split(".")
    node = data
    for part in parents:
        node = node.setdefault(part, {})
    node[leaf] = _coerce(value, SUPPORTED_SETTINGS[key])
    with CONFIG_FILE.open("wb") as f:
        tomli_w.dump(data, f)
