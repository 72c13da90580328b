"""Feature flags read from the ``PLOTSCRIPT_FEATURES`` environment variable.

The variable holds comma separated tokens: ``name`` turns a flag on,
``!name`` or ``-name`` turns it off, and ``name=value`` accepts the usual
yes/no spellings. Names are case-insensitive and ``-`` equals ``_``.
"""

from __future__ import annotations

import os
from functools import lru_cache

ENV_VAR = "PLOTSCRIPT_FEATURES"

# Flags consulted by plotscript itself, with their built-in defaults.
KNOWN_FLAGS: dict[str, bool] = {
    # Warn when a key title holds a single quote (gnuplot cannot parse it).
    "title_quote_warning": True,
}

_BOOL_WORDS = {
    "1": True,
    "true": True,
    "on": True,
    "yes": True,
    "enable": True,
    "enabled": True,
    "0": False,
    "false": False,
    "off": False,
    "no": False,
    "disable": False,
    "disabled": False,
}


def _flag_name(raw: str) -> str:
    return raw.strip().lower().replace("-", "_")


def _parse(raw: str) -> dict[str, bool]:
    parsed: dict[str, bool] = {}
    for token in (t.strip() for t in raw.split(",")):
        if not token:
            continue
        if token[0] in "!-":
            parsed[_flag_name(token[1:])] = False
        elif "=" in token:
            name, value = token.split("=", 1)
            state = _BOOL_WORDS.get(value.strip().lower())
            # Unrecognised values leave the flag at its default.
            if state is not None:
                parsed[_flag_name(name)] = state
        else:
            parsed[_flag_name(token)] = True
    return parsed


@lru_cache(maxsize=4)
def _cached_flags(env_value: str | None = None) -> dict[str, bool]:
    if env_value is None:
        env_value = os.environ.get(ENV_VAR, "")
    return _parse(env_value)


def reload() -> None:
    """Forget the parsed environment so the next lookup re-reads it."""
    _cached_flags.cache_clear()


def all_enabled(env_value: str | None = None) -> dict[str, bool]:
    """Return a copy of the flags set explicitly in the environment."""
    return dict(_cached_flags(env_value))


def is_enabled(flag: str, *, default: bool | None = None) -> bool:
    """Return whether ``flag`` is active.

    Unset flags fall back to ``default`` when given, then to ``KNOWN_FLAGS``,
    then to False.
    """
    if not flag:
        raise ValueError("Flag name must be a non-empty string")
    name = _flag_name(flag)
    explicit = _cached_flags()
    if name in explicit:
        return explicit[name]
    if default is not None:
        return default
    return KNOWN_FLAGS.get(name, False)
