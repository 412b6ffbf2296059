from __future__ import annotations
import logging
import os
from enum import Enum


class Scoping(Enum):
    LEXICAL = "lexical"   # closures capture the chain they were created in
    DYNAMIC = "dynamic"   # closure bodies run on top of the caller's chain


# Defaults
_DEFAULT_PROMPT = '> '
_DEFAULT_SCOPING = Scoping.LEXICAL
_DEFAULT_LOG_LEVEL = 'WARNING'


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


def get_prompt() -> str:
    return os.environ.get('PAIRLISP_PROMPT', _DEFAULT_PROMPT)


def get_scoping() -> Scoping:
    raw = os.environ.get('PAIRLISP_SCOPING')
    if not raw:
        return _DEFAULT_SCOPING
    try:
        return Scoping(raw.strip().lower())
    except ValueError:
        raise ValueError(
            f"PAIRLISP_SCOPING must be one of "
            f"{', '.join(s.value for s in Scoping)}, got {raw!r}"
        ) from None


def use_color() -> bool:
    return flag_from_env('PAIRLISP_COLOR', False)


def get_log_level() -> int:
    raw = os.environ.get('PAIRLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(raw.strip().upper())
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING
