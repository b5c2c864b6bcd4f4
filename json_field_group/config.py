"""
Configuration for JSON field groups.

Defaults can be overridden through the Django setting ``JSON_FIELD_GROUP``
(a dict) and then through ``JSON_FIELD_GROUP_*`` environment variables.
"""
import os
from typing import Any, List, Optional

from django.conf import settings

ENV_PREFIX = 'JSON_FIELD_GROUP_'

DEFAULTS = {
    'NULLABLE': True,
    'NULL_VALUES': [''],
    'SHOW_HEADING': True,
    'LOG_DIR': None,
}


def parse_null_values(value: str) -> List[str]:
    """
    Null sentinels from a comma-separated environment value.

    Empty items are kept, so the empty string stays a sentinel only when
    it is listed: ``",n/a"`` is ``['', 'n/a']`` and ``"n/a"`` is
    ``['n/a']``. An empty value is ``['']``.
    """
    return [item.strip() for item in value.split(',')]


def parse_flag(value: str) -> bool:
    return value.strip().lower() in ('true', '1', 'yes', 'on')


def _from_settings(name: str) -> Any:
    overrides = getattr(settings, 'JSON_FIELD_GROUP', None) if settings.configured else None
    if overrides and name in overrides:
        return overrides[name]
    return DEFAULTS[name]


def get_setting(name: str) -> Any:
    """
    Resolve a setting: environment first, then Django settings, then defaults.

    Raises:
        KeyError: If ``name`` is not a known setting.
    """
    if name not in DEFAULTS:
        raise KeyError(f"Unknown JSON_FIELD_GROUP setting: {name}")

    raw = os.environ.get(f"{ENV_PREFIX}{name}")
    if raw is None:
        base = _from_settings(name)
        return list(base) if isinstance(base, list) else base

    if name == 'NULL_VALUES':
        return parse_null_values(raw)
    if isinstance(DEFAULTS[name], bool):
        return parse_flag(raw)
    return raw


def get_log_dir() -> Optional[str]:
    return get_setting('LOG_DIR')
