"""
Path helpers for attributes that point inside a JSON column.

Qualified attributes use ``->`` between segments (``meta->seo->title``);
nested structures are addressed with dotted paths (``seo.title``).
"""

from typing import Any, Optional

SEPARATOR = '->'


def snake_name(name: str) -> str:
    """Attribute inferred from a display name: lower case, spaces to underscores."""
    return name.lower().replace(' ', '_')


def qualify(parent: str, child: str) -> str:
    return f"{parent}{SEPARATOR}{child}"


def is_container_marker(attribute: str) -> bool:
    """A bare container key such as ``meta->`` names no leaf."""
    return attribute.endswith(SEPARATOR)


def to_dotted(attribute: str, prefix: Optional[str] = None) -> str:
    """
    Convert a qualified attribute into a dotted path.

    When ``prefix`` is given, its leading ``{prefix}->`` segment is removed
    first, so ``to_dotted('meta->seo->title', 'meta')`` is ``seo.title``.
    """
    lead = f"{prefix}{SEPARATOR}" if prefix is not None else None
    if lead and attribute.startswith(lead):
        attribute = attribute[len(lead):]
    return attribute.replace(SEPARATOR, '.')


def data_get(target: Any, path: str, default: Any = None) -> Any:
    """Read a dotted path from nested dicts, returning ``default`` when absent."""
    current = target
    for segment in path.split('.'):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        else:
            return default
    return current


def data_set(target: dict, path: str, value: Any) -> dict:
    """
    Write ``value`` at a dotted path, creating intermediate dicts.

    Intermediate values that are not dicts are replaced. The target is
    mutated and returned.
    """
    segments = path.split('.')
    current = target
    for segment in segments[:-1]:
        if not isinstance(current.get(segment), dict):
            current[segment] = {}
        current = current[segment]
    current[segments[-1]] = value
    return target
