"""Placeholder rendering for messages built from trigger contexts."""

from typing import Any, Dict, Mapping


class _Placeholders(Dict[str, Any]):
    def __missing__(self, key: str) -> str:
        return "n/a"


def render(template: str, context: Mapping[str, Any]) -> str:
    """Fill `{field}` placeholders; floats print with one decimal.

    Unknown placeholders render as "n/a".

    Example:
        >>> render("FCR is {fcr}", {"fcr": 8.5})
        'FCR is 8.5'
    """
    values = _Placeholders(
        {k: (f"{v:.1f}" if isinstance(v, float) else v) for k, v in context.items()}
    )
    return template.format_map(values)
