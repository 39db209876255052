"""Player-facing message templates."""
from __future__ import annotations

from typing import Dict

MESSAGES: Dict[str, str] = {
    "permanent_condition_healed": "{cause} has healed {character}'s {condition}.",
}


def render_message(key: str, **values: str) -> str:
    """Format the template stored under ``key``."""
    try:
        template = MESSAGES[key]
    except KeyError as exc:
        raise KeyError(key) from exc
    return template.format(**values)
