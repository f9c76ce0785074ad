from __future__ import annotations

from typing import Iterable

from ..core_types import MessageLike


def generate_markdown(messages: Iterable[MessageLike]) -> str:
    messages = list(messages)
    if not messages:
        return "### Processing Report\n\nNo messages recorded."
    lines = ["### Processing Report"]
    for message in messages:
        text = getattr(message, "message", str(message))
        lines.append(f"- **{message.log_level.value.upper()}** {text}")
        for key, value in (getattr(message, "fields", {}) or {}).items():
            lines.append(f"  - {key}: `{value}`")
    return "\n".join(lines)
