"""
Reads message streams from disk: a JSON list, or one JSON object per line.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from .core_types import ProcessingMessage
from .settings import LogLevel


def message_from_dict(data: Dict[str, Any]) -> ProcessingMessage:
    if not isinstance(data, dict):
        raise ValueError(f"Message entry must be an object, got {type(data).__name__}")
    payload = dict(data)
    level = LogLevel.parse(str(payload.pop("level", LogLevel.INFO.value)))
    text = str(payload.pop("message", ""))
    message = ProcessingMessage(text, level)
    # Field names may collide with constructor arguments such as log_level
    for key, value in payload.items():
        message.put(key, value)
    return message


def load_messages(path: str | Path) -> List[ProcessingMessage]:
    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"Message file not found: {path}")

    content = source.read_text(encoding="utf-8")
    if source.suffix == ".jsonl":
        entries = [json.loads(line) for line in content.splitlines() if line.strip()]
    else:
        entries = json.loads(content) if content.strip() else []
        if not isinstance(entries, list):
            raise ValueError("Message file must contain a JSON list.")
    return [message_from_dict(entry) for entry in entries]
