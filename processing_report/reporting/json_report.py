from __future__ import annotations

import json
from typing import Any, Dict, Iterable, TextIO

from ..core_types import MessageLike


def _payload(message: MessageLike) -> Dict[str, Any]:
    as_dict = getattr(message, "as_dict", None)
    if as_dict is not None:
        return as_dict()
    return {"level": message.log_level.value, "message": str(message)}


def generate_json(messages: Iterable[MessageLike]) -> str:
    return json.dumps([_payload(m) for m in messages], indent=2, default=str)


def write_json(messages: Iterable[MessageLike], stream: TextIO) -> None:
    stream.write(generate_json(messages))
    stream.write("\n")
