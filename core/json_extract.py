"""
core/json_extract.py
────────────────────────────────────────────────────────────────────────
Pull a JSON value out of a free-text model reply.

Gemini likes to wrap JSON in prose or ```json fences, so instead of
trusting the whole reply we scan for the first *balanced* `{...}` (or
`[...]`) span that also parses. The scanner knows about JSON strings, so
braces inside quoted values do not upset the depth count.

The result is a tiny discriminated union:

    Ok(value)   – parsed value of the expected container type
    Err(reason) – human-readable reason, for logs only
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar, Union

T = TypeVar("T")

_CLOSERS = {"{": "}", "[": "]"}


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    reason: str


Result = Union[Ok[T], Err]


def balanced_spans(text: str, opener: str = "{") -> Iterator[str]:
    """Yield every balanced span starting at an `opener`, left to right."""
    closer = _CLOSERS[opener]
    start = text.find(opener)
    while start != -1:
        depth = 0
        in_str = escaped = False
        for i in range(start, len(text)):
            ch = text[i]
            if in_str:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_str = False
                continue
            if ch == '"':
                in_str = True
            elif ch == opener:
                depth += 1
            elif ch == closer:
                depth -= 1
                if depth == 0:
                    yield text[start : i + 1]
                    break
        start = text.find(opener, start + 1)


def extract_json(raw: str, expect: type = dict) -> Result[Any]:
    """First balanced `{...}` (expect=dict) or `[...]` (expect=list) that parses."""
    if not raw or not raw.strip():
        return Err("empty reply")

    opener = "[" if expect is list else "{"
    found_span = False
    for span in balanced_spans(raw, opener):
        found_span = True
        try:
            data = json.loads(span)
        except json.JSONDecodeError:
            continue
        if isinstance(data, expect):
            return Ok(data)

    kind = "array" if expect is list else "object"
    if not found_span:
        return Err(f"no JSON {kind} found in reply")
    return Err(f"no valid JSON {kind} in reply")
