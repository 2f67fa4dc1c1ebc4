"""Minimal tracing primitives for the POI generator.

Each event is one JSON line on stdout; the function host forwards stdout to
its log collector, so no exporter is configured here.
"""

from __future__ import annotations

import json
import time
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

_REDACTED_KEYS = frozenset({'api_key', 'authorization'})


@dataclass
class Span:
    name: str
    trace_id: str
    span_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    start_ns: int = field(default_factory=time.time_ns)
    end_ns: int | None = None
    attributes: dict[str, Any] = field(default_factory=dict)

    def end(self) -> None:
        if self.end_ns is None:
            self.end_ns = time.time_ns()

    @property
    def duration_ms(self) -> float | None:
        if self.end_ns is None:
            return None
        return (self.end_ns - self.start_ns) / 1_000_000.0


def new_trace_id() -> str:
    return uuid.uuid4().hex


def log_event(event: str, *, trace_id: str, span: Span | None = None, **fields: Any) -> None:
    """Print a structured event. Credential-like fields are masked."""
    payload: dict[str, Any] = {'event': event, 'trace_id': trace_id}
    for key, value in fields.items():
        payload[key] = '***' if key.lower() in _REDACTED_KEYS else value
    if span is not None:
        payload['span'] = {
            'name': span.name,
            'span_id': span.span_id,
            'duration_ms': span.duration_ms,
            'attributes': span.attributes,
        }
    print(json.dumps(payload, ensure_ascii=False, default=str))


@contextmanager
def traced(name: str, *, trace_id: str, **attributes: Any) -> Iterator[Span]:
    """Time a block and emit `span.end` when it exits, even on error."""
    span = Span(name=name, trace_id=trace_id, attributes=dict(attributes))
    try:
        yield span
    except Exception as exc:
        span.attributes['error'] = type(exc).__name__
        raise
    finally:
        span.end()
        log_event('span.end', trace_id=trace_id, span=span)
