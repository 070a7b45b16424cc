from __future__ import annotations

"""Minimal tracing helpers (Explain Mode).

Enable with ``--explain``; emits terse one-line JSON traces on stderr at quiz
milestones so the transcript on stdout stays untouched.
"""

import json
import sys
from typing import Any, Dict

_ENABLED = False


def enable(flag: bool = True) -> None:
    global _ENABLED
    _ENABLED = bool(flag)


def trace(event: str, payload: Dict[str, Any] | None = None) -> None:
    if not _ENABLED:
        return
    try:
        data = (payload or {})
        line = f"[EXPLAIN] {event} :: {json.dumps(data, separators=(',',':'))}"
    except (TypeError, ValueError):
        line = f"[EXPLAIN] {event}"
    print(line, file=sys.stderr)
