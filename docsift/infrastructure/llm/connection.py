"""Classify transport failures raised by the extraction clients."""
from __future__ import annotations

import errno
from typing import List, Optional, Set


def is_connection_refused(exc: Optional[BaseException]) -> bool:
    """True when a refused TCP connection is anywhere in ``exc``'s chain.

    requests wraps the socket error as ``ConnectionError(MaxRetryError)``
    whose ``reason`` carries the original error as ``__cause__``; httpx and
    the OpenAI SDK chain it through ``__cause__``/``__context__``.
    """

    pending: List[object] = [exc]
    seen: Set[int] = set()
    while pending:
        current = pending.pop()
        if not isinstance(current, BaseException) or id(current) in seen:
            continue
        seen.add(id(current))
        if isinstance(current, ConnectionRefusedError):
            return True
        if getattr(current, "errno", None) == errno.ECONNREFUSED:
            return True
        pending.extend((current.__cause__, current.__context__, getattr(current, "reason", None)))
        pending.extend(arg for arg in current.args if isinstance(arg, BaseException))
    return False
