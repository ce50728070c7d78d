"""Call-site capture for log lines."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class CallSite:
    """Source location of the code that requested a log emission."""

    filename: str
    lineno: int


class CallSiteProvider(Protocol):
    """Returns the call site ``depth`` frames above the provider call, or ``None``."""

    def __call__(self, depth: int) -> Optional[CallSite]:
        ...


class FrameCallSiteProvider:
    """Resolve call sites by walking the interpreter stack.

    ``depth`` counts frames from the provider itself: ``depth=1`` is the
    function that called the provider.
    """

    def __call__(self, depth: int) -> Optional[CallSite]:
        getframe = getattr(sys, "_getframe", None)
        if getframe is None:  # pragma: no cover - interpreters without frame access
            return None
        try:
            frame = getframe(depth)
        except ValueError:
            return None
        return CallSite(os.path.basename(frame.f_code.co_filename), frame.f_lineno)


class FixedCallSiteProvider:
    """Always report the same location. ``None`` disables emission entirely."""

    def __init__(self, site: Optional[CallSite]):
        self.site = site

    def __call__(self, depth: int) -> Optional[CallSite]:
        return self.site


__all__ = ["CallSite", "CallSiteProvider", "FrameCallSiteProvider", "FixedCallSiteProvider"]
