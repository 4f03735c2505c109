"""
L1 Domain — Download helpers (pure).

Size formatting and progress bookkeeping for the MPM download.
No I/O.
"""

from __future__ import annotations


def _fmt_size(n: int | float) -> str:
    """Format byte count to human-readable string."""
    for unit in ("B", "KB", "MB", "GB"):
        if n < 1024:
            return f"{n:.1f} {unit}"
        n /= 1024
    return f"{n:.1f} TB"


def _progress_percent(downloaded: int, total: int) -> int | None:
    """Whole-number percentage, or None when the total is unknown."""
    if total <= 0:
        return None
    return min(100, int(downloaded * 100 / total))
