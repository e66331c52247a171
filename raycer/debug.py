"""Debug logging and on-screen debug values."""

from __future__ import annotations

ENABLED_GROUPS = frozenset({"MODEL", "MENU", "GENERAL", "CONTROL", "UI"})

debug_values: dict[str, str] = {}


def debug_log(group: str, message: str) -> None:
    """Print ``message`` if logging for ``group`` is enabled."""
    if group not in ENABLED_GROUPS:
        return
    print(f"# DEBUG: {group}: {message}", flush=True)