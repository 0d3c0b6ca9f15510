"""Runtime orchestration: owned state, navigation guard, view dispatch, app.

``DocsApp`` is imported lazily so lightweight consumers (tests of the guard
or dispatcher) avoid pulling the full application wiring.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .app import DocsApp


def __getattr__(name: str):
    if name == "DocsApp":
        from .app import DocsApp as _DocsApp

        return _DocsApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["DocsApp"]
