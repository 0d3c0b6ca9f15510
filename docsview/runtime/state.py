"""Single owned application state shared by the runtime components."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..paths import PathModel, encode_fragment
from ..tree_pane.sync import SidebarContent
from .dispatch import View


@dataclass
class AppState:
    """Current path plus the most recently mounted sidebar and view.

    ``paths`` is written only by navigation; ``sidebar`` only by the sidebar
    synchronizer; ``view`` only by the application's view updates.
    """

    paths: PathModel = field(default_factory=PathModel)
    sidebar: SidebarContent = None
    view: View | None = None
    logged_in: bool = False

    @property
    def current_path(self) -> str:
        return self.paths.path

    @property
    def fragment(self) -> str:
        return encode_fragment(self.paths.path)
