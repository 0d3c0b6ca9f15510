"""Plain/ANSI text rendering of breadcrumbs, sidebar and content views."""

from __future__ import annotations

from ..tree_model.rendering import build_sidebar_rows, format_sidebar_row
from ..tree_pane.sync import SidebarContent, SidebarError
from ..runtime.dispatch import DirectoryView, DocumentView, EditorView, ErrorView, SearchView, View
from ..ui_theme import DEFAULT_THEME, UITheme

ACTION_LABELS = {
    "edit": "Edit Page",
    "delete": "Delete Page",
    "new_page": "New Page",
    "new_directory": "New Directory",
    "delete_directory": "Delete Directory",
}


def render_breadcrumbs(crumbs: list[tuple[str, str]], theme: UITheme = DEFAULT_THEME) -> str:
    separator = f" {theme.breadcrumb_separator}>{theme.reset} "
    return separator.join(f"{theme.breadcrumb}{label}{theme.reset}" for label, _path in crumbs)


def render_sidebar(content: SidebarContent, current_path: str, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Return sidebar lines for a mounted tree or error placeholder."""
    if content is None:
        return []
    if isinstance(content, SidebarError):
        return [f"{theme.tree_error}{content.message}{theme.reset}"]
    return [format_sidebar_row(row, theme) for row in build_sidebar_rows(content, current_path)]


def _actions_line(actions: tuple[str, ...], disabled: frozenset[str], theme: UITheme) -> str:
    labels = []
    for action in actions:
        label = ACTION_LABELS.get(action, action)
        if action in disabled:
            labels.append(f"{theme.dim}[{label}]{theme.reset}")
        else:
            labels.append(f"{theme.action}[{label}]{theme.reset}")
    return " ".join(labels)


def render_view(view: View | None, theme: UITheme = DEFAULT_THEME, *, html: bool = False) -> list[str]:
    """Return content-area lines; documents show Markdown source unless ``html``."""
    if view is None:
        return []
    if isinstance(view, ErrorView):
        return [f"{theme.tree_error}Error: {view.message}{theme.reset}"]
    if isinstance(view, DocumentView):
        body = view.html if html else view.source
        return [*body.splitlines(), "", _actions_line(view.actions, frozenset(), theme)]
    if isinstance(view, EditorView):
        state = "modified" if view.dirty else "unchanged"
        return [f"{theme.heading}Editing {view.path} ({state}){theme.reset}", *view.buffer.splitlines()]
    if isinstance(view, DirectoryView):
        disabled = frozenset() if view.can_delete else frozenset({"delete_directory"})
        lines = [view.hint, _actions_line(view.actions, disabled, theme), "", f"{theme.heading}Files{theme.reset}"]
        if not view.uploads:
            lines.append(f"{theme.dim}No files found.{theme.reset}")
        for upload in view.uploads:
            lines.append(f"  {upload.name}  {theme.dim}{upload.url}{theme.reset}")
        return lines
    if isinstance(view, SearchView):
        lines = [f"{theme.heading}Search: {view.query}{theme.reset}"]
        if not view.results:
            lines.append(f"{theme.dim}No matches.{theme.reset}")
        for result in view.results:
            lines.append(f"  {result.name}  {theme.dim}{result.path}{theme.reset}")
        return lines
    raise TypeError(f"unsupported view: {type(view).__name__}")


def render_screen(
    crumbs: list[tuple[str, str]],
    sidebar: SidebarContent,
    view: View | None,
    current_path: str,
    theme: UITheme = DEFAULT_THEME,
    *,
    html: bool = False,
) -> str:
    """Stack breadcrumbs, sidebar and view into one printable block."""
    divider = f"{theme.divider}{'-' * 40}{theme.reset}"
    lines = [render_breadcrumbs(crumbs, theme), divider]
    lines.extend(render_sidebar(sidebar, current_path, theme))
    lines.append(divider)
    lines.extend(render_view(view, theme, html=html))
    return "\n".join(lines) + "\n"


__all__ = ["render_breadcrumbs", "render_screen", "render_sidebar", "render_view"]
