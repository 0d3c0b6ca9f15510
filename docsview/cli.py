"""Command-line front door for docsview.

Parses CLI options, connects to the document server, navigates to the
requested path and prints breadcrumbs, sidebar and content. Optional flags
run one store action (search, create, delete, upload, save) first.
"""

from __future__ import annotations

import argparse
import asyncio
import mimetypes
import sys
from pathlib import Path

import httpx

from . import config
from .logging import get_logger, setup_logging
from .paths import encode_fragment, is_document, normalize_path
from .render.terminal import render_screen
from .runtime.app import DocsApp
from .runtime.navigation import ConfirmCallback
from .store.auth import TokenStore
from .store.client import DocumentStoreClient
from .store.interfaces import UploadFile
from .ui_theme import available_theme_names, resolve_theme

PUT_REQUIRES_PAGE = "Only pages (.md) can be replaced."

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse and edit a Markdown document store from the terminal."
    )
    parser.add_argument("path", nargs="?", default="", help="Store path or #fragment. Defaults to the root.")
    parser.add_argument("--server", default=None, help="Server base URL (default: config or $DOCSVIEW_SERVER).")
    parser.add_argument("--theme", default=None, help=f"UI theme name ({', '.join(available_theme_names())}).")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--html", action="store_true", help="Print rendered HTML instead of Markdown source.")
    parser.add_argument("--yes", action="store_true", help="Answer every confirmation prompt with yes.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...).")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file.")

    auth = parser.add_mutually_exclusive_group()
    auth.add_argument("--login", metavar="TOKEN", help="Store an access token before running.")
    auth.add_argument("--logout", action="store_true", help="Forget the stored access token.")

    action = parser.add_mutually_exclusive_group()
    action.add_argument("--search", metavar="QUERY", help="Search the store instead of showing a path.")
    action.add_argument("--new-page", metavar="NAME", help="Create an empty page (must end with .md).")
    action.add_argument("--new-dir", metavar="NAME", help="Create a subdirectory.")
    action.add_argument("--delete", action="store_true", help="Delete the page or (empty) directory at PATH.")
    action.add_argument("--upload", metavar="FILE", nargs="+", help="Upload files into the directory at PATH.")
    action.add_argument("--put", metavar="FILE", help="Replace the page at PATH with FILE's content.")
    return parser


def _make_confirm(assume_yes: bool) -> ConfirmCallback:
    async def confirm(prompt: str) -> bool:
        if assume_yes:
            return True
        if not sys.stdin.isatty():
            return False
        answer = await asyncio.to_thread(input, f"{prompt} [y/N] ")
        return answer.strip().lower() in {"y", "yes"}

    return confirm


def _alert(message: str) -> None:
    sys.stderr.write(f"{message}\n")


def _read_uploads(paths: list[str]) -> list[UploadFile]:
    uploads: list[UploadFile] = []
    for raw in paths:
        source = Path(raw)
        if not source.is_file():
            raise SystemExit(f"File not found: {source}")
        content_type = mimetypes.guess_type(source.name)[0] or "application/octet-stream"
        uploads.append(UploadFile(name=source.name, content=source.read_bytes(), content_type=content_type))
    return uploads


async def _run_action(app: DocsApp, args: argparse.Namespace) -> bool:
    if args.search is not None:
        await app.search(args.search)
        return True
    if args.new_page is not None:
        return await app.create_page(args.new_page)
    if args.new_dir is not None:
        return await app.create_directory(args.new_dir)
    if args.delete:
        if is_document(app.path):
            return await app.delete_page()
        return await app.delete_directory()
    if args.upload:
        return await app.upload(_read_uploads(args.upload))
    if args.put is not None:
        source = Path(args.put)
        if not source.is_file():
            raise SystemExit(f"File not found: {source}")
        if not is_document(app.path):
            _alert(PUT_REQUIRES_PAGE)
            return False
        if not await app.edit():
            return False
        app.update_buffer(source.read_text(encoding="utf-8"))
        return await app.save()
    return True


async def run(args: argparse.Namespace, transport: httpx.AsyncBaseTransport | None = None) -> int:
    """Drive one CLI invocation; returns the process exit status."""
    server = args.server or config.load_server_url()
    tokens = TokenStore()
    if args.logout:
        tokens.logout()
    if args.login is not None and not tokens.login(args.login):
        raise SystemExit("Access token must not be empty.")
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color or not sys.stdout.isatty())

    async with DocumentStoreClient(server, tokens, transport=transport) as client:
        app = DocsApp(client, confirm=_make_confirm(args.yes), alert=_alert)
        try:
            fragment = args.path if args.path.startswith("#") else encode_fragment(normalize_path(args.path))
            await app.start(fragment)
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc
        ok = await _run_action(app, args)
        sys.stdout.write(
            render_screen(app.breadcrumbs(), app.state.sidebar, app.state.view, app.path, theme, html=args.html)
        )
    logger.debug("finished at %s (ok=%s)", app.fragment, ok)
    return 0 if ok else 1


def main(argv: list[str] | None = None, transport: httpx.AsyncBaseTransport | None = None) -> None:
    """Parse arguments, configure logging and run the async client.

    ``transport`` is primarily for tests; it replaces the network transport of
    the HTTP client.
    """
    args = _build_parser().parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file, console=args.log_file is None)
    status = asyncio.run(run(args, transport))
    if status:
        raise SystemExit(status)
