"""CLI entry-point for lint_docs.

Usage:
    python -m lint_docs build [--source FILE] [--out FILE] [--title TEXT]
    python -m lint_docs serve [--host HOST] [--port N]
    python -m lint_docs lint <path> [<path> ...] [--json]
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from lint_docs import __version__
from lint_docs.build import build_page
from lint_docs.core.config import PageConfig
from lint_docs.errors import LintDocsError
from lint_docs.pages.highlight import resolve_highlighter
from lint_docs.rules.linter import lint_paths
from lint_docs.utils.exit_codes import ExitCode
from lint_docs.utils.json_norm import stable_json_dumps

logger = logging.getLogger(__name__)


def _reject_unsafe_out_path(candidate: Path, *, flag: str) -> Path | None:
    """Reject absolute paths and path traversal; return *candidate* if safe."""
    if candidate.is_absolute():
        print(f"error: {flag} must be a relative path", file=sys.stderr)
        return None

    if any(part in ("..", "") for part in candidate.parts):
        print(f"error: {flag} must not contain '..' path traversal", file=sys.stderr)
        return None

    return candidate


# ── build ────────────────────────────────────────────────────────────


def _cmd_build(args: argparse.Namespace) -> int:
    defaults = PageConfig()
    out = _reject_unsafe_out_path(Path(args.out), flag="--out")
    if out is None:
        return ExitCode.ERROR

    cfg = PageConfig(
        source=Path(args.source) if args.source else defaults.source,
        out_path=out,
        title=args.title or defaults.title,
        highlighter=args.highlighter,
    )

    try:
        highlighter = resolve_highlighter(cfg.highlighter)
        written = asyncio.run(
            build_page(cfg.source, cfg.out_path, highlighter, title=cfg.title)
        )
    except FileNotFoundError:
        print(f"error: page source not found: {cfg.source.as_posix()}", file=sys.stderr)
        return ExitCode.ERROR
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read page source {cfg.source.as_posix()}: {exc}", file=sys.stderr)
        return ExitCode.ERROR
    except LintDocsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    print(f"Wrote page: {written.as_posix()}")
    return ExitCode.SUCCESS


# ── serve ────────────────────────────────────────────────────────────


def _cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from lint_docs.web_api.config import settings

    uvicorn.run(
        "lint_docs.web_api.main:app",
        host=args.host or settings.HOST,
        port=args.port or settings.PORT,
    )
    return ExitCode.SUCCESS


# ── lint ─────────────────────────────────────────────────────────────


def _cmd_lint(args: argparse.Namespace) -> int:
    try:
        diagnostics = lint_paths([Path(p) for p in args.paths])
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.ERROR
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read source: {exc}", file=sys.stderr)
        return ExitCode.ERROR
    except SyntaxError as exc:
        print(f"error: cannot parse {exc.filename}:{exc.lineno}: {exc.msg}", file=sys.stderr)
        return ExitCode.ERROR

    if args.json:
        sys.stdout.write(
            stable_json_dumps(
                {
                    "count": len(diagnostics),
                    "diagnostics": [d.to_dict() for d in diagnostics],
                }
            )
        )
    else:
        for d in diagnostics:
            print(f"{d.path}:{d.line}:{d.col + 1}: {d.code} {d.message}")
        print(f"Found {len(diagnostics)} problem(s)")

    return ExitCode.VIOLATION if diagnostics else ExitCode.SUCCESS


# ── argument parsing ─────────────────────────────────────────────────


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lint_docs",
        description="Build and serve the lint documentation page; run the documented rules.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command")

    defaults = PageConfig()

    build = sub.add_parser("build", help="Render the page to a static HTML file.")
    build.add_argument("--source", default=None, help=f"Markdown source (default: {defaults.source.as_posix()}).")
    build.add_argument("--out", default=defaults.out_path.as_posix(), help="Relative output path.")
    build.add_argument("--title", default=None, help="Document title.")
    build.add_argument("--highlighter", default=defaults.highlighter, help="Highlighter name.")
    build.set_defaults(func=_cmd_build)

    serve = sub.add_parser("serve", help="Serve the page over HTTP.")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.set_defaults(func=_cmd_serve)

    lint = sub.add_parser("lint", help="Run the lint rules over Python files.")
    lint.add_argument("paths", nargs="+", help="Files or directories to lint.")
    lint.add_argument("--json", action="store_true", help="Emit JSON output.")
    lint.set_defaults(func=_cmd_lint)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR

    return int(args.func(args))


if __name__ == "__main__":
    sys.exit(main())
