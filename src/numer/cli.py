"""Command line interface for the numer project scaffolder."""

from __future__ import annotations

import argparse
import logging
import subprocess
from pathlib import Path
from typing import Mapping, Sequence

from . import __version__
from .config import ScaffolderConfig
from .errors import PackageManagerError, ScaffoldError
from .prompts import PromptFlow
from .registry import TemplateRegistry
from .scaffold import ProjectScaffolder, Runner, render_summary
from .schema import FlowOutcome
from .terminal import RichTerminal, Terminal

LOGGER = logging.getLogger(__name__)

_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numer", description="Create a new project from a template"
    )
    parser.add_argument(
        "--cwd",
        type=Path,
        default=None,
        help="Directory the project name is resolved against (defaults to the current directory)",
    )
    parser.add_argument(
        "--templates-dir",
        type=Path,
        default=None,
        help="Directory holding one sub-directory per template id",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or every filesystem operation (-vv)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbosity: int) -> None:
    level = _LOG_LEVELS[min(verbosity, len(_LOG_LEVELS) - 1)]
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(
    argv: Sequence[str] | None = None,
    *,
    terminal: Terminal | None = None,
    environ: Mapping[str, str] | None = None,
    runner: Runner = subprocess.run,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    config = ScaffolderConfig.from_environ(environ, cwd=args.cwd, templates_dir=args.templates_dir)
    terminal = terminal or RichTerminal()
    terminal.intro(f"Numer v{__version__}")

    try:
        registry = TemplateRegistry()
        result = PromptFlow(terminal, config, registry=registry).run()
        if result.outcome is FlowOutcome.CANCELLED:
            terminal.cancel("Cancelled")
            return 0
        if result.outcome is FlowOutcome.UNAVAILABLE:
            return 0

        scaffolder = ProjectScaffolder(config, registry=registry, terminal=terminal, runner=runner)
        root = scaffolder.create(result.request)
    except PackageManagerError as exc:
        terminal.error(str(exc))
        return exc.exit_code
    except ScaffoldError as exc:
        LOGGER.error("scaffolding failed: %s", exc)
        terminal.error(str(exc))
        return exc.exit_code

    terminal.outro(render_summary(scaffolder.next_steps(result.request, root)))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
