"""nvm-global CLI: pin one Node.js version machine-wide from a shared nvm.

    nvm-global [VERSION] [--config PATH] [--no-corepack] [--verbose]

VERSION may be partial (`24`) or prefixed (`v24.3.0`); it is prompted for when
omitted. Exit codes: 0 success, 1 any handled failure, 130 interrupted prompt.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from nvm_global.config import load_settings
from nvm_global.core import RunContext, configure_global_node
from nvm_global.errors import NvmGlobalError
from nvm_global.logging import get_logger, set_verbose
from nvm_global.types import VerifyReport

app = typer.Typer(
    add_completion=False,
    help="Configure a shared, system-wide Node.js from a shared nvm installation",
)
console = Console()
err_console = Console(stderr=True)
log = get_logger(__name__)


def _fail(exc: NvmGlobalError) -> NoReturn:
    log.debug("run failed", exc_info=exc)
    lines = [f"❌ {exc.message}"] + ([exc.hint] if exc.hint else [])
    for line in lines:
        err_console.print(line, markup=False, highlight=False, soft_wrap=True)
    raise typer.Exit(code=1)


def _print_report(report: VerifyReport) -> None:
    table = Table(title="✔️  Verifying", show_header=False)
    table.add_column("What", style="cyan")
    table.add_column("Value")
    table.add_row("node", report.node_version)
    if report.npm_version is not None:
        table.add_row("npm", report.npm_version)
    table.add_row("path", str(report.node_path))
    console.print(table)


@app.command()
def main(
    version: str | None = typer.Argument(
        None, help="Node version to pin, e.g. 24 or v24.3.0 (prompted when omitted)"
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="JSON config file (default: $NVM_GLOBAL_CONFIG or /etc/nvm-global.json)",
    ),
    no_corepack: bool = typer.Option(
        False, "--no-corepack", help="Skip the best-effort `corepack enable` step"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log manager calls as JSON to stderr"
    ),
) -> None:
    set_verbose(verbose)
    try:
        settings = load_settings(config)
        if no_corepack:
            settings = settings.model_copy(update={"enable_corepack": False})
        result = configure_global_node(RunContext(settings=settings, spec=version))
    except NvmGlobalError as e:
        _fail(e)
    except KeyboardInterrupt:
        err_console.print("")
        raise typer.Exit(code=130)

    if result.report is not None:
        _print_report(result.report)


if __name__ == "__main__":
    app()
