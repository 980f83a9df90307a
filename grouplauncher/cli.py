#===============================================================================
#  Group_Launcher | cli.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Command line entry point: load config -> choose a group -> launch it.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import logging
import subprocess
import sys
from pathlib import Path
from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config_loader import dump_config, example_config, load_config
from .constants import (
    APP_TITLE,
    EXIT_CONFIG_ERROR,
    EXIT_LAUNCH_ERROR,
    EXIT_OK,
    EXIT_TERMINAL_ERROR,
)
from .errors import ConfigError, ConfigNotFoundError, LaunchError, TerminalError
from .launcher import LaunchReport, Spawner, describe_command, launch_group
from .logging_setup import console_logging_suspended, setup_logging
from .models import Configuration, Group
from .tui import select_group

logger = logging.getLogger(__name__)

Chooser = Callable[[Configuration], Optional[int]]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="group-launcher",
        description=f"{APP_TITLE}: pick a group of applications and start them all.",
    )
    parser.add_argument("-c", "--config", type=Path, help="use this configuration file (no search)")
    parser.add_argument("--list", action="store_true", help="print the configured groups and exit")
    parser.add_argument("--dry-run", action="store_true", help="show what would be started instead of starting it")
    parser.add_argument("--example", action="store_true", help="print an example configuration and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


# ----------------------------
# Output helpers
# ----------------------------
def print_groups(config: Configuration, console: Console) -> None:
    table = Table(title=f"{APP_TITLE} ({escape(str(config.source or 'in memory'))})")
    table.add_column("Group", style="cyan bold")
    table.add_column("Application")
    table.add_column("Command", style="dim")
    for group in config.groups:
        if not group.apps:
            table.add_row(escape(group.name), "-", "-")
            continue
        for i, app in enumerate(group.apps):
            table.add_row(escape(group.name) if i == 0 else "", escape(app.name), escape(describe_command(app)))
    console.print(table)


def print_dry_run(group: Group, console: Console) -> None:
    console.print(f"[bold]Would launch group[/bold] [cyan]{escape(group.name)}[/cyan]:")
    for app in group.apps:
        console.print(f"  {escape(app.name)}: {escape(describe_command(app))}", highlight=False)


def print_launch_report(report: LaunchReport, console: Console) -> None:
    if not report.attempted:
        console.print(f"Group [cyan]{escape(report.group_name)}[/cyan] has nothing to launch.")
        return
    if report.ok:
        console.print(f"Started {len(report.launched)} application(s) from [cyan]{escape(report.group_name)}[/cyan].")
        return

    table = Table(title=f"Launch problems in {escape(report.group_name)}")
    table.add_column("Application", style="bold")
    table.add_column("Result")
    for name in report.launched:
        table.add_row(escape(name), "[green]started[/green]")
    for failure in report.failures:
        table.add_row(escape(failure.app_name), f"[red]failed:[/red] {escape(failure.reason)}")
    console.print(table)


# ----------------------------
# Main flow
# ----------------------------
def run(
    argv: Optional[List[str]] = None,
    chooser: Chooser = select_group,
    spawner: Spawner = subprocess.Popen,
    console: Optional[Console] = None,
    err_console: Optional[Console] = None,
) -> int:
    """Run the launcher and return the process exit code."""
    args = build_parser().parse_args(argv)
    console = console or Console()
    err_console = err_console or Console(stderr=True)

    if args.example:
        console.print_json(dump_config(example_config()))
        return EXIT_OK

    setup_logging(verbose=args.verbose)

    try:
        config = load_config(args.config)
    except ConfigNotFoundError as e:
        logger.debug("Config search failed: %s", e.searched)
        err_console.print("[red]Configuration not found.[/red] Looked in:")
        for p in e.searched:
            err_console.print(f"  {escape(str(p))}", highlight=False)
        err_console.print("Run with --example to see the expected format.")
        return EXIT_CONFIG_ERROR
    except ConfigError as e:
        err_console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}", highlight=False)
        return EXIT_CONFIG_ERROR

    if args.list:
        print_groups(config, console)
        return EXIT_OK

    try:
        with console_logging_suspended():
            index = chooser(config)
    except TerminalError as e:
        err_console.print(f"[red]Terminal error:[/red] {escape(str(e))}", highlight=False)
        return EXIT_TERMINAL_ERROR

    if index is None:
        logger.info("Selection cancelled")
        return EXIT_OK

    group = config.groups[index]
    if args.dry_run:
        print_dry_run(group, console)
        return EXIT_OK

    try:
        report = launch_group(group, spawner)
    except LaunchError as e:
        print_launch_report(e.report, err_console)
        # partial success still counts as a launch
        return EXIT_OK if e.report.launched else EXIT_LAUNCH_ERROR

    print_launch_report(report, console)
    return EXIT_OK


def main() -> None:
    try:
        code = run()
    except KeyboardInterrupt:
        code = EXIT_OK
    sys.exit(code)


if __name__ == "__main__":
    main()
