#===============================================================================
#  Group_Launcher | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Launches every application of a group as a detached process. Best effort:
#  a failed spawn is recorded and the remaining applications are still started.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import shlex
import subprocess
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from .errors import LaunchError
from .models import Application, Group

logger = logging.getLogger(__name__)

Spawner = Callable[..., Any]


@dataclass(frozen=True)
class LaunchFailure:
    app_name: str
    reason: str


@dataclass
class LaunchReport:
    group_name: str
    launched: List[str] = field(default_factory=list)
    failures: List[LaunchFailure] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.launched) + len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures


def shell_command_line(app: Application) -> str:
    """One command line for the shell: command as written, args quoted after it."""
    if sys.platform.startswith("win"):
        return " ".join([app.command, subprocess.list2cmdline(app.args)]).rstrip()
    return " ".join([app.command, *map(shlex.quote, app.args)])


def describe_command(app: Application) -> str:
    """Human readable command line (used for the detail pane, dry runs and logs)."""
    if app.use_shell:
        return shell_command_line(app)
    return shlex.join([app.command, *app.args])


def _detach_kwargs() -> Dict[str, Any]:
    # Null standard streams + own session so the child outlives the terminal
    kwargs: Dict[str, Any] = {
        "stdin": subprocess.DEVNULL,
        "stdout": subprocess.DEVNULL,
        "stderr": subprocess.DEVNULL,
        "close_fds": True,
    }
    if sys.platform.startswith("win"):
        kwargs["creationflags"] = subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
    else:
        kwargs["start_new_session"] = True
    return kwargs


def spawn_app(app: Application, spawner: Spawner = subprocess.Popen) -> None:
    """Start one application and forget about it.

    - use_shell=False: argv is [command, *args], no shell involved
    - use_shell=True : command and quoted args are joined into one line
                       and handed to the shell

    Raises OSError/ValueError when the process cannot be created. The child's
    exit status is never looked at.
    """
    if app.use_shell:
        spawner(shell_command_line(app), shell=True, **_detach_kwargs())
    else:
        spawner([app.command, *app.args], shell=False, **_detach_kwargs())


def launch_group(group: Group, spawner: Spawner = subprocess.Popen) -> LaunchReport:
    """Launch every application of a group in declared order.

    Returns the report when everything started; raises LaunchError carrying
    the same report when at least one spawn failed.
    """
    report = LaunchReport(group_name=group.name)
    logger.info("Launching group '%s' (%d app(s))", group.name, len(group.apps))

    for app in group.apps:
        try:
            spawn_app(app, spawner)
        except (OSError, ValueError) as e:
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            logger.warning("Failed to start '%s' (%s): %s", app.name, describe_command(app), reason)
            report.failures.append(LaunchFailure(app.name, reason))
            continue
        logger.info("Started '%s': %s", app.name, describe_command(app))
        report.launched.append(app.name)

    if report.failures:
        raise LaunchError(report)
    return report
