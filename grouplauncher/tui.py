#===============================================================================
#  Group_Launcher | tui.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Full-screen terminal chooser (prompt_toolkit):
#    - Title line
#    - Group list (left) with the highlighted group in reverse colors
#    - Applications of the highlighted group (right)
#    - Key hints footer
#  Key presses are translated into selection events; the pure state machine
#  in selection.py decides what happens.
#===============================================================================

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, List, Optional, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.input import Input
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window, WindowAlign
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame

from .constants import (
    APPS_TITLE,
    EMPTY_APPS_TEXT,
    EMPTY_GROUPS_TEXT,
    FOOTER_TEXT,
    GROUPS_TITLE,
    ITEM_MARKER,
    PROMPT_TITLE,
    TUI_STYLE,
)
from .errors import TerminalError
from .launcher import describe_command
from .models import Configuration
from .selection import KEY_BINDINGS, KeyEvent, SelectionState, initial_state, transition

logger = logging.getLogger(__name__)

StyleAndText = Tuple[str, str]


class GroupChooser:
    """Owns the prompt_toolkit Application and the current SelectionState."""

    def __init__(
        self,
        config: Configuration,
        input: Optional[Input] = None,
        output: Optional[Output] = None,
    ):
        self.config = config
        self.state: SelectionState = initial_state(len(config.groups))
        self.app: Application[Optional[int]] = Application(
            layout=self._build_layout(),
            key_bindings=self._build_key_bindings(),
            style=Style.from_dict(TUI_STYLE),
            full_screen=True,
            mouse_support=False,
            input=input,
            output=output,
        )

    # ----------------------------
    # Input
    # ----------------------------
    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        for key, key_event in KEY_BINDINGS.items():
            kb.add(key, eager=True)(self._handler_for(key_event))
        return kb

    def _handler_for(self, key_event: KeyEvent):
        def handler(event: KeyPressEvent) -> None:
            self.handle(key_event)
        return handler

    def handle(self, key_event: KeyEvent) -> None:
        previous = self.state
        self.state = transition(previous, key_event)
        logger.debug("%s -> %s", key_event.value, self.state)
        if self.state.finished and not previous.finished:
            self.app.exit(result=self.state.confirmed_index)
        else:
            self.app.invalidate()

    # ----------------------------
    # Rendering
    # ----------------------------
    def _groups_fragments(self) -> List[StyleAndText]:
        if not self.config.groups:
            return [("class:empty", f" {EMPTY_GROUPS_TEXT}")]

        fragments: List[StyleAndText] = []
        for i, group in enumerate(self.config.groups):
            if i == self.state.selected_group_index:
                # keeps the highlighted row scrolled into view
                fragments.append(("[SetCursorPosition]", ""))
                fragments.append(("class:group.selected", f"  {ITEM_MARKER} {group.name} "))
            else:
                fragments.append(("class:group", f"  {ITEM_MARKER} {group.name} "))
            fragments.append(("", "\n"))
        return fragments

    def _apps_fragments(self) -> List[StyleAndText]:
        if not self.config.groups:
            return []

        group = self.config.groups[self.state.selected_group_index]
        if not group.apps:
            return [("class:empty", f" {EMPTY_APPS_TEXT}")]

        fragments: List[StyleAndText] = []
        for app in group.apps:
            fragments.append(("class:app.name", f" {app.name}\n"))
            fragments.append(("class:app.command", f"   $ {describe_command(app)}\n"))
        return fragments

    def _build_layout(self) -> Layout:
        title = Window(
            FormattedTextControl([("class:title", PROMPT_TITLE)]),
            height=1,
            align=WindowAlign.CENTER,
        )
        groups = Frame(
            Window(FormattedTextControl(self._groups_fragments, focusable=True, show_cursor=False)),
            title=GROUPS_TITLE,
        )
        apps = Frame(
            Window(FormattedTextControl(self._apps_fragments), wrap_lines=True),
            title=APPS_TITLE,
        )
        footer = Window(
            FormattedTextControl([("class:footer", FOOTER_TEXT)]),
            height=1,
            align=WindowAlign.CENTER,
        )
        return Layout(HSplit([title, VSplit([groups, apps]), footer], padding=1))


@contextmanager
def terminal_mode(chooser: GroupChooser) -> Iterator[GroupChooser]:
    """Scope in which the chooser owns the terminal.

    prompt_toolkit enters raw mode and the alternate screen while running;
    whatever way the block is left, the normal screen and the cursor are
    restored here before control returns to the caller.
    """
    output = chooser.app.output
    try:
        yield chooser
    except TerminalError:
        raise
    except Exception as e:
        logger.exception("Terminal UI failed")
        raise TerminalError(f"terminal UI failed: {e}") from e
    finally:
        output.quit_alternate_screen()
        output.show_cursor()
        output.flush()


def select_group(
    config: Configuration,
    input: Optional[Input] = None,
    output: Optional[Output] = None,
) -> Optional[int]:
    """Run the chooser until the user confirms a group or cancels.

    Returns the confirmed group index, or None when cancelled.
    """
    if input is None and not sys.stdin.isatty():
        raise TerminalError("standard input is not a terminal")

    try:
        chooser = GroupChooser(config, input=input, output=output)
    except Exception as e:
        raise TerminalError(f"cannot initialise terminal: {e}") from e

    with terminal_mode(chooser):
        return chooser.app.run()
