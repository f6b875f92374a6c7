# src/taskline/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.bootstrap import save_tasks
from ..cli.commands import CommandKind, registry as command_registry
from ..cli.render import render_error, render_outcome, welcome_message
from ..core.errors import TaskCommandError
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "


def run_console_loop(state: AppState) -> None:
    """
    Read commands from stdin until `bye`, EOF or Ctrl+C.

    A malformed command prints an error block and the loop keeps going.
    """
    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    app_name = str(getattr(state.settings, "app_name", "taskline"))
    print(welcome_message(app_name))

    while True:
        try:
            user_input = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        try:
            outcome = command_registry.dispatch(user_input, state.tasks)
        except TaskCommandError as e:
            logger.debug("Command rejected: %s (%s)", user_input, type(e).__name__)
            print(render_error(e))
            continue
        except Exception:
            logger.exception("Command handler crashed.")
            print("Internal error while handling a command.")
            continue

        print(render_outcome(outcome, state.tasks, date_format=state.date_format))

        if outcome.kind is CommandKind.EXIT:
            logger.info("Console exit command received.")
            break

        if outcome.kind.mutates:
            state.dirty = True
            save_tasks(state)

    logger.info("Console connector finished.")
