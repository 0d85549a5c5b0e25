"""Thin wrappers around external command execution.

Commands given as a single string run through the shell; ``run_program``
takes an argv list and runs it directly.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence

log = logging.getLogger(__name__)


def get_command_output(cmd: str) -> str:
    """Run *cmd* through the shell and return its stdout.

    Returns an empty string if the command could not be started.
    """
    try:
        proc = subprocess.run(
            cmd,
            shell=True,
            text=True,
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        log.warning("get_command_output: could not run %r: %s", cmd, exc)
        return ""
    log.debug("get_command_output(%r): rc=%d, %d bytes", cmd, proc.returncode, len(proc.stdout))
    return proc.stdout


def run_program(argv: Sequence[str], data: str = "") -> str:
    """Run *argv* without a shell, feed it *data* on stdin, and return its stdout."""
    try:
        proc = subprocess.run(
            list(argv),
            text=True,
            input=data,
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        log.warning("run_program: could not run %r: %s", list(argv), exc)
        return ""
    return proc.stdout


def _exit_code(command: str, caller: str, **kwargs) -> int | None:
    try:
        proc = subprocess.run(command, shell=True, check=False, **kwargs)
    except OSError as exc:
        log.error("%s: failed to run %r: %s", caller, command, exc)
        return None
    if proc.returncode < 0:
        log.warning("%s: %r killed by signal %d", caller, command, -proc.returncode)
        return None
    log.debug("%s: %r exited with %d", caller, command, proc.returncode)
    return proc.returncode


def run_interactively(command: str, caller: str) -> int | None:
    """Run *command* attached to the current terminal.

    Returns the exit code, or ``None`` if the command could not be started
    or was terminated by a signal. *caller* only labels log lines.
    """
    return _exit_code(command, caller)


def run_non_interactively(command: str, caller: str) -> int | None:
    """Like :func:`run_interactively`, with stdin and output detached."""
    return _exit_code(
        command,
        caller,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
