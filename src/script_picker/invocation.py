"""Build the invocation for the chosen script and hand it to the injector.

The injector is an external command (for example ``osascript`` driving
System Events, or ``tmux send-keys``) that types the text at the user's next
prompt. It runs detached after a short delay so this process can exit and
its screen can settle first; its result is never waited for.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import sys
from dataclasses import dataclass

from .catalog import describe_parameters
from .types import Script

logger = logging.getLogger(__name__)

PARAM_SPACE = " "


@dataclass(frozen=True)
class Invocation:
    """The text to type plus the script it came from."""

    script: Script
    text: str

    def summary(self) -> list[str]:
        """Lines shown on screen once the menu closes."""
        return [f"Script:   {self.script.name}.", *describe_parameters(self.script)]


def build_invocation(script: Script, prefix: str = "") -> Invocation:
    """File reference, plus a trailing space only when the script takes parameters."""
    text = f"{prefix}{script.file}"
    if script.takes_parameters:
        text += PARAM_SPACE
    return Invocation(script=script, text=text)


def injector_argv(template: str, text: str) -> list[str]:
    """Split an injector command template and substitute ``{text}``."""
    return [part.replace("{text}", text) for part in shlex.split(template)]


def dispatch_invocation(text: str, template: str, delay: float = 0.1) -> subprocess.Popen | None:
    """Start the injector in its own session and return without waiting.

    The delay runs in the child (``sleep`` before ``exec``), so the caller
    never blocks on it.

    Returns:
        The Popen handle, or None if the injector could not be started.
    """
    argv = injector_argv(template, text)
    if not argv:
        return None

    script = "import os, sys, time; time.sleep(float(sys.argv[1])); os.execvp(sys.argv[2], sys.argv[2:])"
    try:
        proc = subprocess.Popen(
            [sys.executable, "-c", script, str(delay), *argv],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        logger.debug("Could not start injector %s: %s", argv[0], e)
        return None

    logger.debug("Dispatched injector %s (pid %d) after %.2fs", argv[0], proc.pid, delay)
    return proc
