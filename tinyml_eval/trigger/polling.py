"""
Polled trigger wait with debounce.

wait_for_trigger() spins on trigger.is_pressed(), redrawing a prompt on the
display each poll, then sleeps for the debounce window so contact bounce
right after the press is never seen as a second press.
"""

from __future__ import annotations

import select
import sys
import time
from typing import Callable, Protocol, TextIO, runtime_checkable

from tinyml_eval.core.exceptions import ConfigurationError
from tinyml_eval.eval_logging import get_logger
from tinyml_eval.render.display import DisplayDriver

logger = get_logger(__name__)

DEFAULT_DEBOUNCE_MS = 200
DEFAULT_POLL_INTERVAL_MS = 10

PROMPT_LINES = (("Press A", 30, 15), ("to infer", 28, 35))


@runtime_checkable
class TriggerInput(Protocol):
    def is_pressed(self) -> bool: ...


class ImmediateTrigger:
    """Always pressed; for headless and CI runs."""

    def is_pressed(self) -> bool:
        return True


class KeyboardTrigger:
    """Pressed once a line is waiting on the stream (Enter on a terminal). POSIX select()."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdin

    def is_pressed(self) -> bool:
        ready, _, _ = select.select([self.stream], [], [], 0)
        if not ready:
            return False
        self.stream.readline()
        return True


def create_trigger(kind: str) -> TriggerInput:
    if kind == "immediate":
        return ImmediateTrigger()
    if kind == "keyboard":
        return KeyboardTrigger()
    raise ConfigurationError(f"unknown trigger {kind!r}")


def _draw_prompt(display: DisplayDriver) -> None:
    for text, x, y in PROMPT_LINES:
        display.draw_text(x, y, text)
    display.flush()


def wait_for_trigger(
    trigger: TriggerInput,
    display: DisplayDriver | None = None,
    *,
    debounce_ms: int = DEFAULT_DEBOUNCE_MS,
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Block until the trigger reads pressed, then apply the debounce delay.

    Returns the number of polls that read "not pressed".
    """
    polls = 0
    while not trigger.is_pressed():
        if display is not None:
            _draw_prompt(display)
        polls += 1
        sleep(poll_interval_ms / 1000.0)
    sleep(debounce_ms / 1000.0)
    logger.info("trigger_detected", polls=polls, debounce_ms=debounce_ms)
    return polls
