"""
User trigger input: a single pressed / not-pressed signal read by polling.
"""

from tinyml_eval.trigger.polling import (
    ImmediateTrigger,
    KeyboardTrigger,
    TriggerInput,
    create_trigger,
    wait_for_trigger,
)

__all__ = [
    "ImmediateTrigger",
    "KeyboardTrigger",
    "TriggerInput",
    "create_trigger",
    "wait_for_trigger",
]
