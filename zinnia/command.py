"""The interface shared by all voice commands."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Callable

Speak = Callable[[str], None]
"""A callable that queues a phrase to be spoken."""


class DispatchResult(enum.Enum):
    """Outcome of dispatching a phrase to the command set."""

    DONE = "done"
    CONTINUE = "continue"


class CommandResult(enum.Enum):
    """Outcome of running a command: finished, or awaiting more input."""

    DONE = "done"
    CONTINUE = "continue"

    def to_dispatch(self) -> DispatchResult:
        return DispatchResult.CONTINUE if self is CommandResult.CONTINUE else DispatchResult.DONE


class Command(ABC):
    """A spoken command: recognises phrases and acts on them."""

    name: str = ""
    description: str = ""
    help_text: str = ""
    uses_internet: bool = False

    @abstractmethod
    def recognize(self, text: str) -> bool:
        """Whether this command handles the phrase."""

    @abstractmethod
    def effect(self, text: str, speak: Speak) -> CommandResult:
        """Act on the phrase, speaking any reply."""