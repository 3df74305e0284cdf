"""Routing of recognised phrases to the command that handles them."""

from __future__ import annotations

from collections.abc import Iterable

from zinnia.basic_commands import AlarmCommand, DiceCommand, HelpCommand, TestCommand
from zinnia.command import Command, CommandResult, DispatchResult, Speak
from zinnia.web_commands import JokeCommand, WeatherCommand

DEFAULT_LOCATION = "Drums"
NOT_UNDERSTOOD = "I'm not sure what you're asking for. Please try again."


def default_commands() -> list[Command]:
    """All available commands, in order of priority, with help first."""
    commands: list[Command] = [
        TestCommand(),
        WeatherCommand(DEFAULT_LOCATION),
        JokeCommand(),
        DiceCommand(),
        AlarmCommand(),
    ]
    return [HelpCommand(commands), *commands]


class CommandDirector:
    """Sends each phrase to the first command that recognises it.

    A command that asks for more input receives the next phrase directly.
    """

    def __init__(self, speak: Speak, commands: Iterable[Command] | None = None) -> None:
        self._speak = speak
        self._commands = list(commands) if commands is not None else default_commands()
        self._pending: Command | None = None

    @property
    def commands(self) -> tuple[Command, ...]:
        return tuple(self._commands)

    def dispatch_command(self, text: str) -> DispatchResult:
        """Run the command that handles the phrase."""
        if self._pending is not None:
            result = self._pending.effect(text, self._speak)
            if result is CommandResult.DONE:
                self._pending = None
            return result.to_dispatch()
        for command in self._commands:
            if command.recognize(text):
                result = command.effect(text, self._speak)
                if result is CommandResult.CONTINUE:
                    self._pending = command
                return result.to_dispatch()
        self._speak(NOT_UNDERSTOOD)
        return DispatchResult.DONE