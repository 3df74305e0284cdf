"""Commands that work without the internet: test, help, dice and alarm."""

from __future__ import annotations

import enum
import random
import re
import threading
from collections.abc import Iterable
from datetime import timedelta

from zinnia.command import Command, CommandResult, Speak
from zinnia.numwords import replace_numbers_in_text, text_to_digits


class TestCommand(Command):
    """Echoes the phrase back, to check that commands are working."""

    __test__ = False

    name = "Test Command"
    description = "This command is purely to test if commands work. It doesn't do anything productive."
    help_text = (
        'Simply say a phrase containing the words "Test Command" and you will get a response.'
    )
    uses_internet = False

    def recognize(self, text: str) -> bool:
        return "test command" in text

    def effect(self, text: str, speak: Speak) -> CommandResult:
        speak("Test Command recognized. What you said was: " + text)
        return CommandResult.DONE


class _HelpState(enum.Enum):
    ASK_FOR_COMMAND = "ask"
    GIVE_HELP = "give"


class HelpCommand(Command):
    """Asks which command the user needs help with, then describes it."""

    name = "Help Command"
    description = "This command gives help information for any of the available commands."
    help_text = 'Say "Help" and then supply the name of a command when prompted.'
    uses_internet = False

    def __init__(self, commands: Iterable[Command]) -> None:
        self._entries = [
            (command.name.lower(), command.help_text, command.uses_internet)
            for command in commands
        ]
        self._state = _HelpState.ASK_FOR_COMMAND

    def recognize(self, text: str) -> bool:
        return "help" in text

    def effect(self, text: str, speak: Speak) -> CommandResult:
        if self._state is _HelpState.ASK_FOR_COMMAND:
            speak("Which command would you like help with?")
            self._state = _HelpState.GIVE_HELP
            return CommandResult.CONTINUE
        for name, help_text, needs_net in self._entries:
            if name in text:
                does_it = "does" if needs_net else "does not"
                speak(f"{help_text} This command {does_it} require the internet.")
                return CommandResult.DONE
        speak(f"I couldn't find a command named {text}, please try again.")
        self._state = _HelpState.ASK_FOR_COMMAND
        return CommandResult.DONE


class DiceCommand(Command):
    """Rolls dice described as "number D number"."""

    name = "Dice Command"
    description = "This command rolls dice."
    help_text = 'Say "Roll" followed by a type and number of dice in the number D number format.'
    uses_internet = False

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def recognize(self, text: str) -> bool:
        return "roll " in text or "role " in text

    def effect(self, text: str, speak: Speak) -> CommandResult:
        keyword = "roll" if "roll" in text else "role"
        _, _, dice = text.partition(keyword)
        if "d" not in dice:
            speak(
                'Make sure to say "Roll" followed by a type and number of dice '
                "in the number D number format."
            )
            return CommandResult.DONE
        str_num, _, str_size = dice.partition("d")
        try:
            count = int(text_to_digits(str_num))
        except ValueError:
            speak("I couldn't make out the first number. Please try again.")
            return CommandResult.DONE
        try:
            size = int(text_to_digits(str_size))
        except ValueError:
            speak("I couldn't make out the second number. Please try again.")
            return CommandResult.DONE
        if size == 0:
            raise ValueError("dice must have at least one side")
        rolls = [self._rng.randint(1, size) for _ in range(count)]
        answer = "I rolled: "
        if count == 1:
            answer += f"{rolls[0]}."
        elif rolls:
            answer += "".join(f"{roll}, " for roll in rolls[:-1]) + f"and {rolls[-1]}."
        speak(answer)
        return CommandResult.DONE


_UNSIGNED = re.compile(r"\+?[0-9]+")
_UNIT_MILLIS = (("second", 1_000), ("minute", 60_000), ("hour", 3_600_000))


def timer_duration(text: str) -> timedelta:
    """Add up every "<number> second/minute/hour" pair in a phrase."""
    words = replace_numbers_in_text(text).split()
    millis = 0
    for amount, unit in zip(words, words[1:]):
        for marker, factor in _UNIT_MILLIS:
            if marker in unit:
                if _UNSIGNED.fullmatch(amount):
                    millis += int(amount) * factor
                break
    return timedelta(milliseconds=millis)


class AlarmCommand(Command):
    """Sets a timer that speaks when it runs out."""

    name = "Alarm"
    description = (
        "This command allows you to set an alarm for a specific time or after a duration."
    )
    help_text = 'Use "Alarm" for a set time or "Timer" for a set duration.'
    uses_internet = False

    def recognize(self, text: str) -> bool:
        return "timer" in text or "alarm" in text

    def effect(self, text: str, speak: Speak) -> CommandResult:
        if "timer" in text:
            duration = timer_duration(text)
            speak("Timer set.")
            timer = threading.Timer(
                duration.total_seconds(), speak, args=("Your timer has run out.",)
            )
            timer.daemon = True
            timer.start()
        return CommandResult.DONE