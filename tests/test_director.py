from zinnia.basic_commands import DiceCommand, HelpCommand, TestCommand
from zinnia.command import Command, CommandResult, DispatchResult
from zinnia.director import CommandDirector, default_commands
from zinnia.web_commands import WeatherCommand


class _Scripted(Command):
    name = "Scripted"
    help_text = "scripted help"

    def __init__(self, keyword, results):
        self.keyword = keyword
        self.results = list(results)
        self.seen = []

    def recognize(self, text):
        return self.keyword in text

    def effect(self, text, speak):
        self.seen.append(text)
        speak(f"{self.keyword}:{text}")
        return self.results.pop(0)


def test_default_commands_order():
    names = [command.name for command in default_commands()]
    assert names == ["Help Command", "Test Command", "Weather", "Joke", "Dice Command", "Alarm"]


def test_default_weather_location():
    weather = [c for c in default_commands() if isinstance(c, WeatherCommand)]
    assert weather[0].default_location == "Drums"


def test_default_director_uses_default_commands():
    director = CommandDirector(lambda s: None)
    assert isinstance(director.commands[0], HelpCommand)
    assert len(director.commands) == 6


def test_unrecognised_phrase():
    spoken = []
    director = CommandDirector(spoken.append, [])
    assert director.dispatch_command("make me a sandwich") is DispatchResult.DONE
    assert spoken == ["I'm not sure what you're asking for. Please try again."]


def test_first_matching_command_wins():
    spoken = []
    first = _Scripted("go", [CommandResult.DONE])
    second = _Scripted("go", [CommandResult.DONE])
    director = CommandDirector(spoken.append, [first, second])
    assert director.dispatch_command("go now") is DispatchResult.DONE
    assert first.seen == ["go now"]
    assert second.seen == []


def test_continuing_command_gets_next_phrase():
    spoken = []
    talker = _Scripted("ask", [CommandResult.CONTINUE, CommandResult.CONTINUE, CommandResult.DONE])
    other = _Scripted("other", [CommandResult.DONE])
    director = CommandDirector(spoken.append, [talker, other])
    assert director.dispatch_command("ask me") is DispatchResult.CONTINUE
    assert director.dispatch_command("other thing") is DispatchResult.CONTINUE
    assert director.dispatch_command("anything") is DispatchResult.DONE
    assert talker.seen == ["ask me", "other thing", "anything"]
    assert other.seen == []
    assert director.dispatch_command("other thing") is DispatchResult.DONE
    assert other.seen == ["other thing"]


def test_test_command_through_director():
    spoken = []
    director = CommandDirector(spoken.append, [TestCommand()])
    director.dispatch_command("this is a test command")
    assert spoken == ["Test Command recognized. What you said was: this is a test command"]


def test_help_flow_with_defaults():
    spoken = []
    director = CommandDirector(spoken.append)
    assert director.dispatch_command("help") is DispatchResult.CONTINUE
    assert spoken == ["Which command would you like help with?"]
    assert director.dispatch_command("dice command") is DispatchResult.DONE
    assert spoken[-1] == DiceCommand.help_text + " This command does not require the internet."


def test_help_pending_overrides_other_commands():
    spoken = []
    director = CommandDirector(spoken.append)
    director.dispatch_command("help")
    director.dispatch_command("weather")
    assert spoken[-1] == WeatherCommand.help_text + " This command does require the internet."