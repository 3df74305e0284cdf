import pytest

from zinnia.command import Command, CommandResult, DispatchResult


class _Echo(Command):
    name = "Echo"

    def recognize(self, text):
        return "echo" in text

    def effect(self, text, speak):
        speak(text)
        return CommandResult.DONE


def test_to_dispatch_done():
    assert CommandResult.DONE.to_dispatch() is DispatchResult.DONE


def test_to_dispatch_continue():
    assert CommandResult.CONTINUE.to_dispatch() is DispatchResult.CONTINUE


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_concrete_subclass_result_converts_to_dispatch():
    spoken = []
    echo = _Echo()
    assert echo.recognize("please echo this")
    assert not echo.recognize("nothing")
    result = echo.effect("echo me", spoken.append)
    assert result is CommandResult.DONE
    assert CommandResult.to_dispatch(result) is DispatchResult.DONE
    assert spoken == ["echo me"]
    assert echo.uses_internet is False