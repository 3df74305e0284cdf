# zinnia

The command core of a small voice assistant. It takes text that a speech
recogniser has already produced, works out which command was meant, runs it,
and passes the assistant's spoken replies to a callback of your choosing.

## What is in it

- `zinnia.chunkbuffer.ChunkBuffer` is a two-chunk buffer for audio samples or
  any other values. Add values with `extend(values)`; once a chunk of
  `chunk_size` values has filled, `full()` is true and `pop()` returns that
  chunk (it returns `None` while no chunk has filled). This suits feeding a
  recogniser with fixed-size frames.
- `zinnia.numwords` turns spoken English numbers into digits.
  `replace_numbers_in_text("set a timer for five minutes")` gives
  `"set a timer for 5 minutes"`. `text_to_digits("twenty one")` gives `"21"`;
  it raises `ValueError` when the phrase is not a single number.
- `zinnia.command` defines the `Command` base class and the `CommandResult`
  and `DispatchResult` enums.
- `zinnia.basic_commands` holds the commands that work offline:
  `TestCommand`, `HelpCommand`, `DiceCommand` and `AlarmCommand`, plus
  `timer_duration(text)`, which adds up every "number second/minute/hour"
  pair in a phrase and returns a `datetime.timedelta`.
- `zinnia.web_commands` holds `JokeCommand` and `WeatherCommand`, which use
  online services through `requests`, plus `weather_place(text, default)`.
- `zinnia.director` holds `CommandDirector` and `default_commands()`.

## The commands

`default_commands()` returns them in order of priority:

- **Help**: say "help", then name a command when asked. It tells you that
  command's help text and whether it needs the internet.
- **Test Command**: any phrase containing "test command" is echoed back.
- **Weather**: "what's the weather in Paris". The words after "in" are the
  location; without "in" the default location, "Drums", is used. It reports
  the current conditions, temperature and feels-like temperature in
  Fahrenheit.
- **Joke**: "tell me a joke". It fetches a joke from an online joke service.
- **Dice**: "roll three d six". Rolls the given number of dice with the given
  number of sides. `DiceCommand` takes an optional `random.Random` to roll
  with.
- **Alarm**: "set a timer for one minute and thirty seconds". It says
  "Timer set." and, when the time is up, "Your timer has run out."

When a web service cannot be reached or answers with an error, the command
says so and asks you to try again later.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Using it

```python
from zinnia.director import CommandDirector, default_commands

director = CommandDirector(print, default_commands())

director.dispatch_command("roll three d six")
# prints something like: I rolled: 4, 1, and 6.

director.dispatch_command("help")
# prints: Which command would you like help with?
director.dispatch_command("dice command")
# prints the help text for the dice command
```

If no command is passed, `CommandDirector` uses `default_commands()`.

`dispatch_command` returns `DispatchResult.CONTINUE` when the command that ran
is waiting for a follow-up answer; whatever text is passed next goes straight
to that command. Otherwise it returns `DispatchResult.DONE`. Text that no
command recognises gets the reply "I'm not sure what you're asking for.
Please try again."

The `speak` callback takes a single string. Pass whatever sends text to your
speech synthesiser. Timers call it later, from a background daemon thread.

To add your own command, subclass `zinnia.command.Command`, set `name`,
`help_text` and `uses_internet`, and implement `recognize(text)` and
`effect(text, speak)`. Then pass it to `CommandDirector` together with the
defaults.

## Errors

- `DiceCommand` raises `ValueError` for dice with zero sides.
- `weather_place`, and so `WeatherCommand`, raises `ValueError` when "in" is
  the last word of the phrase.
- `WeatherCommand` raises `ValueError` when the weather service answers with
  something that is not JSON.

## What it does not do

zinnia works on text only. It does not capture audio, listen for a wake word,
recognise speech or synthesise speech; you supply the text and the `speak`
callback. It has no command-line program, tray icon or desktop notifications.
Saying "alarm" without "timer" is recognised but does nothing: alarms for a
set time of day are not supported, only timers for a duration.