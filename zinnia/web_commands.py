"""Commands that fetch their answers from web services: jokes and weather."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from zinnia.command import Command, CommandResult, Speak

_log = logging.getLogger(__name__)

JOKE_URL = "https://icanhazdadjoke.com"
WEATHER_URL = "https://wttr.in/{place}?format=j1"
_TIMEOUT = 30.0


class ServiceError(Exception):
    """A web service could not be reached or gave no usable answer."""


def _fetch(url: str, *, service: str, connect_message: str, headers: dict[str, str] | None = None) -> str:
    try:
        response = requests.get(url, headers=headers, timeout=_TIMEOUT)
    except requests.RequestException as exc:
        raise ServiceError(connect_message) from exc
    if not 200 <= response.status_code < 300:
        raise ServiceError(f"I didn't get a response from the {service} service.")
    try:
        return response.text
    except (requests.RequestException, UnicodeDecodeError) as exc:
        raise ServiceError(f"I had a problem understanding the {service} service.") from exc


class JokeCommand(Command):
    """Tells a joke fetched from a joke service."""

    name = "Joke"
    description = "This command will tell you a joke."
    help_text = "Ask for a joke and you will recieve one."
    uses_internet = True

    def recognize(self, text: str) -> bool:
        return "joke" in text

    def effect(self, text: str, speak: Speak) -> CommandResult:
        try:
            joke = _fetch(
                JOKE_URL,
                service="joke",
                connect_message="I had a problem connecting to the joke service",
                headers={"Accept": "text/plain"},
            )
        except ServiceError as exc:
            speak(f"{exc} Please try again later.")
            return CommandResult.DONE
        _log.debug("joke: %s", joke)
        speak(joke)
        return CommandResult.DONE


def weather_place(text: str, default: str) -> str:
    """Pick the location following "in" in a phrase, words joined by "+".

    The location runs up to and including the next "in", if any. Without an
    "in" the default is returned; an "in" with nothing after it is an error.
    """
    words = text.split()
    if "in" not in words:
        return default
    start = words.index("in") + 1
    if start >= len(words):
        raise ValueError("no location follows 'in'")
    rest = words[start:]
    if "in" in rest:
        rest = rest[: rest.index("in") + 1]
    return "+".join(rest)


def _lookup(data: Any, *path: str | int) -> Any:
    for key in path:
        if isinstance(key, int):
            if not isinstance(data, list) or key >= len(data):
                return None
        elif not isinstance(data, dict) or key not in data:
            return None
        data = data[key]
    return data


def _spoken_value(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False).strip('"')


class WeatherCommand(Command):
    """Reports current weather conditions for a location."""

    name = "Weather"
    description = "This command can give you weather information about a given location."
    help_text = (
        "Mention the weather and a location to recieve weather data about that location. "
        'Make sure to precede the location with the word "in".'
    )
    uses_internet = True

    def __init__(self, default_location: str) -> None:
        self.default_location = default_location

    def recognize(self, text: str) -> bool:
        return "weather" in text

    def effect(self, text: str, speak: Speak) -> CommandResult:
        place = weather_place(text, self.default_location)
        try:
            body = _fetch(
                WEATHER_URL.format(place=place),
                service="weather",
                connect_message="I was unable to connect to the weather service.",
            )
        except ServiceError as exc:
            speak(f"{exc} Please try again later.")
            return CommandResult.DONE
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError as exc:
            raise ValueError("Couldn't parse JSON response") from exc
        current = _lookup(parsed, "current_condition", 0)
        _log.debug("current conditions: %s", json.dumps(current, indent=2))
        weather = _spoken_value(_lookup(current, "weatherDesc", 0, "value"))
        temp = _spoken_value(_lookup(current, "temp_F"))
        feels = _spoken_value(_lookup(current, "FeelsLikeF"))
        speak(
            f"The weather in {place.replace('+', ' ')} is {weather}. "
            f"It is {temp} degrees and feels like {feels} degrees."
        )
        return CommandResult.DONE