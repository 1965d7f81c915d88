"""Built-in text modifiers applied through ``#symbol.modifier#`` tags."""

import functools
from typing import Callable

from tracery.modifiers import base_english

Modifier = Callable[..., str]

VOWELS = "aeiouAEIOU"


def _total(func: Modifier) -> Modifier:
    """Let the empty string pass through a modifier untouched."""
    @functools.wraps(func)
    def wrapper(text: str, *params: str) -> str:
        if not text:
            return text
        return func(text, *params)
    return wrapper


def _ends_in_consonant_y(word: str) -> bool:
    return len(word) > 1 and word[-1] in "yY" and word[-2] not in VOWELS


def s(text: str, *params: str) -> str:
    """Pluralize: cat -> cats, box -> boxes, city -> cities."""
    if not text:
        return text
    if text[-1] in "shxSHX":
        return text + "es"
    if _ends_in_consonant_y(text):
        return text[:-1] + "ies"
    return text + "s"


def ed(text: str, *params: str) -> str:
    """Past tense of the first word: walk around -> walked around."""
    if not text:
        return text
    word, space, rest = text.partition(" ")
    if not word:
        return text
    if word[-1] in "eE":
        word += "d"
    elif _ends_in_consonant_y(word):
        word = word[:-1] + "ied"
    else:
        word += "ed"
    return word + space + rest


def first_s(text: str, *params: str) -> str:
    """Pluralize only the first word: cup of tea -> cups of tea."""
    word, space, rest = text.partition(" ")
    return s(word) + space + rest


def replace(text: str, *params: str) -> str:
    """Replace ``params[0]`` with ``params[1]``; a no-op without both."""
    if len(params) < 2 or not params[0]:
        return text
    return text.replace(params[0], params[1])


def bee_speak(text: str, *params: str) -> str:
    """Buzz the first s: sting -> zzzting."""
    return text.replace("s", "zzz", 1)


def comma(text: str, *params: str) -> str:
    """Append a comma unless the text already ends in punctuation."""
    if not text or text[-1] in ",.?!":
        return text
    return text + ","


def in_quotes(text: str, *params: str) -> str:
    return f'"{text}"'


def title_case(text: str, *params: str) -> str:
    """Capitalize every space-separated word and lowercase the rest of it."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


DEFAULT_MODIFIERS: dict[str, Modifier] = {
    "a": _total(base_english["a"]),
    "capitalize": _total(base_english["capitalize"]),
    "capitalizeAll": _total(base_english["capitalizeAll"]),
    "uppercase": _total(base_english["uppercase"]),
    "lowercase": _total(base_english["lowercase"]),
    "s": s,
    "ed": ed,
    "firstS": first_s,
    "replace": replace,
    "beeSpeak": bee_speak,
    "comma": comma,
    "inQuotes": in_quotes,
    "titleCase": title_case,
}


def default_modifiers() -> dict[str, Modifier]:
    """Return a fresh copy of the built-in modifier table."""
    return dict(DEFAULT_MODIFIERS)
