"""Prompt / validate / reprompt loops for the interactive session.

Each loop keeps asking until the parser accepts the line; there is no retry
limit. Parsers return the accepted value, or None to reject the line.
"""
from typing import Callable, List, Optional, Sequence, TypeVar

from mealplanner.cli.console import Console
from mealplanner.utilities import constants as C
from mealplanner.utilities.validators import (
    is_valid_action, is_valid_category, is_valid_choice, is_valid_name, parse_ingredients
)

T = TypeVar("T")


def ask_until_valid(console: Console, prompt: Optional[str], parse: Callable[[str], Optional[T]],
                    rejection: str, *, repeat_prompt: bool = True) -> T:
    """Ask for a line until parse() accepts it.

    With repeat_prompt=False the prompt is shown once and only the rejection
    message is repeated.
    """
    first = True
    while True:
        if prompt is not None and (first or repeat_prompt):
            console.say(prompt)
        first = False
        value = parse(console.ask())
        if value is not None:
            return value
        console.say(rejection)


def _accept_if(predicate: Callable[[str], bool], *, strip: bool = True) -> Callable[[str], Optional[str]]:
    def parse(line: str) -> Optional[str]:
        value = line.strip() if strip else line
        return value if predicate(value) else None
    return parse


def ask_action(console: Console) -> str:
    return ask_until_valid(console, C.ACTION_PROMPT, _accept_if(is_valid_action), C.INVALID_ACTION)


def ask_category(console: Console, prompt: str = C.ADD_CATEGORY_PROMPT) -> str:
    return ask_until_valid(console, prompt, _accept_if(is_valid_category), C.WRONG_CATEGORY)


def ask_meal_name(console: Console) -> str:
    return ask_until_valid(console, C.NAME_PROMPT, _accept_if(is_valid_name), C.WRONG_FORMAT)


def ask_ingredients(console: Console) -> List[str]:
    return ask_until_valid(console, C.INGREDIENTS_PROMPT, parse_ingredients, C.WRONG_FORMAT)


def ask_meal_choice(console: Console, category: str, day: str, candidates: Sequence[str]) -> str:
    """Exact-match choice from the names shown; the list is captured once."""
    captured = list(candidates)
    return ask_until_valid(
        console,
        C.CHOICE_PROMPT.format(category=category, day=day),
        _accept_if(lambda name: is_valid_choice(name, captured), strip=False),
        C.UNKNOWN_MEAL,
        repeat_prompt=False,
    )
