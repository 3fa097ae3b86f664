"""
Input validation: plain predicates for the interactive prompts and Pydantic
schemas for data coming in through the catalogue and the HTTP API.
"""
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from typing import List, Optional, Sequence

from mealplanner.utilities.constants import CATEGORIES, NAME_PATTERN, ACTIONS
from mealplanner.utilities.errors import ValidationError


def is_valid_category(value: str) -> bool:
    return value in CATEGORIES


def is_valid_name(value: str) -> bool:
    """Letters and spaces only, at least one character."""
    return bool(NAME_PATTERN.match(value))


def is_valid_action(value: str) -> bool:
    return value in ACTIONS


def parse_ingredients(raw: str) -> Optional[List[str]]:
    """Split a comma separated line into trimmed ingredient names.

    Returns None when any token (including an empty one) is not a valid name.
    """
    tokens = [token.strip() for token in raw.split(",")]
    if not tokens or not all(is_valid_name(token) for token in tokens):
        return None
    return tokens


def is_valid_choice(value: str, candidates: Sequence[str]) -> bool:
    return value in candidates


class MealInput(BaseModel):
    """Schema for a new catalogue meal."""
    category: str
    name: str = Field(..., min_length=1)
    ingredients: List[str] = Field(..., min_length=1)

    @field_validator('category')
    @classmethod
    def validate_category(cls, v):
        v = v.strip()
        if not is_valid_category(v):
            raise ValueError(f"Category must be one of: {', '.join(CATEGORIES)}")
        return v

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not is_valid_name(v):
            raise ValueError('Meal name must contain letters and spaces only')
        return v

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Trim every ingredient and reject anything but letters and spaces."""
        cleaned = [item.strip() for item in v]
        if not cleaned or not all(is_valid_name(item) for item in cleaned):
            raise ValueError('Ingredients must contain letters and spaces only')
        return cleaned


class PlanUpdateInput(BaseModel):
    """Schema for setting a single plan slot."""
    day: str = Field(..., pattern=r'^(Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)$')
    category: str = Field(..., pattern=r'^(breakfast|lunch|dinner)$')
    meal_id: int = Field(..., ge=1)


def parse_meal_input(category: str, name: str, ingredients: Sequence[str]) -> MealInput:
    """Build a MealInput, turning pydantic errors into our ValidationError."""
    try:
        return MealInput(category=category, name=name, ingredients=list(ingredients))
    except PydanticValidationError as e:
        raise ValidationError(str(e)) from e
