import re
from typing import Final

DAYS_OF_WEEK: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)
CATEGORIES: Final[tuple[str, ...]] = ("breakfast", "lunch", "dinner")
ACTIONS: Final[tuple[str, ...]] = ("add", "show", "plan", "list plan", "save", "exit")

NAME_PATTERN: Final[re.Pattern] = re.compile(r'^[A-Za-z ]+$')
EMPTY_SLOT: Final[str] = "N/A"

# Prompts
ACTION_PROMPT: Final[str] = "What would you like to do (add, show, plan, list plan, save, exit)?"
ADD_CATEGORY_PROMPT: Final[str] = "Which meal do you want to add (breakfast, lunch, dinner)?"
SHOW_CATEGORY_PROMPT: Final[str] = "Which category do you want to print (breakfast, lunch, dinner)?"
NAME_PROMPT: Final[str] = "Input the meal's name:"
INGREDIENTS_PROMPT: Final[str] = "Input the ingredients:"
FILENAME_PROMPT: Final[str] = "Input a filename:"
CHOICE_PROMPT: Final[str] = "Choose the {category} for {day} from the list above:"

# Rejections
INVALID_ACTION: Final[str] = (
    "Invalid action. Please enter 'add', 'show', 'plan', 'list plan', 'save' or 'exit'."
)
WRONG_CATEGORY: Final[str] = "Wrong meal category! Choose from: breakfast, lunch, dinner."
WRONG_FORMAT: Final[str] = "Wrong format. Use letters only!"
UNKNOWN_MEAL: Final[str] = "This meal doesn’t exist. Choose a meal from the list above."

# Outcomes
MEAL_ADDED: Final[str] = "The meal has been added!"
NO_MEALS_FOUND: Final[str] = "No meals found."
NO_CANDIDATES: Final[str] = "No {category} meals found. Add a meal first."
DAY_PLANNED: Final[str] = "Yeah! We planned the meals for {day}."
SAVED: Final[str] = "Saved!"
NOTHING_TO_SAVE: Final[str] = "Unable to save. Plan your meals first."
SAVE_FAILED: Final[str] = "Unable to save the shopping list to {filename}."
FAREWELL: Final[str] = "Bye!"
