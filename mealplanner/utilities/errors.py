"""Error kinds raised by the meal planner core."""


class MealPlannerError(Exception):
    """Base class for all meal planner errors."""


class ValidationError(MealPlannerError, ValueError):
    """User input did not match the expected format."""


class LookupMiss(MealPlannerError, LookupError):
    """A meal referenced by name or id is not in the catalogue."""


class ExportPrecondition(MealPlannerError):
    """The shopping list was requested before anything was planned."""


class StorageError(MealPlannerError):
    """A repository file could not be read or parsed."""


class ExportError(MealPlannerError):
    """The shopping list could not be written to its destination."""
