from fastapi import FastAPI, Depends, Query, HTTPException
from fastapi.responses import JSONResponse

import logging

from mealplanner.domain.Plan import PlanEntry
from mealplanner.infra.Catalogue_Repository import CatalogueRepository
from mealplanner.infra.Plan_Repository import PlanRepository
from mealplanner.logic.planning.plan_view import plan_rows, render_plan
from mealplanner.logic.shopping.list_builder import build_shopping_list
from mealplanner.utilities import constants as C
from mealplanner.utilities.errors import ExportPrecondition, StorageError
from mealplanner.utilities.validators import MealInput, PlanUpdateInput, is_valid_category

# Logging
logger = logging.getLogger("mealplanner_app")

# Initialize FastAPI app
app = FastAPI(title="Meal Planner API")


# -------------------- Dependencies --------------------
def get_catalogue() -> CatalogueRepository:
    return CatalogueRepository()


def get_plan_repository() -> PlanRepository:
    return PlanRepository()


@app.exception_handler(StorageError)
async def _storage_error_handler(request, exc: StorageError):
    logger.error("Storage failure on %s: %s", request.url.path, exc)
    return JSONResponse({"error": "Storage unavailable"}, status_code=500)


# -------------------- Catalogue --------------------
@app.get("/api/meals")
def list_meals(category: str = Query(...), catalogue: CatalogueRepository = Depends(get_catalogue)):
    """Meals of a category in the order they were added, with their ingredients."""
    if not is_valid_category(category):
        return JSONResponse({"error": C.WRONG_CATEGORY}, status_code=400)
    meals = catalogue.meals_in_category(category)
    return {"category": category, "meals": [meal.to_json() for meal in meals]}


@app.post("/api/meals")
def add_meal(meal: MealInput, catalogue: CatalogueRepository = Depends(get_catalogue)):
    meal_id = catalogue.add_meal(meal.category, meal.name, meal.ingredients)
    return {"status": "success", "meal_id": meal_id}


# -------------------- Plan --------------------
@app.get("/api/plan")
def get_plan(plan_repo: PlanRepository = Depends(get_plan_repository)):
    plan = plan_repo.get_plan()
    return {"days": plan_rows(plan), "lines": render_plan(plan)}


@app.put("/api/plan")
def update_plan(update: PlanUpdateInput,
                catalogue: CatalogueRepository = Depends(get_catalogue),
                plan_repo: PlanRepository = Depends(get_plan_repository)):
    """Set one (day, category) slot, replacing whatever was there."""
    meal = catalogue.get_meal(update.meal_id)
    if meal is None:
        raise HTTPException(status_code=404, detail=f"Meal {update.meal_id} not found")
    if meal.category != update.category:
        return JSONResponse(
            {"error": f"{meal.name} is a {meal.category} meal, not {update.category}"},
            status_code=400,
        )
    entry = PlanEntry(update.day, update.category, meal.name, meal.id)
    plan_repo.save_entry(entry)
    logger.info("Planned %s for %s %s", meal.name, update.day, update.category)
    return {"status": "success", "entry": entry.to_dict()}


# -------------------- Shopping list --------------------
@app.get("/api/shopping-list")
def shopping_list(catalogue: CatalogueRepository = Depends(get_catalogue),
                  plan_repo: PlanRepository = Depends(get_plan_repository)):
    try:
        items = build_shopping_list(plan_repo.get_plan(), catalogue)
    except ExportPrecondition:
        return JSONResponse({"error": C.NOTHING_TO_SAVE}, status_code=400)
    return {"items": items, "count": len(items)}
