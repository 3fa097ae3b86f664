import argparse
import logging
import sys

from mealplanner.cli.console import Console
from mealplanner.cli.session import Session
from mealplanner.infra.Catalogue_Repository import CatalogueRepository
from mealplanner.infra.Plan_Repository import PlanRepository
from mealplanner.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL, LOG_FORMAT
from mealplanner.utilities.errors import StorageError


def _serve() -> int:
    import uvicorn
    from mealplanner.api.api_run import app

    print(f"Uvicorn running on http://{APP_HOST}:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
    return 0


def main(argv=None, console: Console = None) -> int:
    parser = argparse.ArgumentParser(prog="mealplanner", description="Plan a week of meals and export a shopping list.")
    parser.add_argument("command", nargs="?", choices=["session", "serve"], default="session",
                        help="'session' (default) runs the interactive planner, 'serve' starts the HTTP API")
    args = parser.parse_args(argv)

    # Diagnostics go to stderr so the session transcript on stdout stays clean
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, stream=sys.stderr)

    if args.command == "serve":
        return _serve()

    try:
        catalogue = CatalogueRepository()
        plan_repo = PlanRepository()
        plan_repo.get_plan()
    except StorageError as e:
        print(f"Error opening meal storage: {e}", file=sys.stderr)
        return 1
    return Session(console or Console(), catalogue, plan_repo).run()


if __name__ == "__main__":
    sys.exit(main())
