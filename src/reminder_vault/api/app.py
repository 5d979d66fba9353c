"""FastAPI application factory for the reminder REST API."""

from fastapi import APIRouter, FastAPI

from reminder_vault.api.reminder_routes import register_reminder_routes


def create_app(store) -> FastAPI:
    """Build and return a FastAPI app wired to the given DocumentStore."""
    app = FastAPI(title="reminder-vault", docs_url="/api/docs", openapi_url="/api/openapi.json")

    api = APIRouter(prefix="/api")
    register_reminder_routes(api, store)
    app.include_router(api)

    return app
