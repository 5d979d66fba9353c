"""REST API routes for reminder and todo operations."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from reminder_vault.tools.reminder_tools import (
    handle_reminder_list,
    handle_reminder_update,
    handle_todo_insert,
    handle_todo_list,
    handle_todo_update,
)


class ReminderUpdateBody(BaseModel):
    file_path: str
    row_number: int
    checked: Optional[bool] = None
    time: Optional[str] = None
    raw_time: Optional[str] = None


class TodoUpdateBody(BaseModel):
    file_path: str
    row_number: int
    checked: Optional[bool] = None
    body: Optional[str] = None


class TodoInsertBody(BaseModel):
    file_path: str
    row_number: int
    body: str
    checked: bool = False


def _raise_for_error(result: dict) -> dict:
    if "error" in result:
        status_code = 404 if result["error"].startswith("No ") else 400
        raise HTTPException(status_code=status_code, detail=result["error"])
    return result


def register_reminder_routes(app_router: APIRouter, store) -> None:
    """Attach reminder and todo REST routes that use the shared store."""

    @app_router.get("/reminders")
    def list_reminders(file_path: Optional[str] = Query(None)):
        try:
            return handle_reminder_list(store, file_path=file_path)
        except FileNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    @app_router.patch("/reminders")
    async def update_reminder(body: ReminderUpdateBody):
        try:
            result = await handle_reminder_update(store, **body.model_dump())
        except FileNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _raise_for_error(result)

    @app_router.get("/todos")
    def list_todos(
        file_path: str = Query(...),
        checked: Optional[bool] = Query(None),
    ):
        try:
            return handle_todo_list(store, file_path=file_path, checked=checked)
        except FileNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    @app_router.patch("/todos")
    def update_todo(body: TodoUpdateBody):
        try:
            result = handle_todo_update(store, **body.model_dump())
        except FileNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _raise_for_error(result)

    @app_router.post("/todos", status_code=201)
    def insert_todo(body: TodoInsertBody):
        try:
            result = handle_todo_insert(store, **body.model_dump())
        except FileNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _raise_for_error(result)
