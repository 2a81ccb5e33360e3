from __future__ import annotations

import logging
from typing import Dict

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from .schemas import Task
from .store import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["Tasks"])


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store


@router.get("", response_model=Dict[str, Task], summary="List all tasks keyed by id")
async def list_tasks(store: TaskStore = Depends(get_task_store)) -> Dict[str, Task]:
    return await store.list_tasks()


async def _decode_task(request: Request) -> Task:
    """Decode the body as JSON whatever the Content-Type header says."""
    body = await request.body()
    try:
        return Task.model_validate_json(body)
    except ValidationError as e:
        errors = [
            {**err, "loc": ("body", *err.get("loc", ()))}
            for err in e.errors(include_url=False)
        ]
        raise RequestValidationError(errors, body=body) from e


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Task,
    summary="Create a task (409 if the id is already taken)",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": Task.model_json_schema()}},
        }
    },
)
async def create_task(
    task: Task = Depends(_decode_task),
    store: TaskStore = Depends(get_task_store),
) -> Task:
    if not await store.add_task(task):
        raise HTTPException(status_code=409, detail=f"Task '{task.id}' already exists.")
    logger.info("Created task id=%s", task.id)
    return task


@router.get("/{task_id}", response_model=Task, summary="Get a task by id")
async def get_task(
    task_id: str = Path(..., description="Task identifier."),
    store: TaskStore = Depends(get_task_store),
) -> Task:
    task = await store.get_task(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail=f"Task '{task_id}' not found.")
    return task


@router.delete("/{task_id}", summary="Delete a task by id")
async def delete_task(
    task_id: str = Path(..., description="Task identifier."),
    store: TaskStore = Depends(get_task_store),
) -> Response:
    if not await store.delete_task(task_id):
        raise HTTPException(status_code=404, detail=f"Task '{task_id}' not found.")
    logger.info("Deleted task id=%s", task_id)
    return Response(status_code=status.HTTP_200_OK)


SAMPLE_TASKS = (
    Task(
        id="1",
        description="Finish the final REST API assignment",
        note="If I get it done today, tomorrow is a free day. Hooray!",
        applications=["VS Code", "Terminal", "git"],
    ),
    Task(
        id="2",
        description="Test the final assignment with Postman",
        note="Better to do this while developing, every time you start the server and check a handler",
        applications=["VS Code", "Terminal", "git", "Postman"],
    ),
)


# Seed store with example data so endpoints have meaningful responses out of the box.
async def seed_store(store: TaskStore) -> None:
    total = await store.seed(SAMPLE_TASKS)
    logger.info("Seeded sample tasks total=%s", total)
