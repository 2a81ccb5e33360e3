from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..tasks.router import get_task_store
from ..tasks.store import TaskStore

router = APIRouter()


class HealthResponse(BaseModel):
    status: str
    tasks: int


@router.get("/health", response_model=HealthResponse)
async def health(store: TaskStore = Depends(get_task_store)) -> HealthResponse:
    return HealthResponse(status="ok", tasks=await store.count())
