"""FastAPI dependencies wiring sessions into the services."""

from fastapi import Depends, Request
from sqlmodel import Session

from ..db.session import get_session
from ..services import CategoryService, TaskService


def get_task_service(request: Request, session: Session = Depends(get_session)) -> TaskService:
    return TaskService(session, atomic=request.app.state.settings.atomic_category_sync)


def get_category_service(
    request: Request, session: Session = Depends(get_session)
) -> CategoryService:
    return CategoryService(session, atomic=request.app.state.settings.atomic_category_sync)
