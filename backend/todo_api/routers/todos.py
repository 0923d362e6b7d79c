import structlog
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from todo_api.database import get_session
from todo_api.models import Todo, TodoIn, TodoResponse

router = APIRouter(prefix="/todos", tags=["TodoGroup"])

logger = structlog.get_logger(__name__)

NOT_FOUND = {404: {"description": "Todo not found"}}


def _to_response(todo: Todo) -> TodoResponse:
    return TodoResponse.model_validate(todo)


def _get_or_404(db: Session, todo_id: int) -> Todo:
    todo = db.get(Todo, todo_id)
    if todo is None:
        logger.debug("todo_not_found", todo_id=todo_id)
        raise HTTPException(404, "Todo not found")
    return todo


@router.get("", name="get_all_todos", response_model=list[TodoResponse])
async def get_all_todos(db: Session = Depends(get_session)):
    return [_to_response(t) for t in db.query(Todo).all()]


# Must be registered ahead of /{todo_id}
@router.get("/complete", name="get_completed_todos", response_model=list[TodoResponse])
async def get_completed_todos(db: Session = Depends(get_session)):
    todos = db.query(Todo).filter(Todo.is_complete).all()
    return [_to_response(t) for t in todos]


@router.get(
    "/{todo_id}",
    name="get_todo_by_id",
    response_model=TodoResponse,
    responses=NOT_FOUND,
)
async def get_todo_by_id(todo_id: int, db: Session = Depends(get_session)):
    return _to_response(_get_or_404(db, todo_id))


@router.post(
    "",
    name="add_todo_item",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_todo_item(payload: TodoIn, response: Response, db: Session = Depends(get_session)):
    """Store a new Todo. The id is always assigned by the store."""
    todo = Todo(name=payload.name, is_complete=payload.is_complete)
    db.add(todo)
    db.commit()
    db.refresh(todo)

    logger.info("todo_created", todo_id=todo.id)
    response.headers["Location"] = f"/api/todos/{todo.id}"
    return _to_response(todo)


@router.put(
    "/{todo_id}",
    name="update_todo_item",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def update_todo_item(todo_id: int, payload: TodoIn, db: Session = Depends(get_session)):
    """Overwrite both the name and the completion flag."""
    todo = _get_or_404(db, todo_id)
    todo.name = payload.name
    todo.is_complete = payload.is_complete
    db.commit()

    logger.info("todo_updated", todo_id=todo_id, is_complete=payload.is_complete)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{todo_id}",
    name="delete_todo_item",
    response_model=TodoResponse,
    responses=NOT_FOUND,
)
async def delete_todo_item(todo_id: int, db: Session = Depends(get_session)):
    """Delete a Todo and return what was removed."""
    todo = _get_or_404(db, todo_id)
    deleted = _to_response(todo)
    db.delete(todo)
    db.commit()

    logger.info("todo_deleted", todo_id=todo_id)
    return deleted
