from sqlalchemy import Boolean, Column, Integer, String
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from todo_api.database import Base


class Todo(Base):
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=True)
    is_complete = Column(Boolean, nullable=False, default=False)


# --- Pydantic schemas ---
# camelCase on the wire ("isComplete"); snake_case names are accepted on input too

class TodoIn(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    is_complete: bool = False


class TodoResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    name: str | None
    is_complete: bool
