# Role: The authenticated caller of a chat turn. Supplied by the transport layer and never mutated
# while a turn is running (frozen model).

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Role(str, Enum):
    STUDENT = "student"
    STAFF = "staff"
    ADMIN = "admin"


class Degree(str, Enum):
    IT = "IT"
    AI = "AI"
    DESIGN = "Design"
    GENERAL = "General"


class Principal(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    role: Role = Role.STUDENT
    degree: Optional[Degree] = None

    @property
    def is_student(self) -> bool:
        return self.role == Role.STUDENT
