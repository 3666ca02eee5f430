"""Department ORM model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from hris_api.models.orm.base import Base, IdMixin, TimestampMixin


class DepartmentORM(Base, IdMixin, TimestampMixin):
    """Department database model."""

    __tablename__ = "departments"

    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Department {self.name}>"
