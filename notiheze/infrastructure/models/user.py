"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.sql import expression

from notiheze.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a wiki user that can act as an agent."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    deleted = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )


__all__ = ["UserModel"]
