"""Read access to users acting as notification agents."""

from __future__ import annotations

from sqlalchemy.orm import Session

from notiheze.domain.entities import Agent
from notiheze.infrastructure.models import UserModel


class UserRepository:
    """Look up :class:`Agent` entities by identifier."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> Agent | None:
        model = (
            self.session.query(UserModel)
            .filter(UserModel.id == user_id)
            .filter(UserModel.deleted.is_(False))
            .first()
        )
        return self._to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: UserModel) -> Agent:
        return Agent(id=model.id, name=model.name)


__all__ = ["UserRepository"]
