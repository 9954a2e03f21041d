"""User directory backed by the user table."""

from __future__ import annotations

import logging
from urllib.parse import quote

from sqlalchemy.orm import Session

from notiheze.domain.exceptions import AgentNotFoundError
from notiheze.infrastructure.repositories import UserRepository

logger = logging.getLogger(__name__)


class DatabaseUserDirectory:
    """Resolve agent ids to user page URLs."""

    def __init__(self, session: Session, *, user_page_base_url: str) -> None:
        self._repository = UserRepository(session)
        self._base_url = user_page_base_url.rstrip("/")

    def resolve_profile_url(self, agent_id: int) -> str:
        agent = self._repository.get(agent_id)
        if agent is None:
            logger.info("Agent %s not found in the user directory", agent_id)
            raise AgentNotFoundError(agent_id)
        return f"{self._base_url}/{quote(agent.user_page_title(), safe=':')}"


__all__ = ["DatabaseUserDirectory"]
