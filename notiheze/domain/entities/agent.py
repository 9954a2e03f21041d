"""Domain entity representing the user who triggered a notification."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Agent:
    """Minimal attributes of a wiki user acting as a notification agent."""

    id: int
    name: str

    def user_page_title(self) -> str:
        """Return the title of the user's page with spaces as underscores."""

        return "User:" + self.name.replace(" ", "_")
