"""Rider session domain model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class RiderSession(BaseModel):
    """Identity of a signed-in rider, passed explicitly to components that need it."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    email: str
    role: Literal["student", "admin"] = "student"
    access_token: str
    points: int = 0

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def authorization_header(self) -> dict[str, str]:
        """Bearer authorization header for the shuttle API."""
        return {"Authorization": f"Bearer {self.access_token}"}
