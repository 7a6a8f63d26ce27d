"""
Authenticated identity as seen by the route layer.

Dependencies: pydantic
System role: Identity collaborator contract
"""

from pydantic import BaseModel


class Identity(BaseModel):
    """Caller identity resolved by the upstream auth collaborator."""

    user_id: str
    role: str | None = None
    admin_role: str = "admin"

    @property
    def is_admin(self) -> bool:
        """True when the identity carries the admin role."""
        return self.role == self.admin_role
