"""
Identity collaborator adapter.

Authentication itself happens upstream (session middleware or an auth
proxy). This module only reads the identity it left behind: first
request.state.identity, then the trusted identity headers.

Dependencies: fastapi, portal_messaging.configs
System role: "Who is calling, and are they an admin" for the route layer
"""

from typing import Protocol

from fastapi import Request

from portal_messaging.configs.auth import AuthSettings
from portal_messaging.models.identity import Identity


class IdentityProvider(Protocol):
    """Resolves the authenticated identity of a request, if any."""

    def get_identity(self, request: Request) -> Identity | None: ...


class RequestIdentityProvider:
    """Identity from upstream middleware state or trusted proxy headers."""

    def __init__(self, settings: AuthSettings) -> None:
        self.settings = settings

    def get_identity(self, request: Request) -> Identity | None:
        state_identity = getattr(request.state, "identity", None)
        if isinstance(state_identity, Identity):
            return state_identity

        user_id = request.headers.get(self.settings.user_id_header)
        if not user_id or not user_id.strip():
            return None

        return Identity(
            user_id=user_id.strip(),
            role=request.headers.get(self.settings.user_role_header),
            admin_role=self.settings.admin_role,
        )
