"""
User GraphQL type definitions
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

if TYPE_CHECKING:
    from ...database.models import Users


@strawberry.type
class User:
    """User type for GraphQL API. The password digest is never exposed."""

    id: strawberry.ID
    username: str
    email: str

    @classmethod
    def from_model(cls, user: Users) -> User:
        return cls(id=strawberry.ID(str(user.id)), username=user.username, email=user.email)
