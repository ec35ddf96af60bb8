"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising, which keeps
the failure path explicit and easy to test.

Usage:
    def require_admin(user: User | None) -> Result[None, AuthorizationError]:
        if user is None or not user.is_admin:
            return Failure(error=AuthorizationError(...))
        return Success(value=None)

    match authz.require_permission(user, Permission.NEWS_PUBLISH):
        case Success():
            publish(article)
        case Failure(error=error):
            raise HTTPException(403, error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
