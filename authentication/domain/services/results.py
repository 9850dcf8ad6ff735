"""
Result objects for the authentication service.

Expected failures (bad credentials, duplicate email) are returned as data
instead of raised, so views can map them to status codes directly.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class LoginResult:
    """Result of login attempt."""

    success: bool
    member: Optional[Any] = None  # Member instance
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    error: Optional[str] = None


@dataclass
class RegisterResult:
    """Result of member signup attempt."""

    success: bool
    member: Optional[Any] = None  # Member instance
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    error: Optional[str] = None
