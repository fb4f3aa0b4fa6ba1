from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role resolved at login, used for authorization checks."""

    ADMIN = "admin"
    EMPLOYEE = "employee"
