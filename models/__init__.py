# models/__init__.py

from .users import User
from .result import Result
from .password import Password

__all__ = [
    "User",
    "Result",
    "Password"
]
