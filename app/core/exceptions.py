# app/core/exceptions.py

from fastapi import HTTPException, status

# Base Exception
class BaseAPIException(HTTPException):
    """Base class for all custom API exceptions."""
    def __init__(self, status_code: int, detail: str, headers: dict = None):
        super().__init__(status_code=status_code, detail=detail, headers=headers)


# User Exceptions
class UserNotFoundException(BaseAPIException):
    """Exception raised when a user is not found."""
    def __init__(self, detail="User not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

    @classmethod
    def for_username(cls, username: str) -> "UserNotFoundException":
        return cls(detail=f"user {username} not found")


# Database & System Exceptions
class DatabaseConnectionException(BaseAPIException):
    """Exception raised when a database connection fails."""
    def __init__(self, detail="Database connection failed"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
