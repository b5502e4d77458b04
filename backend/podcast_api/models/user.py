"""
User Model
Represents accounts that host or listen to podcasts.

Each user has:
- Unique email for authentication
- Hashed password (never stored in plain text)
- A role (host or listener)
- A verified flag, reset whenever the email changes

Passwords are hashed by the write hooks at the bottom of this module:
always on insert, and on update only when the password attribute changed.
Callers assign plain text and let the flush take care of it.
"""

from sqlalchemy import Boolean, Column, String, Enum as SQLEnum, event, inspect
from starlette.concurrency import run_in_threadpool
import enum

from podcast_api.core.security import hash_password, verify_password
from podcast_api.models.base import BaseModel


class UserRole(str, enum.Enum):
    """User role types."""
    HOST = "host"
    LISTENER = "listener"


class User(BaseModel):
    """
    User model for authentication and profile management.

    Fields:
        id (int): Primary key, inherited from BaseModel
        email (str): Unique email address for login
        password (str): Bcrypt hashed password
        role (UserRole): Account type
        verified (bool): Whether the current email has been verified
        created_at (datetime): Account creation timestamp
        updated_at (datetime): Last profile update timestamp
    """

    __tablename__ = "users"

    # Email must be unique across all users for login purposes
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="User's email address for authentication"
    )

    password = Column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    role = Column(
        SQLEnum(UserRole),
        default=UserRole.LISTENER,
        nullable=False,
        comment="User role (host, listener)"
    )

    verified = Column(
        Boolean,
        default=False,
        nullable=False,
        comment="Whether the current email address is verified"
    )

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"

    async def check_password(self, password: str) -> bool:
        """
        Check a plain text candidate against the stored hash.

        bcrypt runs in a worker thread so the event loop keeps serving requests.
        """
        return await run_in_threadpool(verify_password, password, self.password)

    @property
    def is_host(self) -> bool:
        return self.role == UserRole.HOST


@event.listens_for(User, "before_insert")
def _hash_password_on_insert(mapper, connection, target: User) -> None:
    if target.password:
        target.password = hash_password(target.password)


@event.listens_for(User, "before_update")
def _hash_password_on_update(mapper, connection, target: User) -> None:
    if inspect(target).attrs.password.history.has_changes() and target.password:
        target.password = hash_password(target.password)
