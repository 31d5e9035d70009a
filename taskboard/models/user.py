"""
User model for authentication and task ownership.

Users register with a username, email and mobile number; the password is kept
only as a bcrypt hash. Username and email are each unique across the table.

Architecture:
    User → Task
"""

from sqlalchemy import Column, Index, String
from sqlalchemy.orm import relationship

from taskboard.models.base import SCHEMA_NAME, Base, TimestampMixin, UUIDMixin


class User(Base, UUIDMixin, TimestampMixin):
    """Registered account that owns tasks."""

    __tablename__ = "users"
    __table_args__ = (
        Index("ix_users_username", "username", unique=True),
        Index("ix_users_email", "email", unique=True),
        {"schema": SCHEMA_NAME},
    )

    username = Column(
        String(50),
        nullable=False,
        comment="Unique username used for login",
    )

    email = Column(
        String(255),
        nullable=False,
        comment="Unique email address",
    )

    mobile = Column(
        String(32),
        nullable=False,
        comment="Mobile phone number",
    )

    hashed_password = Column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    tasks = relationship(
        "Task",
        back_populates="owner",
        cascade="all, delete-orphan",
        doc="Tasks created by this user",
    )

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
