"""
Task model: a to-do item owned by exactly one user.

A task has a required title, an optional description and a completed flag.
Tasks are created, partially updated and hard-deleted through the task API;
there is no soft delete or versioning.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Index, String, Text, false
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import relationship, validates

from taskboard.models.base import SCHEMA_NAME, Base, TimestampMixin, UUIDMixin


class Task(Base, UUIDMixin, TimestampMixin):
    """To-do item belonging to a single user."""

    __tablename__ = "tasks"
    __table_args__ = (
        Index("ix_tasks_owner_id", "owner_id"),
        Index("ix_tasks_owner_id_created_at", "owner_id", "created_at"),
        {"schema": SCHEMA_NAME},
    )

    title = Column(
        String(200),
        nullable=False,
        comment="Short task title, never empty",
    )

    description = Column(
        Text,
        nullable=True,
        comment="Optional free-form details",
    )

    completed = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
        comment="Whether the task has been done",
    )

    owner_id = Column(
        PG_UUID(as_uuid=True),
        ForeignKey(f"{SCHEMA_NAME}.users.id", ondelete="CASCADE"),
        nullable=False,
        comment="User who created the task",
    )

    owner = relationship("User", back_populates="tasks")

    @validates("title")
    def validate_title(self, key, value):
        if value is None or not str(value).strip():
            raise ValueError("Task title must not be empty")
        return value

    def __repr__(self):
        return (
            f"<Task(id={self.id}, title='{self.title}', completed={self.completed})>"
        )
