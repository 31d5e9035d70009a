"""Taskboard: personal task-management API with JWT authentication."""
