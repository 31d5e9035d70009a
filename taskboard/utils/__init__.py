"""
Common utilities for the Taskboard application.

``taskboard.utils.auth`` depends on the settings module, which itself logs
through this package, so only the logger is re-exported here.
"""

from taskboard.utils.logger import cleanup_old_logs, setup_logger

__all__ = [
    "setup_logger",
    "cleanup_old_logs",
]
