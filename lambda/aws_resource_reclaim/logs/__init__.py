"""CloudWatch Logs cleanup."""

from .log_groups import delete_log_group

__all__ = ["delete_log_group"]
