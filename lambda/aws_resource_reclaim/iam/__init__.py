"""IAM role cleanup."""

from .roles import delete_role

__all__ = ["delete_role"]
