"""Exceptions raised by the teardown."""

from __future__ import annotations


class ReclaimError(Exception):
    """Fatal teardown failure; no further resources are attempted."""

    def __init__(
        self,
        message: str,
        resource_type: str = "",
        resource_id: str = "",
        error_code: str = "",
    ):
        super().__init__(message)
        self.resource_type = resource_type
        self.resource_id = resource_id
        self.error_code = error_code
