from __future__ import annotations


class UpstreamError(Exception):
    """An upstream recipe API could not be reached or answered badly."""

    def __init__(self, endpoint: str, message: str) -> None:
        self.endpoint = endpoint
        super().__init__(f"{endpoint}: {message}")
