"""Pydantic models for API I/O."""

from .polls import PollCheckRequest, PollCheckResponse

__all__ = [
    "PollCheckRequest",
    "PollCheckResponse",
]
