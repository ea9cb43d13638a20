"""Engagement use cases."""

from .react_to_post import ReactToPostRequest, ReactToPostResponse, ReactToPostUseCase

__all__ = [
    "ReactToPostRequest",
    "ReactToPostResponse",
    "ReactToPostUseCase",
]
