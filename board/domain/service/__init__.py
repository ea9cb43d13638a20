"""Domain services."""

from .base import Service
from .engagement_resolver import (
    TRANSITIONS,
    EngagementResolver,
    EngagementTransition,
    resolve_reaction,
)
from .engagement_service import EngagementService, ReactionOutcome
from .hash_service import HashService
from .id_generator import IdGenerator
from .jwt_service import JWTService
from .policy import can_mutate, can_react
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "EngagementResolver",
    "EngagementService",
    "EngagementTransition",
    "HashService",
    "IdGenerator",
    "JWTService",
    "PostService",
    "ReactionOutcome",
    "Service",
    "TRANSITIONS",
    "UserService",
    "can_mutate",
    "can_react",
    "resolve_reaction",
]
