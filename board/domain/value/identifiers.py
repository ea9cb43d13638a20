"""Typed identifiers for postboard entities.

Identifiers are opaque strings; NewType keeps post ids and user ids from
being mixed up at call sites.
"""

from typing import NewType

UserId = NewType("UserId", str)
PostId = NewType("PostId", str)
