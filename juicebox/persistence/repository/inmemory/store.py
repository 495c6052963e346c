"""Shared in-memory tables for the in-memory repositories.

The post aggregate reads three relations, so the in-memory repositories
must share one set of tables rather than keeping a dict each.
"""

from dataclasses import dataclass, field
from itertools import count
from typing import Any


@dataclass
class InMemoryStore:
    """Rows of the four relations, keyed by primary key.

    Rows are plain dicts shaped like the database rows so the regular
    mappers can be reused. Serial ids start at 1 like PostgreSQL sequences.
    """

    users: dict[int, dict[str, Any]] = field(default_factory=dict)
    posts: dict[int, dict[str, Any]] = field(default_factory=dict)
    tags: dict[int, dict[str, Any]] = field(default_factory=dict)
    post_tags: set[tuple[int, int]] = field(default_factory=set)

    _user_ids: count = field(default_factory=lambda: count(1))
    _post_ids: count = field(default_factory=lambda: count(1))
    _tag_ids: count = field(default_factory=lambda: count(1))

    def next_user_id(self) -> int:
        return next(self._user_ids)

    def next_post_id(self) -> int:
        return next(self._post_ids)

    def next_tag_id(self) -> int:
        return next(self._tag_ids)
