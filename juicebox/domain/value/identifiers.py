"""Strongly typed identifiers for Juicebox domain entities.

Using NewType for strong typing prevents mixing up different entity IDs.
All identifiers are database-assigned serial integers.
"""

from typing import NewType

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
TagId = NewType("TagId", int)
