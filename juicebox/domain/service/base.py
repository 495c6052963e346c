"""Base service class for domain services."""

from collections.abc import Mapping
from typing import Any

from juicebox.domain.error import UnknownFieldError


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def parse_fields(fields: Mapping[Any, Any], allowed: type, resource: str) -> dict:
    """Map caller supplied keys onto an allow-list enum.

    Args:
        fields: Raw field mapping, keys are strings or enum members
        allowed: ``PostField`` or ``UserField``
        resource: Resource name for error messages

    Returns:
        Dict keyed by enum members, in input order

    Raises:
        UnknownFieldError: On the first key outside the allow-list
    """
    parsed = {}
    for key, value in fields.items():
        try:
            parsed[allowed(key)] = value
        except ValueError:
            raise UnknownFieldError(resource, str(key)) from None
    return parsed
