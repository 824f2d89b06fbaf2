"""
Fluent builder base

A builder accumulates fields until a setter fails validation. From then on
every setter is a no-op and build() raises that first error, so a chain of
setters reads top to bottom without checking each call.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type

from slack_hook.errors import SlackChoiceError, SlackError

logger = logging.getLogger(__name__)


def enum_choice(enum_cls: Type[Enum], value: Any) -> Enum:
    """Convert value to a member of enum_cls, raising SlackChoiceError if it isn't one."""
    try:
        return enum_cls(value)
    except ValueError as e:
        raise SlackChoiceError(
            enum_cls.__name__, value, [member.value for member in enum_cls]
        ) from e


class BaseBuilder:
    """Holds either the fields set so far or the first validation error."""

    def __init__(self, **fields: Any):
        self._fields: Dict[str, Any] = dict(fields)
        self._error: Optional[SlackError] = None

    @property
    def error(self) -> Optional[SlackError]:
        """The first validation error captured, if any."""
        return self._error

    @property
    def failed(self) -> bool:
        return self._error is not None

    def _set(self, name: str, value: Any):
        if self._error is None:
            self._fields[name] = value
        return self

    def _set_validated(self, name: str, validator: Callable[[Any], Any], value: Any):
        if self._error is not None:
            return self
        try:
            self._fields[name] = validator(value)
        except SlackError as e:
            logger.debug(f"{type(self).__name__}.{name} failed validation: {e}")
            self._error = e
        return self

    def _raise_if_failed(self) -> None:
        if self._error is not None:
            raise self._error
