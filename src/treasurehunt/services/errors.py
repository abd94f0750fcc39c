"""Rule-violation codes and the result values returned by services.

Services never raise for a broken game rule. They return ``Err`` with one of
the contract's numeric codes and leave the state untouched, or ``Ok`` with
the operation's value.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorCode(IntEnum):
    NOT_AUTHORIZED = 100
    GAME_NOT_ACTIVE = 101
    # Also returned for a duplicate registration.
    PLAYER_NOT_REGISTERED = 102
    INVALID_PUZZLE_SOLUTION = 103
    # Coarse: unknown id, unclaimed, or not held by the sender on transfer.
    TREASURE_NOT_FOUND = 104
    TREASURE_ALREADY_CLAIMED = 105
    INVALID_LOCATION = 106
    COOLDOWN_ACTIVE = 108


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    code: ErrorCode

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def value(self) -> int:
        """Numeric error code, mirroring the ledger's ``(err u1xx)``."""
        return int(self.code)


Result = Union[Ok[T], Err]


def reject(logger: logging.Logger, operation: str, code: ErrorCode, **context: Any) -> Err:
    """Log a rejected operation and build its ``Err``."""
    logger.debug("%s rejected with %s (%d) %s", operation, code.name, code.value, context)
    return Err(code)
