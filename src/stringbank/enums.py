"""Enumerations for stringbank type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion and IntEnum for
domain identifiers that double as list values.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class ResourceKind(StrEnum):
    """Kind of bundled resource, used as the second segment of entry names.

    StrEnum provides automatic string conversion: str(ResourceKind.TEXT) == "text"
    """

    TEXT = "text"
    """Line-oriented UTF-8 text table: <namespace>.text.<key>.txt"""

    BYTE = "byte"
    """Opaque binary blob: <namespace>.byte.<name>"""


class Ball(IntEnum):
    """Ball identifiers with a reserved position in ball lists.

    The three common balls always lead a ball list, in this order, ahead of
    the alphabetically sorted remainder. The value is both the domain id and
    the row of the ball's name in the ball string table.
    """

    POKE = 4
    GREAT = 3
    ULTRA = 2


# Fixed display order of the reserved prefix of a ball list.
RESERVED_BALLS: tuple[Ball, ...] = (Ball.POKE, Ball.GREAT, Ball.ULTRA)


__all__ = [
    "RESERVED_BALLS",
    "Ball",
    "ResourceKind",
]
