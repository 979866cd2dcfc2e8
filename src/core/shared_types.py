"""
Type definitions used across layers
"""

from enum import StrEnum
from typing import Self


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> Self:
        return Color.BLACK if self == Color.WHITE else Color.WHITE


# --- NOTE the office names are the ones the players see. In the rules the roles are: royal / slider / leaper
class PieceKind(StrEnum):
    PRODUCT_OWNER = "product owner"
    DEVELOPER = "developer"
    DESIGNER = "designer"
