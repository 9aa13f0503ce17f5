from enum import Enum
from typing import Optional


class MoveError(Enum):
    OUT_OF_BOUNDS = "OutOfBounds"                  # 盤外
    OCCUPIED = "Occupied"                          # 既に石がある
    SUICIDE = "Suicide"                            # 自殺手
    RECAPTURE_VIOLATION = "RecaptureViolation"     # コウ（直前局面の再現）


class IllegalMoveError(ValueError):
    """着手が拒否されたことを表す例外。盤面は一切変更されていない"""

    reason: MoveError = None

    def __init__(self, position, player=None, message: Optional[str] = None):
        self.position = position
        self.player = player
        super().__init__(message or f"{self.reason.value}: illegal move at position {position!r}")


class OutOfBoundsError(IllegalMoveError):
    reason = MoveError.OUT_OF_BOUNDS


class OccupiedError(IllegalMoveError):
    reason = MoveError.OCCUPIED


class SuicideError(IllegalMoveError):
    reason = MoveError.SUICIDE


class RecaptureViolationError(IllegalMoveError):
    reason = MoveError.RECAPTURE_VIOLATION


class GameNotFoundError(KeyError):
    """レジストリに存在しない対局IDが指定された"""

    def __init__(self, game_id):
        self.game_id = game_id
        super().__init__(game_id)
