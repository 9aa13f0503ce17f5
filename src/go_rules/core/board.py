from enum import IntEnum
from typing import Dict, List, Optional

from sgfmill import ascii_boards, boards

from go_rules import config
from go_rules.core.move import Move
from go_rules.core.point import Point
from go_rules.utils.logger import logger


class Stone(IntEnum):
    """交点の状態。BLACK が先手 (Player1)、WHITE が後手 (Player2)"""
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def label(self) -> str:
        return {Stone.EMPTY: "空", Stone.BLACK: "黒", Stone.WHITE: "白"}[self]

    @property
    def key(self) -> str:
        return self.name.lower()

    @property
    def sgf_color(self) -> Optional[str]:
        """sgfmill の色表記 ('b' / 'w')"""
        return {Stone.BLACK: 'b', Stone.WHITE: 'w'}.get(self)

    def opposite(self) -> 'Stone':
        if self == Stone.EMPTY:
            raise ValueError("EMPTY has no opposite")
        return Stone.WHITE if self == Stone.BLACK else Stone.BLACK

    @classmethod
    def from_str(cls, s: str) -> Optional['Stone']:
        if not s: return None
        s = s.lower()
        if s in ['b', 'black', '黒']: return cls.BLACK
        if s in ['w', 'white', '白']: return cls.WHITE
        return None


class Board:
    """
    1局分の盤面状態を保持するクラス。
    派生ロジック（連・呼吸点・合法手判定など）は持たず、core 配下の各モジュールが
    この状態を読み書きする。
    """

    def __init__(self, size: int = config.DEFAULT_BOARD_SIZE):
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"Board size must be a positive integer: {size!r}")
        self.size = size
        self.cells: List[Stone] = [Stone.EMPTY] * (size * size)
        self.to_move: Stone = Stone.BLACK
        self.captured: Dict[Stone, int] = {Stone.BLACK: 0, Stone.WHITE: 0}
        # 直近の着手直前の盤面（コウ判定用）
        self.prior_snapshot: Optional[List[Stone]] = None
        self.history: List[Move] = []

    @property
    def num_cells(self) -> int:
        return self.size * self.size

    def is_on_board(self, position) -> bool:
        return (isinstance(position, int) and not isinstance(position, bool)
                and 0 <= position < self.num_cells)

    def to_index(self, row: int, col: int) -> int:
        return Point(row, col).to_index(self.size)

    def to_point(self, position: int) -> Point:
        return Point.from_index(position, self.size)

    def get(self, position: int) -> Stone:
        return self.cells[position]

    def is_empty(self, position: int) -> bool:
        return self.cells[position] == Stone.EMPTY

    def neighbors(self, position: int) -> List[int]:
        """上下左右の隣接点（盤外は除く）のインデックスを返す"""
        return [p.to_index(self.size) for p in self.to_point(position).neighbors(self.size)]

    def snapshot(self) -> List[Stone]:
        return list(self.cells)

    def copy(self) -> 'Board':
        new_obj = Board(self.size)
        new_obj.cells = list(self.cells)
        new_obj.to_move = self.to_move
        new_obj.captured = dict(self.captured)
        new_obj.prior_snapshot = list(self.prior_snapshot) if self.prior_snapshot is not None else None
        new_obj.history = list(self.history)
        return new_obj

    def rows(self) -> List[List[Stone]]:
        return [self.cells[r * self.size:(r + 1) * self.size] for r in range(self.size)]

    def to_sgfmill(self) -> boards.Board:
        """sgfmill.boards.Board に変換する（表示・検証用）"""
        sgf_board = boards.Board(self.size)
        black = [self.to_point(i) for i, s in enumerate(self.cells) if s == Stone.BLACK]
        white = [self.to_point(i) for i, s in enumerate(self.cells) if s == Stone.WHITE]
        sgf_board.apply_setup(black, white, [])
        return sgf_board

    def render(self) -> str:
        """ASCII で盤面を描画する"""
        if self.size > config.MAX_LABEL_BOARD_SIZE:
            marks = {Stone.EMPTY: ".", Stone.BLACK: "#", Stone.WHITE: "o"}
            return "\n".join(" ".join(marks[s] for s in row) for row in reversed(self.rows()))
        return ascii_boards.render_board(self.to_sgfmill())

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self.size == other.size and self.cells == other.cells
                and self.to_move == other.to_move and self.captured == other.captured
                and self.prior_snapshot == other.prior_snapshot and self.history == other.history)

    __hash__ = None

    def __repr__(self):
        stones = sum(1 for s in self.cells if s != Stone.EMPTY)
        return f"Board(size={self.size}, to_move={self.to_move.name}, stones={stones}, moves={len(self.history)})"


def create(size: int = config.DEFAULT_BOARD_SIZE) -> Board:
    """全交点が空の新しい盤面を生成する"""
    board = Board(size)
    if size not in config.STANDARD_BOARD_SIZES:
        logger.debug(f"Non-standard board size: {size}x{size}", layer="BOARD")
    return board
