from typing import Iterable, Union

from go_rules.core.board import Board, create
from go_rules.core.errors import IllegalMoveError
from go_rules.core.game import apply_move, pass_turn
from go_rules.core.move import Move, PASS
from go_rules.core.point import Point
from go_rules.utils.logger import logger

MoveEntry = Union[int, str, Move, None]


def _to_position(entry: MoveEntry, size: int) -> int:
    """履歴の一要素（インデックス / GTP文字列 / Move / None）を位置に変換する"""
    if isinstance(entry, Move):
        return entry.position
    if entry is None:
        return PASS
    if isinstance(entry, str):
        pt = Point.from_gtp(entry, size)
        return pt.to_index(size) if pt else PASS
    return entry


def replay(size: int, moves: Iterable[MoveEntry]) -> Board:
    """
    空の盤面から手順を再生して Board を復元する。
    途中に不正な手があれば、その手の IllegalMoveError をそのまま送出する。
    """
    moves = list(moves)
    logger.debug(f"Reconstructing board from history (len: {len(moves)})...", layer="SIMULATOR")

    board = create(size)
    for i, entry in enumerate(moves):
        position = _to_position(entry, size)
        if position == PASS:
            pass_turn(board)
            continue
        try:
            apply_move(board, position)
        except IllegalMoveError:
            logger.error(f"Illegal move in history at {i + 1}: {entry!r}", layer="SIMULATOR")
            raise

    logger.debug(f"Reconstruction finished after {len(board.history)} moves", layer="SIMULATOR")
    return board


def replay_history(board: Board) -> Board:
    """board の履歴だけから同じ盤面を作り直す"""
    return replay(board.size, board.history)


def undo(board: Board) -> Board:
    """最後の一手を取り消した盤面を新しく作って返す（元の board はそのまま）"""
    if not board.history:
        return create(board.size)
    return replay(board.size, board.history[:-1])
