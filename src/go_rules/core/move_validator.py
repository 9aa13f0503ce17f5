from typing import List, Optional, Tuple, Type

from go_rules.core.board import Board, Stone
from go_rules.core.capture_processor import remove_dead_groups
from go_rules.core.errors import (
    IllegalMoveError,
    OccupiedError,
    OutOfBoundsError,
    RecaptureViolationError,
    SuicideError,
)
from go_rules.core.group_analyzer import count_liberties, find_group
from go_rules.utils.logger import logger


def _captures_any(scratch: Board, position: int, player: Stone) -> bool:
    """仮に置いた石によって呼吸点0になる相手の連があるか"""
    opponent = player.opposite()
    for neighbor in scratch.neighbors(position):
        if scratch.get(neighbor) == opponent:
            if count_liberties(scratch, find_group(scratch, neighbor)) == 0:
                return True
    return False


def find_violation(board: Board, position) -> Optional[Tuple[Type[IllegalMoveError], str]]:
    """
    手番側が position に打った場合に違反するルールを返す。合法なら None。
    判定はすべて仮盤面の上で行い、board 自体は変更しない。

    判定順:
      1. 盤外
      2. 既に石がある
      3. 自殺手（相手の石を取れる場合は除く）
      4. コウ: 着手と石取りの結果が直前局面 (prior_snapshot) と完全に一致する
    """
    player = board.to_move

    # 1. 盤外チェック
    if not board.is_on_board(position):
        return OutOfBoundsError, f"OutOfBounds: position {position!r} is outside 0..{board.num_cells - 1}"

    pt_str = board.to_point(position).to_gtp()

    # 2. 座標の重複チェック
    if not board.is_empty(position):
        return OccupiedError, f"Occupied: {pt_str} already has a {board.get(position).key} stone"

    # 3. 自殺手のチェック（実際に置いてみる）
    scratch = Board(board.size)
    scratch.cells = board.snapshot()
    scratch.cells[position] = player
    if count_liberties(scratch, find_group(scratch, position)) == 0 and not _captures_any(scratch, position, player):
        return SuicideError, f"Suicide: {pt_str} leaves its group without liberties"

    # 4. コウのチェック（1子だけでなく盤面全体を比較する）
    snapshot = board.prior_snapshot
    if snapshot is not None and len(snapshot) == len(board.cells):
        remove_dead_groups(scratch, position, player)
        if scratch.cells == snapshot:
            return RecaptureViolationError, f"RecaptureViolation: {pt_str} would repeat the previous position"

    return None


def check_move(board: Board, position) -> None:
    """打てない場合は理由に応じた IllegalMoveError を送出する"""
    player = board.to_move
    logger.debug(f"Validating Move -> Color: {player.label}, Position: {position!r}", layer="RULES")

    violation = find_violation(board, position)
    if violation:
        error_cls, message = violation
        logger.warning(f"Result: ILLEGAL | Reason: {error_cls.reason.value} | Color: {player.label} | Position: {position!r}", layer="RULES")
        raise error_cls(position, player, message)

    logger.debug(f"Result: LEGAL for {position!r}", layer="RULES")


def is_legal(board: Board, position) -> bool:
    return find_violation(board, position) is None


def legal_moves(board: Board) -> List[int]:
    """手番側の合法手をすべて列挙する"""
    return [pos for pos in range(board.num_cells)
            if board.is_empty(pos) and find_violation(board, pos) is None]
