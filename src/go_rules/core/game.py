"""
対局の進行（着手・パス・終局判定）を扱うモジュール。
ホスト側（セッション層やAPIサーバ）はこのモジュールの関数だけを呼べばよい。
"""
from go_rules.core.board import Board, create
from go_rules.core.board_view import BoardView
from go_rules.core.capture_processor import apply_captures
from go_rules.core.move import Move, PASS
from go_rules.core.move_validator import check_move
from go_rules.utils.logger import logger

__all__ = ["create", "apply_move", "pass_turn", "is_game_over", "board_view"]


def apply_move(board: Board, position: int) -> Board:
    """
    手番側の石を position に置く。
    不正な手なら IllegalMoveError を送出し、盤面は変更しない。
    検証が通った後の処理は失敗しないため、呼び出し側から途中状態は見えない。
    """
    check_move(board, position)

    player = board.to_move
    previous = board.snapshot()

    # 1. 石を置く
    board.cells[position] = player

    # 2. 石を取る
    captured = apply_captures(board, position)

    # 3. 履歴とコウ判定用の局面を更新し、手番を交代する
    board.history.append(Move(player, position, captured))
    board.prior_snapshot = previous
    board.to_move = player.opposite()

    logger.debug(f"Move {len(board.history)}: {player.label} {board.to_point(position).to_gtp()}", layer="GAME")
    return board


def pass_turn(board: Board) -> Board:
    """パス。常に成功する"""
    player = board.to_move
    board.history.append(Move(player, PASS, frozenset()))
    board.to_move = player.opposite()

    logger.debug(f"Move {len(board.history)}: {player.label} PASS", layer="GAME")
    if is_game_over(board):
        logger.info(f"Game over after {len(board.history)} moves (two consecutive passes)", layer="GAME")
    return board


def is_game_over(board: Board) -> bool:
    """直近2手が両方パスなら終局"""
    if len(board.history) < 2:
        return False
    return board.history[-1].is_pass and board.history[-2].is_pass


def board_view(board: Board) -> BoardView:
    return BoardView.from_board(board, game_over=is_game_over(board))
