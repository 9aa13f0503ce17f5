from typing import FrozenSet, Set

from go_rules.core.board import Board, Stone
from go_rules.core.group_analyzer import count_liberties, find_group
from go_rules.utils.logger import logger


def remove_dead_groups(board: Board, position: int, player: Stone) -> FrozenSet[int]:
    """
    position に置かれた player の石に隣接する相手の連のうち、呼吸点が0のものを盤上から取り除く。
    アゲハマの集計は行わない（検証用の仮盤面でも使うため）。
    """
    opponent = player.opposite()
    captured: Set[int] = set()

    for neighbor in board.neighbors(position):
        # 2方向から接している連は一度だけ取る
        if neighbor in captured or board.get(neighbor) != opponent:
            continue
        group = find_group(board, neighbor)
        if count_liberties(board, group) == 0:
            for pos in group:
                board.cells[pos] = Stone.EMPTY
            captured.update(group)

    return frozenset(captured)


def apply_captures(board: Board, position: int) -> FrozenSet[int]:
    """石を取り除き、着手した側のアゲハマに加算する"""
    player = board.get(position)
    captured = remove_dead_groups(board, position, player)
    if captured:
        board.captured[player] += len(captured)
        labels = ", ".join(sorted(board.to_point(p).to_gtp() for p in captured))
        logger.info(f"{player.label} captured {len(captured)} stone(s): {labels}", layer="CAPTURE")
    return captured
