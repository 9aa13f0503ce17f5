from collections import deque
from typing import FrozenSet, Iterable, Set

from go_rules.core.board import Board, Stone


def find_group(board: Board, position: int) -> FrozenSet[int]:
    """
    position の石とつながっている同色の石（連）をすべて返す。
    空点なら空集合。再帰を使わず明示的なキューで探索するため、盤の大きさに制限はない。
    """
    color = board.get(position)
    if color == Stone.EMPTY:
        return frozenset()

    group = {position}
    queue = deque([position])

    while queue:
        curr = queue.popleft()
        for neighbor in board.neighbors(curr):
            if neighbor not in group and board.get(neighbor) == color:
                group.add(neighbor)
                queue.append(neighbor)

    return frozenset(group)


def liberties(board: Board, group: Iterable[int]) -> Set[int]:
    """連に隣接する空点（呼吸点）の集合"""
    libs = set()
    for pos in group:
        for neighbor in board.neighbors(pos):
            if board.get(neighbor) == Stone.EMPTY:
                libs.add(neighbor)
    return libs


def count_liberties(board: Board, group: Iterable[int]) -> int:
    """呼吸点の数。複数の石に接する空点も1つとして数える"""
    return len(liberties(board, group))
