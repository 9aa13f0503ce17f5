from typing import NamedTuple, Iterator, Tuple, Optional

from sgfmill import common


class Point(NamedTuple):
    row: int
    col: int

    def __add__(self, other: Tuple[int, int]) -> 'Point':
        return Point(self.row + other[0], self.col + other[1])

    def __sub__(self, other: Tuple[int, int]) -> 'Point':
        return Point(self.row - other[0], self.col - other[1])

    def is_valid(self, size: int) -> bool:
        """盤面内に収まっているか判定"""
        return 0 <= self.row < size and 0 <= self.col < size

    def neighbors(self, size: int) -> Iterator['Point']:
        """有効な隣接4近傍を返す（上・下・左・右の順）"""
        for dr, dc in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
            p = self + (dr, dc)
            if p.is_valid(size):
                yield p

    def to_index(self, size: int) -> int:
        """1次元インデックス (row*size + col) に変換"""
        return self.row * size + self.col

    @classmethod
    def from_index(cls, index: int, size: int) -> 'Point':
        """1次元インデックスから Point を生成"""
        return cls(index // size, index % size)

    @classmethod
    def from_gtp(cls, gtp_str: str, size: int) -> Optional['Point']:
        """GTP座標文字列（Q16等）からPointを生成。パスなら None"""
        res = common.move_from_vertex(gtp_str, size)
        return cls(res[0], res[1]) if res else None

    def to_gtp(self) -> str:
        """GTP座標文字列に変換"""
        try:
            return common.format_vertex((self.row, self.col))
        except ValueError:
            # ラベル化できない大きな盤では数値表記にする
            return f"({self.row},{self.col})"
