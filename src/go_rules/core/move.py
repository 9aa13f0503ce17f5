from dataclasses import dataclass, field
from typing import FrozenSet

# パスを表す位置
PASS = -1


@dataclass(frozen=True)
class Move:
    """一手の記録。履歴に追加された後は変更されない"""
    player: 'Stone'
    position: int
    captured_positions: FrozenSet[int] = field(default_factory=frozenset)

    @property
    def is_pass(self) -> bool:
        return self.position == PASS
