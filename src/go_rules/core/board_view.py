from typing import TYPE_CHECKING, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from go_rules.core.move import Move
from go_rules.core.point import Point

if TYPE_CHECKING:
    from go_rules.core.board import Board


class MoveRecord(BaseModel):
    """履歴の一手をシリアライズ可能にしたもの"""
    model_config = ConfigDict(frozen=True)

    color: str = Field(..., pattern="^[BW]$", description="石の色 ('B' または 'W')")
    position: int = Field(..., ge=-1, description="1次元インデックス。パスは -1")
    coord: str = Field(..., description="GTP形式の座標 (例: 'D4', 'pass')")
    captured: List[int] = Field(default_factory=list, description="この手で取った石の位置")

    @classmethod
    def from_move(cls, move: Move, size: int) -> 'MoveRecord':
        coord = "pass" if move.is_pass else Point.from_index(move.position, size).to_gtp()
        return cls(
            color=move.player.key[0].upper(),
            position=move.position,
            coord=coord,
            captured=sorted(move.captured_positions),
        )

    def to_list(self) -> List[str]:
        """[['B', 'D4'], ...] 形式の一要素に変換する"""
        return [self.color, self.coord]


class BoardView(BaseModel):
    """盤面の読み取り専用ビュー（API層でそのまま JSON にできる）"""
    model_config = ConfigDict(frozen=True)

    size: int = Field(..., gt=0)
    grid: List[List[int]] = Field(..., description="行ごとの交点 (0=空, 1=黒, 2=白)")
    to_move: str = Field(..., pattern="^(black|white)$")
    captures: Dict[str, int] = Field(..., description="各プレイヤーが取った石の数")
    game_over: bool = False
    move_number: int = Field(default=0, ge=0)
    last_move: Optional[MoveRecord] = None
    history: List[MoveRecord] = Field(default_factory=list)

    @classmethod
    def from_board(cls, board: 'Board', game_over: bool = False) -> 'BoardView':
        history = [MoveRecord.from_move(m, board.size) for m in board.history]
        return cls(
            size=board.size,
            grid=[[int(s) for s in row] for row in board.rows()],
            to_move=board.to_move.key,
            captures={player.key: count for player, count in board.captured.items()},
            game_over=game_over,
            move_number=len(board.history),
            last_move=history[-1] if history else None,
            history=history,
        )
