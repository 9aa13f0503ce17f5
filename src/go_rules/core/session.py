import threading
import uuid
from dataclasses import dataclass, field
from typing import Dict, List

from go_rules import config
from go_rules.core.board import Board, create
from go_rules.core.board_view import BoardView
from go_rules.core.errors import GameNotFoundError
from go_rules.core.game import apply_move, board_view, pass_turn
from go_rules.utils.logger import logger


@dataclass
class GameSession:
    """1局分の盤面と、その盤面専用のロック"""
    game_id: str
    board: Board
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class GameRegistry:
    """
    ホスト層（APIサーバ等）向けの対局レジストリ。
    着手の直列化は対局ごとのロックで行い、別の対局同士は互いに待たない。
    レジストリ自体のロックは辞書の出し入れにだけ使う。
    """

    def __init__(self):
        self._games: Dict[str, GameSession] = {}
        self._lock = threading.Lock()

    def create_game(self, size: int = config.DEFAULT_BOARD_SIZE) -> str:
        board = create(size)
        game_id = uuid.uuid4().hex
        with self._lock:
            self._games[game_id] = GameSession(game_id, board)
        logger.info(f"New {size}x{size} game created: {game_id}", layer="SESSION")
        return game_id

    def get(self, game_id: str) -> GameSession:
        with self._lock:
            session = self._games.get(game_id)
        if session is None:
            raise GameNotFoundError(game_id)
        return session

    def play(self, game_id: str, position: int) -> BoardView:
        session = self.get(game_id)
        with session.lock:
            apply_move(session.board, position)
            return board_view(session.board)

    def pass_turn(self, game_id: str) -> BoardView:
        session = self.get(game_id)
        with session.lock:
            pass_turn(session.board)
            return board_view(session.board)

    def view(self, game_id: str) -> BoardView:
        session = self.get(game_id)
        with session.lock:
            return board_view(session.board)

    def remove(self, game_id: str) -> None:
        with self._lock:
            if self._games.pop(game_id, None) is None:
                raise GameNotFoundError(game_id)
        logger.info(f"Game removed: {game_id}", layer="SESSION")

    @property
    def game_ids(self) -> List[str]:
        with self._lock:
            return list(self._games)

    def __len__(self):
        with self._lock:
            return len(self._games)

    def __contains__(self, game_id):
        with self._lock:
            return game_id in self._games
