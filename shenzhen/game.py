from __future__ import annotations
import logging
from typing import Callable, Optional

from shenzhen.config import tweak
from shenzhen.deal import new_shuffled_game
from shenzhen.engine import Board
from shenzhen.selection import Selection, Selection_Machine

logger = logging.getLogger(__name__)


class Game:
    """One play session: the board, the pending selection and the notice."""

    def __init__(self, seed: Optional[int] = None, new_board: Callable[[Optional[int]], Board] = new_shuffled_game):
        self.new_board = new_board
        self.seed = seed
        self.board = new_board(seed)
        self.machine = Selection_Machine(self.board)

    @property
    def selection(self) -> Selection:
        return self.machine.selection

    @property
    def notice(self) -> Optional[str]:
        return self.machine.notice

    def new_game(self) -> None:
        # A fixed seed only applies to the first deal
        self.seed = None
        self.board = self.new_board(None)
        self.machine.engine = self.board
        self.machine.reset()

    def handle_key(self, key: str) -> bool:
        """Process one key. Returns False once the player asks to quit."""
        if key == tweak["quit_key"]:
            logger.info("Quit")
            return False
        if key == tweak["new_game_key"]:
            self.new_game()
            return True
        was_won = self.is_won()
        self.machine.handle_key(key)
        if self.is_won() and not was_won:
            logger.info("Game won")
        return True

    def remaining_card_count(self) -> int:
        return self.board.remaining_card_count()

    def is_won(self) -> bool:
        return self.remaining_card_count() == 0

    def status_text(self) -> str:
        if self.notice is not None:
            return self.notice
        if self.is_won():
            return tweak["status_won"]
        return tweak["status_remaining"].format(count=self.remaining_card_count())
