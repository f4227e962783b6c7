"""Game state: active piece, gravity tick, locking, scoring"""
import logging
import random
import time
from typing import Callable, List, Optional, Tuple

from tetris_board import Board, new_board, collide, merge, clear_lines
from tetris_piece import Piece, generate_piece, rotate_cw

logger = logging.getLogger("tetris.game")

UPDATE_INTERVAL = 0.75  # seconds per gravity step
LINE_SCORE = 100


class TetrisGame:
    """One game from first spawn to game over.

    Restarting means building a new instance with ``TetrisGame.new()``;
    nothing here resets an existing game in place.
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 clock: Optional[Callable[[], float]] = None):
        self.rng = rng or random.Random()
        self.clock = clock or time.monotonic
        self.board: Board = new_board()
        self.current: Piece = generate_piece(self.rng)
        self.game_over = False
        self.score = 0
        self.lines = 0
        self.last_update = self.clock()
        self.update_interval = UPDATE_INTERVAL
        self.spawn_piece()

    @classmethod
    def new(cls, rng=None, clock=None) -> "TetrisGame":
        game = cls(rng, clock)
        logger.info("new game, first piece %s", game.current.kind.name)
        return game

    def spawn_piece(self):
        if self.game_over:
            return
        self.current = generate_piece(self.rng)
        if collide(self.board, self.current):
            self.game_over = True
            logger.info("game over: %s blocked at spawn, score %d",
                        self.current.kind.name, self.score)

    def piece_collides(self) -> bool:
        return collide(self.board, self.current)

    def move_piece(self, dx: int, dy: int):
        if self.game_over:
            return
        p = self.current
        old = p.x, p.y
        # anchors never go negative; pushing past the left/top edge just clamps
        p.x = max(0, p.x + dx)
        p.y = max(0, p.y + dy)
        if self.piece_collides():
            p.x, p.y = old
            if dy > 0:
                self.lock_piece()

    def rotate_piece(self):
        if self.game_over:
            return
        old_shape = self.current.shape
        self.current.shape = rotate_cw(old_shape)
        if self.piece_collides():
            self.current.shape = old_shape

    def lock_piece(self):
        merge(self.board, self.current)
        logger.debug("locked %s at (%d, %d)", self.current.kind.name,
                     self.current.x, self.current.y)
        self.clear_lines()
        self.spawn_piece()

    def clear_lines(self) -> int:
        c = clear_lines(self.board)
        if c:
            self.score += c * LINE_SCORE
            self.lines += c
            logger.debug("cleared %d line(s), score %d", c, self.score)
        return c

    def update(self, now: Optional[float] = None):
        """Per-frame tick: one gravity step every ``update_interval`` seconds."""
        if now is None:
            now = self.clock()
        if now - self.last_update >= self.update_interval and not self.game_over:
            self.move_piece(0, 1)
            self.last_update = now

    def piece_cells(self) -> List[Tuple[int, int]]:
        return self.current.cells()
