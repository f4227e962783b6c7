"""Board helpers: collide, merge, clear_lines"""
from typing import Optional, List
from tetris_piece import Piece, Color, COLS, ROWS

Board = List[List[Optional[Color]]]


def new_board() -> Board:
    return [[None] * COLS for _ in range(ROWS)]


def collide(board: Board, piece: Piece) -> bool:
    for y, row in enumerate(piece.shape):
        for x, v in enumerate(row):
            if not v: continue
            bx, by = piece.x + x, piece.y + y
            if bx < 0 or by < 0 or bx >= COLS or by >= ROWS: return True
            if board[by][bx] is not None: return True
    return False


def merge(board: Board, piece: Piece):
    for bx, by in piece.cells():
        board[by][bx] = piece.color


def clear_lines(board: Board) -> int:
    """Drop full rows, refill from the top. Returns the number removed."""
    kept = [row for row in board if not all(c is not None for c in row)]
    c = len(board) - len(kept)
    board[:] = [[None] * COLS for _ in range(c)] + kept
    return c
