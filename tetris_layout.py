# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS


@dataclass
class Dims:
    cell: int
    margin: int
    header_h: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    footer_y: int
    button_w: int
    button_h: int


def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 12
    header_h = 56
    footer_h = 64

    board_w = COLS * cell
    board_h = ROWS * cell

    total_w = margin + board_w + margin
    total_h = margin + header_h + board_h + footer_h + margin

    board_x = margin
    board_y = margin + header_h
    footer_y = board_y + board_h + 8

    return Dims(
        cell=cell, margin=margin, header_h=header_h,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        footer_y=footer_y, button_w=96, button_h=26
    )
