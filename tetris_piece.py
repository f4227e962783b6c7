"""Piece model, shape table, rotation, generator"""
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

COLS, ROWS = 10, 20

Color = Tuple[int, int, int]
Mask = List[List[bool]]

_ = False
X = True


class Shape(Enum):
    I = (((X, X, X, X), (_, _, _, _)), (240, 230, 140))
    J = (((X, _, _), (X, X, X)), (0, 0, 255))
    L = (((_, _, X), (X, X, X)), (255, 215, 0))
    O = (((X, X), (X, X)), (255, 255, 0))
    S = (((_, X, X), (X, X, _)), (0, 255, 0))
    T = (((_, X, _), (X, X, X)), (165, 42, 42))
    Z = (((X, X, _), (_, X, X)), (255, 0, 0))

    def __init__(self, mask, color):
        self.mask = mask
        self.color = color

    def new_mask(self) -> Mask:
        return [list(r) for r in self.mask]


def rotate_cw(m: Mask) -> Mask:
    """90° clockwise: new[x][rows-1-y] = old[y][x]"""
    return [list(r) for r in zip(*m[::-1])]


@dataclass
class Piece:
    kind: Shape
    shape: Mask
    color: Color
    x: int
    y: int

    @staticmethod
    def spawn(kind: Shape) -> "Piece":
        return Piece(kind, kind.new_mask(), kind.color, COLS // 2 - 1, 0)

    def cells(self) -> List[Tuple[int, int]]:
        return [(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]


def generate_piece(rng=random) -> Piece:
    return Piece.spawn(rng.choice(list(Shape)))
