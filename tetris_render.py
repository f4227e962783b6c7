"""
Rendering helpers for the Tetris window.

- Pre-render the static background (board frame + grid) once per Dims.
- Cache one filled cell Surface per colour and blit it.
- Cache HUD text surfaces; re-render the score only when it changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional
from tetris_layout import Dims, COLS, ROWS
from tetris_piece import Color

BG = (27, 27, 27)
GRID = (160, 160, 160)
TEXT = (220, 220, 220)
BUTTON = (60, 60, 60)
BUTTON_EDGE = (140, 140, 140)


@dataclass
class HudCache:
    score: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    game_over_s: Optional[pygame.Surface] = None
    restart_s: Optional[pygame.Surface] = None


class RenderAssets:
    """Holds pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.cell_surf: Dict[Color, pygame.Surface] = {}
        self.hud = HudCache()
        self.restart_rect = pygame.Rect(dims.board_x, dims.footer_y + 26,
                                        dims.button_w, dims.button_h)
        self._make_static()

    # ---------- Static background (grid) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BG)

    def draw_grid(self, screen: pygame.Surface):
        d = self.dims
        for x in range(COLS + 1):
            X = d.board_x + x * d.cell
            pygame.draw.line(screen, GRID, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS + 1):
            Y = d.board_y + y * d.cell
            pygame.draw.line(screen, GRID, (d.board_x, Y), (d.board_x + d.board_w, Y))

    # ---------- Cells ----------
    def _cell(self, color: Color) -> pygame.Surface:
        s = self.cell_surf.get(color)
        if s is None:
            c = self.dims.cell
            s = pygame.Surface((c, c))
            s.fill(color)
            self.cell_surf[color] = s
        return s

    def draw_cell(self, screen: pygame.Surface, color: Color, bx: int, by: int):
        rx = self.dims.board_x + bx * self.dims.cell
        ry = self.dims.board_y + by * self.dims.cell
        screen.blit(self._cell(color), (rx, ry))

    def draw_board(self, screen: pygame.Surface, board):
        for y, row in enumerate(board):
            for x, col in enumerate(row):
                if col is not None:
                    self.draw_cell(screen, col, x, y)

    def draw_piece(self, screen: pygame.Surface, piece):
        for bx, by in piece.cells():
            self.draw_cell(screen, piece.color, bx, by)

    # ---------- HUD ----------
    def draw_hud(self, screen: pygame.Surface, score: int, game_over: bool):
        d = self.dims
        if self.hud.title is None:
            self.hud.title = self.big_font.render("Tetris", True, TEXT)
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = self.font.render(f"Score: {score}", True, TEXT)
        screen.blit(self.hud.title, (d.board_x, d.margin))
        screen.blit(self.hud.score_s, (d.board_x, d.margin + 34))
        if not game_over:
            return
        if self.hud.game_over_s is None:
            self.hud.game_over_s = self.font.render("Game Over!", True, TEXT)
            self.hud.restart_s = self.font.render("Restart", True, TEXT)
        screen.blit(self.hud.game_over_s, (d.board_x, d.footer_y))
        pygame.draw.rect(screen, BUTTON, self.restart_rect)
        pygame.draw.rect(screen, BUTTON_EDGE, self.restart_rect, 1)
        screen.blit(self.hud.restart_s, self.hud.restart_s.get_rect(center=self.restart_rect.center))

    def draw_frame(self, screen: pygame.Surface, game):
        """Full redraw of one frame from the game's read-only state."""
        screen.blit(self.bg, (0, 0))
        self.draw_grid(screen)
        self.draw_board(screen, game.board)
        self.draw_piece(screen, game.current)
        self.draw_hud(screen, game.score, game.game_over)
