"""Key events -> game actions"""
import pygame

MOVE, ROTATE, RESTART, QUIT = "move", "rotate", "restart", "quit"

KEYMAP = {
    pygame.K_LEFT: (MOVE, (-1, 0)),
    pygame.K_RIGHT: (MOVE, (1, 0)),
    pygame.K_DOWN: (MOVE, (0, 1)),
    pygame.K_UP: (ROTATE, None),
    pygame.K_r: (RESTART, None),
    pygame.K_ESCAPE: (QUIT, None),
}


def translate(e):
    """Map one pygame event to an (action, arg) pair, or None.

    Only KEYDOWN counts, so a held key acts once per press.
    """
    if e.type == pygame.QUIT:
        return QUIT, None
    if e.type == pygame.KEYDOWN:
        return KEYMAP.get(e.key)
    return None


def apply(game, action, arg):
    """Run a move/rotate action against the game. Restart and quit belong to the shell."""
    if action == MOVE:
        game.move_piece(*arg)
    elif action == ROTATE:
        game.rotate_piece()
