import logging
import pygame
from tetris_config import CONFIG, setup_logging
from tetris_game import TetrisGame
from tetris_input import translate, apply, RESTART, QUIT
from tetris_layout import compute_dims
from tetris_render import RenderAssets

logger = logging.getLogger("tetris.main")


def restart(game: TetrisGame) -> TetrisGame:
    """Swap in a fresh game once the current one is over."""
    if not game.game_over:
        return game
    logger.info("restart after score %d", game.score)
    return TetrisGame.new()


def main():
    setup_logging()
    pygame.init()
    try:
        pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN])

        dims = compute_dims()
        screen = pygame.display.set_mode((dims.total_w, dims.total_h))
        pygame.display.set_caption("Tetris")
        font = pygame.font.SysFont(None, 24)
        big_font = pygame.font.SysFont(None, 36)

        render = RenderAssets(dims, font, big_font)
        clock = pygame.time.Clock()
        game = TetrisGame.new()

        while True:
            clock.tick(CONFIG["FPS"])

            for e in pygame.event.get():
                if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    if game.game_over and render.restart_rect.collidepoint(e.pos):
                        game = restart(game)
                    continue
                act = translate(e)
                if act is None:
                    continue
                action, arg = act
                if action == QUIT:
                    return
                if action == RESTART:
                    game = restart(game)
                else:
                    apply(game, action, arg)

            game.update()

            # repaint every frame regardless of input
            render.draw_frame(screen, game)
            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
