import random

from tetris_game import TetrisGame, UPDATE_INTERVAL, LINE_SCORE
from tetris_piece import Shape, Piece, COLS, ROWS, rotate_cw

GREY = (128, 128, 128)


def drop(game):
    """Push the active piece down until it locks."""
    p = game.current
    while game.current is p and not game.game_over:
        game.move_piece(0, 1)
    return p


def test_new_game(clock):
    clock.t = 12.5
    g = TetrisGame.new(random.Random(1), clock)
    assert g.score == 0 and not g.game_over
    assert g.last_update == 12.5
    assert g.update_interval == UPDATE_INTERVAL == 0.75
    assert (g.current.x, g.current.y) == (4, 0)
    assert all(c is None for r in g.board for c in r)


def test_o_piece_lands_on_floor(game):
    game.current = Piece.spawn(Shape.O)
    drop(game)
    b = game.board
    assert b[18][4] == b[18][5] == b[19][4] == b[19][5] == Shape.O.color
    assert sum(c is not None for r in b for c in r) == 4
    assert game.score == 0
    assert game.current.y == 0


def test_floor_move_locks_exactly_once(game, monkeypatch):
    game.current = Piece.spawn(Shape.O)
    game.current.y = ROWS - 2
    calls = []
    real = game.lock_piece
    monkeypatch.setattr(game, "lock_piece", lambda: (calls.append(1), real()))
    resting = game.current
    game.move_piece(0, 1)
    assert len(calls) == 1
    assert game.current is not resting
    assert game.board[ROWS - 1][4] == Shape.O.color


def test_locks_at_last_valid_position(game):
    game.board[10][4] = GREY
    game.current = Piece.spawn(Shape.O)
    drop(game)
    assert game.board[8][4] == game.board[9][5] == Shape.O.color
    assert game.board[10][4] == GREY


def test_single_line_clear(game):
    for x in range(COLS - 1):
        game.board[ROWS - 1][x] = GREY
    game.board[ROWS - 2][0] = GREY
    i = Piece.spawn(Shape.I)
    i.shape = rotate_cw(i.shape)  # vertical, occupies mask column 1
    i.x = COLS - 2
    game.current = i
    drop(game)
    assert game.score == LINE_SCORE
    assert game.lines == 1
    assert game.board[0] == [None] * COLS
    assert len(game.board) == ROWS
    # rows above the cleared one moved down by one
    assert game.board[ROWS - 1][0] == GREY
    assert game.board[ROWS - 1][COLS - 1] == Shape.I.color
    assert [game.board[y][COLS - 1] for y in range(ROWS - 4, ROWS)] == \
        [None] + [Shape.I.color] * 3
    assert all(game.board[ROWS - 1][x] is None for x in range(1, COLS - 1))


def test_multiple_lines_score_flat(game):
    for y in (ROWS - 1, ROWS - 2):
        for x in range(COLS):
            if x not in (4, 5):
                game.board[y][x] = GREY
    game.current = Piece.spawn(Shape.O)
    drop(game)
    assert game.score == 2 * LINE_SCORE
    assert all(c is None for r in game.board for c in r)


def test_move_left_clamps_at_wall(game):
    game.current = Piece.spawn(Shape.T)
    p = game.current
    for _ in range(10):
        game.move_piece(-1, 0)
    assert game.current is p
    assert (p.x, p.y) == (0, 0)
    game.move_piece(0, -1)
    assert (p.x, p.y) == (0, 0)
    assert all(c is None for r in game.board for c in r)


def test_move_right_blocked_by_wall(game):
    game.current = Piece.spawn(Shape.O)
    for _ in range(10):
        game.move_piece(1, 0)
    assert game.current.x == COLS - 2


def test_sideways_collision_reverts_without_lock(game):
    game.board[0][6] = GREY
    game.current = Piece.spawn(Shape.O)
    p = game.current
    game.move_piece(1, 0)
    assert game.current is p
    assert p.x == 4


def test_rotate_piece(game):
    game.current = Piece.spawn(Shape.J)
    game.current.y = 5
    game.rotate_piece()
    assert game.current.shape == [[True, True], [True, False], [True, False]]
    assert (game.current.x, game.current.y) == (4, 5)


def test_rotate_four_times_restores(game):
    game.current = Piece.spawn(Shape.L)
    game.current.y = 5
    before = [r[:] for r in game.current.shape]
    for _ in range(4):
        game.rotate_piece()
    assert game.current.shape == before


def test_rotation_rejected_when_blocked(game):
    game.current = Piece.spawn(Shape.I)
    game.current.y = ROWS - 1
    before = [r[:] for r in game.current.shape]
    game.rotate_piece()
    assert game.current.shape == before
    assert (game.current.x, game.current.y) == (4, ROWS - 1)


def test_gravity_tick(game, clock):
    game.current = Piece.spawn(Shape.O)
    game.update(now=0.5)
    assert game.current.y == 0
    game.update(now=0.75)
    assert game.current.y == 1
    assert game.last_update == 0.75
    game.update(now=1.2)
    assert game.current.y == 1
    clock.t = 1.6
    game.update()
    assert game.current.y == 2
    assert game.last_update == 1.6


def test_game_over_when_spawn_blocked(game):
    for y in (0, 1):
        game.board[y] = [GREY] * COLS
    game.spawn_piece()
    assert game.game_over
    snapshot = [r[:] for r in game.board]
    p = game.current
    anchor = (p.x, p.y)
    game.move_piece(0, 1)
    game.move_piece(-1, 0)
    game.rotate_piece()
    game.update(now=100.0)
    game.spawn_piece()
    assert game.board == snapshot
    assert game.current is p and (p.x, p.y) == anchor
    assert game.score == 0


def test_game_over_after_stacking(game):
    locks = 0
    while not game.game_over:
        drop(game)
        locks += 1
        assert locks < 200
    assert game.game_over
    assert any(c is not None for c in game.board[0] + game.board[1])


def test_piece_cells(game):
    game.current = Piece.spawn(Shape.O)
    assert sorted(game.piece_cells()) == [(4, 0), (4, 1), (5, 0), (5, 1)]
