"""
Tests for the engine module.
Covers the rules, the move history and time-travel.

Usage:
    python test_engine.py      # Run all tests
    pytest test_engine.py
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from engine import (
    GameEngine,
    GameConfig,
    Symbol,
    InProgress,
    Won,
    Draw,
    DrawRule,
    WinChecker,
    MoveValidator,
    board_from_string,
    empty_board,
    place,
)


def play(engine: GameEngine, cells):
    for cell in cells:
        assert engine.apply_move(cell), f"move {cell} was rejected"
    return engine


def snapshot(engine: GameEngine):
    return engine.history, engine.current_step, engine.x_is_next


# ==================== BOARD ====================

def test_place_returns_new_board():
    board = empty_board()
    new_board = place(board, 4, Symbol.X)

    assert board == (None,) * 9
    assert new_board[4] == Symbol.X
    assert new_board is not board


def test_board_from_string():
    board = board_from_string("XO.|...|..X")
    assert board[0] == Symbol.X
    assert board[1] == Symbol.O
    assert board[8] == Symbol.X
    assert board.count(None) == 6


def test_symbol_opposite():
    assert Symbol.X.opposite() == Symbol.O
    assert Symbol.O.opposite() == Symbol.X


# ==================== WIN CHECKER ====================

def test_winning_lines_order():
    assert WinChecker.WINNING_LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


def test_check_winner_row_column_diagonal():
    checker = WinChecker()

    assert checker.check_winner(board_from_string("XXX|OO.|...")) == Symbol.X
    assert checker.get_winning_line(board_from_string("XO.|XO.|X..")) == (0, 3, 6)
    assert checker.check_winner(board_from_string("..O|XOX|O.X")) == Symbol.O
    assert checker.get_winning_line(board_from_string("..O|XOX|O.X")) == (2, 4, 6)


def test_check_winner_none():
    checker = WinChecker()
    assert checker.check_winner(empty_board()) is None
    assert checker.check_winner(board_from_string("XO.|.X.|O..")) is None


def test_draw_rules():
    checker = WinChecker()
    full = board_from_string("XXO|OOX|XOX")
    partial = board_from_string("XXO|OOX|XO.")
    won_full = board_from_string("XXX|OOX|OXO")

    for rule in DrawRule:
        assert checker.check_draw(full, rule)
        assert not checker.check_draw(partial, rule)
        assert not checker.check_draw(won_full, rule)


# ==================== MOVE VALIDATOR ====================

def test_validator_messages():
    validator = MoveValidator()
    board = board_from_string("X........")
    status = InProgress(Symbol.O)

    assert validator.validate_move(board, 1, status).is_valid

    result = validator.validate_move(board, 0, status)
    assert not result.is_valid
    assert "occupied" in result.error_message

    result = validator.validate_move(board, 9, status)
    assert not result.is_valid
    assert "0-8" in result.error_message

    result = validator.validate_move(board, True, status)
    assert not result.is_valid

    result = validator.validate_move(board, 1, Won(Symbol.X, (0, 1, 2)))
    assert not result.is_valid
    assert "won" in result.error_message


def test_validator_valid_moves():
    validator = MoveValidator()
    board = board_from_string("XO.|...|...")
    assert validator.get_valid_moves(board, InProgress(Symbol.X)) == [2, 3, 4, 5, 6, 7, 8]
    assert validator.get_valid_moves(board, Draw()) == []


# ==================== GAME ENGINE ====================

def test_empty_board_in_progress_x():
    engine = GameEngine()
    assert engine.history_length == 1
    assert engine.current_step == 0
    assert engine.current_board == empty_board()
    assert engine.query_status() == InProgress(Symbol.X)


def test_top_row_win_scenario():
    engine = play(GameEngine(), [0, 4, 1, 3, 2])

    status = engine.query_status()
    assert status == Won(Symbol.X, (0, 1, 2))
    assert engine.history_length == 6
    assert engine.current_step == 5


def test_no_win_before_fifth_move():
    engine = GameEngine()
    for cell in [0, 4, 1, 3]:
        engine.apply_move(cell)
        assert isinstance(engine.query_status(), InProgress)


def test_draw_scenario():
    # X: 0,1,5,6,8  O: 2,3,4,7
    engine = play(GameEngine(), [0, 2, 1, 3, 5, 4, 6, 7, 8])

    assert engine.query_status() == Draw()
    assert engine.current_board == board_from_string("XXO|OOX|XOX")


def test_draw_scenario_board_full_rule():
    engine = play(GameEngine(draw_rule=DrawRule.BOARD_FULL), [0, 2, 1, 3, 5, 4, 6, 7, 8])
    assert engine.query_status() == Draw()


def test_occupied_cell_is_noop():
    engine = play(GameEngine(), [4])
    before = snapshot(engine)

    assert not engine.apply_move(4)
    assert snapshot(engine) == before


def test_out_of_range_cell_is_noop():
    engine = GameEngine()
    before = snapshot(engine)

    assert not engine.apply_move(-1)
    assert not engine.apply_move(9)
    assert not engine.apply_move("4")
    assert snapshot(engine) == before


def test_move_after_win_is_noop():
    engine = play(GameEngine(), [0, 4, 1, 3, 2])
    before = snapshot(engine)

    for cell in [5, 6, 7, 8]:
        assert not engine.apply_move(cell)
    assert snapshot(engine) == before


def test_move_after_draw_is_noop():
    engine = play(GameEngine(), [0, 2, 1, 3, 5, 4, 6, 7, 8])
    before = snapshot(engine)

    for cell in range(9):
        assert not engine.apply_move(cell)
    assert snapshot(engine) == before


def test_x_is_next_alternates():
    engine = GameEngine()
    assert engine.x_is_next

    expected = True
    for cell in [4, 4, 0, 8, 8, 2]:
        accepted = engine.apply_move(cell)
        if accepted:
            expected = not expected
        assert engine.x_is_next == expected

    # Four accepted moves, the repeated cells were rejected
    assert engine.history_length == 5
    assert engine.x_is_next


def test_next_symbol_follows_x_is_next():
    engine = play(GameEngine(), [0, 4, 1])

    for step in range(engine.history_length):
        engine.jump_to(step)
        expected = Symbol.X if engine.x_is_next else Symbol.O
        assert engine.next_symbol == expected
        assert engine.query_status() == InProgress(expected)


def test_symbols_alternate_in_history():
    engine = play(GameEngine(), [0, 1, 2, 3])
    symbols = [entry.symbol for entry in engine.history[1:]]
    assert symbols == [Symbol.X, Symbol.O, Symbol.X, Symbol.O]
    assert [entry.cell for entry in engine.history] == [None, 0, 1, 2, 3]


def test_each_step_adds_one_symbol():
    engine = play(GameEngine(), [4, 0, 8, 2, 1])
    history = engine.history

    for k in range(len(history) - 1):
        before, after = history[k].board, history[k + 1].board
        changed = [i for i in range(9) if before[i] != after[i]]
        assert changed == [history[k + 1].cell]
        assert before[changed[0]] is None


def test_jump_to_keeps_history():
    engine = play(GameEngine(), [0, 4, 1])
    history = engine.history

    assert engine.jump_to(1)
    assert engine.current_step == 1
    assert not engine.x_is_next
    assert engine.history == history
    assert engine.current_board == board_from_string("X........")
    assert engine.query_status() == InProgress(Symbol.O)

    assert engine.jump_to(3)
    assert engine.current_board == history[3].board


def test_jump_then_move_truncates_history():
    engine = play(GameEngine(), [0, 4, 1, 3])
    assert engine.history_length == 5

    engine.jump_to(1)
    assert engine.apply_move(8)

    assert engine.history_length == 3
    assert engine.current_step == 2
    assert engine.current_board == board_from_string("X.......O")
    # Superseded future is gone
    assert all(entry.board[4] is None for entry in engine.history)


def test_jump_back_from_won_game_allows_play():
    engine = play(GameEngine(), [0, 4, 1, 3, 2])
    engine.jump_to(3)

    assert engine.query_status() == InProgress(Symbol.O)
    assert engine.apply_move(2)
    assert engine.history_length == 5
    assert engine.current_board[2] == Symbol.O


def test_jump_out_of_range_is_rejected():
    engine = play(GameEngine(), [0, 4])
    before = snapshot(engine)

    assert not engine.jump_to(3)
    assert not engine.jump_to(-1)
    assert not engine.jump_to(True)
    assert snapshot(engine) == before


def test_deterministic():
    calls = [("move", 0), ("move", 4), ("jump", 1), ("move", 8), ("move", 2), ("jump", 0), ("jump", 3)]

    def run():
        engine = GameEngine()
        for kind, value in calls:
            if kind == "move":
                engine.apply_move(value)
            else:
                engine.jump_to(value)
        return snapshot(engine)

    assert run() == run()


def test_reset():
    engine = play(GameEngine(), [0, 4, 1])
    engine.reset()
    assert engine.history_length == 1
    assert engine.current_step == 0
    assert engine.query_status() == InProgress(Symbol.X)


def test_move_descriptions():
    engine = play(GameEngine(), [0, 4])
    assert engine.move_descriptions() == ["Go to Game Start", "Go to move #1", "Go to move #2"]


def test_status_text():
    engine = GameEngine()
    assert engine.status_text() == "Next player is: X"

    engine.apply_move(0)
    assert engine.status_text() == "Next player is: O"

    play(engine, [4, 1, 3, 2])
    assert engine.status_text() == "Winner is: X !"

    assert engine.status_text(Draw()) == "Game is a draw!"


def test_listeners():
    engine = GameEngine()
    seen = []

    def listener(e):
        seen.append(e.current_step)

    engine.subscribe(listener)
    engine.subscribe(listener)  # only registered once

    engine.apply_move(0)
    engine.apply_move(0)        # rejected, no notification
    engine.jump_to(0)
    engine.reset()
    assert seen == [1, 0, 0]

    engine.unsubscribe(listener)
    engine.apply_move(4)
    assert seen == [1, 0, 0]


def test_config_defaults():
    config = GameConfig()
    assert config.BOARD_SIZE == 3
    assert config.CELL_COUNT == 9
    assert not hasattr(config, "FIRST_PLAYER")
    assert config.DRAW_RULE == DrawRule.ALL_LINES_OCCUPIED

    engine = GameEngine(config=config, verbose=False)
    assert engine.draw_rule == DrawRule.ALL_LINES_OCCUPIED
    assert not engine.verbose


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Engine Tests")
    print("="*60)

    tests = [(name, func) for name, func in globals().items()
             if name.startswith("test_") and callable(func)]

    failed = 0
    for name, func in tests:
        try:
            func()
            print(f"  ✓ PASS  {name}")
        except AssertionError as e:
            failed += 1
            print(f"  ✗ FAIL  {name}: {e}")

    print("="*60)
    print(f"   {len(tests) - failed}/{len(tests)} passed")
    print("="*60)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(run_all_tests())
