"""
Main entry point for TicTacToe with time-travel.

Three ways to play:
- Tkinter UI (default)
- OpenCV window (--window): click a cell to play, keys to travel in time
- Console (--no-ui): type commands

Run this script to play TicTacToe!
"""

import cv2
import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional

from engine.board import print_board
from engine.game_engine import GameEngine
from engine.win_checker import DrawRule
from view.config import ViewConfig
from view.board_renderer import BoardRenderer
from view.game_view import GameView, ViewModel


class TicTacToeWindow:
    """
    OpenCV window host.

    Controls:
    - Left click on a cell to play
    - 'b' / 'f' to step back / forward through the history
    - 'r' to reset, 's' to save a screenshot, 'q' to quit
    """

    def __init__(self, engine: Optional[GameEngine] = None, config: Optional[ViewConfig] = None):
        self.config = config or ViewConfig()
        self.renderer = BoardRenderer(self.config)
        self.view = GameView(engine)
        self.frame = None
        self.is_running = False

        self.view.add_listener(self._render)

    def _render(self, model: ViewModel):
        status = f"{model.status}  [step {model.current_step}/{len(model.moves) - 1}]"
        self.frame = self.renderer.render(
            model.board,
            status=status,
            winning_line=model.winning_line
        )

    def _on_mouse(self, event, x, y, flags, param):
        if event == cv2.EVENT_LBUTTONDOWN:
            self.view.click(self.renderer.pixel_to_cell(x, y))

    def start(self):
        """Open the window and run until quit."""
        print("\nStarting TicTacToe game...")
        print("Click a cell to play. Keys: b=back f=forward r=reset s=screenshot q=quit\n")

        cv2.namedWindow(self.config.WINDOW_NAME)
        cv2.setMouseCallback(self.config.WINDOW_NAME, self._on_mouse)

        self.is_running = True
        self._game_loop()

        cv2.destroyAllWindows()

    def _game_loop(self):
        """Main loop: show the latest frame and handle keys."""
        cfg = self.config

        while self.is_running:
            cv2.imshow(cfg.WINDOW_NAME, self.frame)

            key = cv2.waitKey(30) & 0xFF
            if key == ord(cfg.KEY_QUIT):
                print("\nGame quit by user.")
                self.is_running = False
            elif key == ord(cfg.KEY_BACK):
                self.view.step_back()
            elif key == ord(cfg.KEY_FORWARD):
                self.view.step_forward()
            elif key == ord(cfg.KEY_RESET):
                print("\nResetting game...")
                self.view.reset()
            elif key == ord(cfg.KEY_SCREENSHOT):
                filename = f"{cfg.SCREENSHOT_PREFIX}_{int(time.time())}.png"
                cv2.imwrite(filename, self.frame)
                print(f"Saved: {filename}")

            # Window closed with the X button
            if cv2.getWindowProperty(cfg.WINDOW_NAME, cv2.WND_PROP_VISIBLE) < 1:
                self.is_running = False


@dataclass
class Command:
    """A parsed console command."""
    action: str                 # move, jump, back, forward, reset, history, help, quit
    value: Optional[int] = None


CONSOLE_HELP = """Commands:
  0-8        play a cell
  j N        jump to step N (also: jump N)
  b / f      step back / forward
  h          show history
  r          reset
  q          quit"""


def parse_command(text: str) -> Optional[Command]:
    """
    Parse one line of console input.

    Args:
        text: Raw input.

    Returns:
        The Command, or None if the input is not understood.
    """
    parts = text.strip().lower().split()
    if not parts:
        return None

    head = parts[0]

    if len(parts) == 1 and head.isdecimal():
        return Command("move", int(head))

    if head in ("j", "jump"):
        if len(parts) != 2 or not parts[1].isdecimal():
            return None
        return Command("jump", int(parts[1]))

    simple = {
        "b": "back", "back": "back",
        "f": "forward", "forward": "forward",
        "r": "reset", "reset": "reset",
        "h": "history", "history": "history",
        "?": "help", "help": "help",
        "q": "quit", "quit": "quit",
    }
    if len(parts) == 1 and head in simple:
        return Command(simple[head])

    return None


class ConsoleGame:
    """Console host: reads commands, prints the board after each change."""

    def __init__(self, engine: Optional[GameEngine] = None, input_func: Callable[[str], str] = input):
        self.view = GameView(engine)
        self.input_func = input_func
        self.is_running = False

    def handle(self, command: Command):
        """Apply one command to the game."""
        if command.action == "move":
            self.view.click(command.value)
        elif command.action == "jump":
            self.view.jump(command.value)
        elif command.action == "back":
            self.view.step_back()
        elif command.action == "forward":
            self.view.step_forward()
        elif command.action == "reset":
            print("\nResetting game...")
            self.view.reset()
        elif command.action == "history":
            self.print_history()
        elif command.action == "help":
            print(CONSOLE_HELP)
        elif command.action == "quit":
            print("\nGame quit by user.")
            self.is_running = False

    def print_history(self):
        for entry in self.view.model.moves:
            marker = ">" if entry.is_current else " "
            print(f" {marker} {entry.step}: {entry.label}")

    def _print_model(self, model: ViewModel):
        print_board(model.board)
        print(f"\nStep {model.current_step}: {model.status}")

    def start(self):
        print(CONSOLE_HELP)
        self.view.add_listener(self._print_model)
        self.is_running = True

        while self.is_running:
            try:
                text = self.input_func("\n> ")
            except EOFError:
                break

            command = parse_command(text)
            if command is None:
                print(f"Unknown command: {text.strip()!r} (type ? for help)")
                continue
            self.handle(command)


def run_game(game) -> int:
    """
    Run a host until it stops.

    Returns:
        0 on a normal exit, 1 if the OpenCV window could not be opened.
    """
    try:
        game.start()
        return 0
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        return 0
    except cv2.error as e:
        # Headless OpenCV builds have no HighGUI
        print(f"ERROR: Could not open the OpenCV window: {e}")
        print("Window mode needs GUI OpenCV. Install with: pip install opencv-python")
        return 1
    finally:
        print("Goodbye!")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with time-travel")
    parser.add_argument(
        "--window",
        action="store_true",
        help="Play in an OpenCV window instead of the Tkinter UI"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--full-board-draw",
        action="store_true",
        help="Call a draw when all 9 cells are filled instead of checking every line"
    )

    args = parser.parse_args()

    engine = GameEngine(draw_rule=DrawRule.BOARD_FULL if args.full_board_draw else None)

    # Launch UI by default
    if not args.no_ui and not args.window:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(engine=engine)
        ui.run()
        return 0

    print("\n" + "="*60)
    print(f"   TicTacToe - {'Window' if args.window else 'Console'} mode")
    print("="*60 + "\n")

    game = TicTacToeWindow(engine=engine) if args.window else ConsoleGame(engine=engine)

    return run_game(game)


if __name__ == "__main__":
    sys.exit(main())
