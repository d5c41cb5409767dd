"""
TicTacToe UI
A graphical interface for TicTacToe with time-travel using Tkinter.

Shows:
- The rendered board (click a cell to play)
- Game status and next player
- Move history ("Go to move #N" buttons)
"""

import cv2
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

from engine.game_engine import GameEngine
from engine.win_checker import DrawRule
from view.config import ViewConfig
from view.board_renderer import BoardRenderer
from view.game_view import GameView, ViewModel


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, engine: Optional[GameEngine] = None, config: Optional[ViewConfig] = None):
        """Initialize the UI."""
        self.config = config or ViewConfig()
        self.renderer = BoardRenderer(self.config)
        self.view = GameView(engine)

        # Create UI
        self._create_ui()

        # Draws once immediately, then after every change
        self.view.add_listener(self._render)

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.TK_TITLE)
        self.root.configure(bg=self.config.TK_BACKGROUND)
        self.root.geometry(self.config.TK_GEOMETRY)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.config.TK_BACKGROUND)
        style.configure('TLabel', background=self.config.TK_BACKGROUND, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        # Left panel - Board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        ttk.Label(left_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 5))

        width, height = self.renderer.image_size
        self.board_canvas = tk.Canvas(
            left_frame,
            width=width,
            height=height,
            bg='#0f0f1a',
            highlightthickness=2,
            highlightbackground='#00d4ff'
        )
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_canvas_click)

        # Right panel
        right_frame = ttk.Frame(main_frame, width=320)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        # Game status section
        ttk.Label(right_frame, text="📊 Game Status", style='Title.TLabel').pack()

        self.status_label = ttk.Label(right_frame, text="Initializing...", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.step_label = ttk.Label(right_frame, text="Step: 0")
        self.step_label.pack()

        # History section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="⏪ History", style='Title.TLabel').pack()

        self.moves_frame = ttk.Frame(right_frame)
        self.moves_frame.pack(pady=5, fill=tk.X)

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        control_frame = ttk.Frame(right_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="◀ Back",
            font=('Segoe UI', 10, 'bold'),
            bg='#2d3748',
            fg='white',
            width=8,
            command=self.view.step_back
        ).pack(side=tk.LEFT, padx=3)

        tk.Button(
            control_frame,
            text="Forward ▶",
            font=('Segoe UI', 10, 'bold'),
            bg='#2d3748',
            fg='white',
            width=8,
            command=self.view.step_forward
        ).pack(side=tk.LEFT, padx=3)

        tk.Button(
            control_frame,
            text="🔄 Reset",
            font=('Segoe UI', 10, 'bold'),
            bg='#6366f1',
            fg='white',
            width=8,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=3)

        # Quit button
        tk.Button(
            right_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_canvas_click(self, event):
        """Translate a canvas click into a cell."""
        self.view.click(self.renderer.pixel_to_cell(event.x, event.y))

    def _render(self, model: ViewModel):
        """Redraw everything from the view model."""
        self._update_board_canvas(model)

        self.status_label.configure(text=model.status)
        self.step_label.configure(text=f"Step: {model.current_step}")

        self._update_move_list(model)

    def _update_board_canvas(self, model: ViewModel):
        """Draw the viewed board onto the canvas."""
        frame = self.renderer.render(
            model.board,
            status=model.status,
            winning_line=model.winning_line
        )

        # Convert BGR to RGB
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

        image = Image.fromarray(frame_rgb)
        photo = ImageTk.PhotoImage(image)

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

    def _update_move_list(self, model: ViewModel):
        """Rebuild the "Go to move" buttons."""
        for child in self.moves_frame.winfo_children():
            child.destroy()

        for entry in model.moves:
            tk.Button(
                self.moves_frame,
                text=entry.label,
                font=('Segoe UI', 10, 'bold' if entry.is_current else 'normal'),
                bg='#10b981' if entry.is_current else '#16213e',
                fg='black' if entry.is_current else 'white',
                width=24,
                command=lambda s=entry.step: self.view.jump(s)
            ).pack(pady=1)

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.view.reset()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.view.close()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--full-board-draw",
        action="store_true",
        help="Call a draw when all 9 cells are filled instead of checking every line"
    )

    args = parser.parse_args()

    draw_rule = DrawRule.BOARD_FULL if args.full_board_draw else None

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(engine=GameEngine(draw_rule=draw_rule))
    ui.run()


if __name__ == "__main__":
    main()
