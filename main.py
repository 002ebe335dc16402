"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.
Both front ends drive the same GameController.
"""

import logging
from typing import Optional, Tuple

from tictactoe import ErrorKind, GameConfig, GameController, GameMode, Player

MODES = {
    "two-human": GameMode.TWO_HUMAN,
    "vs-ai": GameMode.HUMAN_VS_AUTO,
}


class ConsoleGame:
    """
    Text-mode TicTacToe.

    Game flow:
    1. Human enters "row col" for the side to move
    2. In vs-ai mode the AI answers straight away
    3. Repeat until someone wins or it's a draw
    4. 'r' starts a rematch, 'q' quits
    """

    def __init__(self, mode: GameMode, human_player: Player, config: GameConfig = None):
        self.controller = GameController(config)
        self.mode = mode
        self.human_player = human_player
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\n" + "=" * 40)
        print("   TicTacToe")
        print("=" * 40)
        print("Enter moves as 'row col' (0-2). 'r' to reset, 'q' to quit.")

        state = self.controller.initialize(self.mode, self.human_player)
        if state.automated_symbol is not None:
            print(f"You play {self.human_player.value}, the AI plays {state.automated_symbol.value}.")

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            state = self.controller.current_state()
            state.print_board()

            if state.is_game_over:
                self._show_game_result()
                if not self._ask_rematch():
                    break
                self.controller.reset_game()
                continue

            command = input(f"\n{state.current_player.value} > ").strip().lower()
            if command == "q":
                print("\nGame quit by user.")
                self.is_running = False
            elif command == "r":
                self.controller.reset_game()
                print("Game reset!")
            else:
                self._process_human_move(command)

    def _process_human_move(self, command: str):
        """
        Parse and play a move typed by the human.

        Args:
            command: Text such as "1 1" or "1,1".
        """
        move = self._parse_move(command)
        if move is None:
            print("Please enter a row and a column, e.g. '1 1'.")
            return

        result = self.controller.make_move(*move)
        if not result.is_valid:
            print(f"WARNING: {result.error_message}")
            if result.error == ErrorKind.MOVE_AFTER_GAME_OVER:
                print("Press 'r' to play again.")

    @staticmethod
    def _parse_move(command: str) -> Optional[Tuple[int, int]]:
        parts = command.replace(",", " ").split()
        if len(parts) != 2:
            return None
        try:
            return int(parts[0]), int(parts[1])
        except ValueError:
            return None

    def _show_game_result(self):
        """Show the final game result."""
        state = self.controller.current_state()
        print("\n" + "=" * 40)
        print("   GAME OVER!")
        print("=" * 40)

        if state.winner is None:
            print("\nIt's a draw! Good game!")
        elif state.automated_symbol is None:
            print(f"\n{state.winner.value} wins!")
        elif state.winner == state.human_symbol:
            print("\nCongratulations! You won!")
        else:
            print("\nThe AI wins! Better luck next time!")

    @staticmethod
    def _ask_rematch() -> bool:
        answer = input("\nPlay again? [y/N] ").strip().lower()
        return answer in ("y", "yes")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--mode",
        choices=sorted(MODES),
        default="vs-ai",
        help="Play against another human or against the AI (console mode)"
    )
    parser.add_argument(
        "--human",
        choices=["X", "O"],
        default="X",
        help="Symbol for the human player; X moves first (console mode)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging, including search statistics"
    )

    args = parser.parse_args()

    config = GameConfig()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
    )

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(config)
        ui.run()
        return

    game = ConsoleGame(MODES[args.mode], Player(args.human), config)
    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
