"""
Console tic-tac-toe.

Reads commands and coordinates from stdin. With --show the board is also
drawn in an OpenCV window after every input.

Usage:
    python scripts/play.py
    python scripts/play.py --config config/default_config.yaml
    python scripts/play.py --show -v
"""
import sys
import argparse
import logging
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from tictactoe.core import Config, DEFAULT_CONFIG_PATH
from tictactoe.board import format_status
from tictactoe.game import GameSession, GOODBYE

logger = logging.getLogger(__name__)

WINDOW_NAME = "TicTacToe"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play tic-tac-toe in the console")
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Config YAML (default: %(default)s)"
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Also draw the board in an OpenCV window"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    config = Config(args.config)

    level = logging.DEBUG if args.verbose else config.log_level()
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    visualizer = None
    if args.show:
        try:
            from tictactoe.board.visualizer import BoardVisualizer
        except ImportError as e:
            logger.error(f"--show needs opencv-python (pip install .[render]): {e}")
            return 1
        visualizer = BoardVisualizer.from_config(config.get_section("render"))

    session = GameSession(config)
    print("\n".join(session.intro()))

    try:
        for line in sys.stdin:
            output = session.handle(line)
            if output:
                print("\n".join(output))
            if visualizer is not None and session.game is not None:
                _show(visualizer, session)
            if session.stopped:
                break
        else:
            print(GOODBYE)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    finally:
        if visualizer is not None:
            import cv2
            cv2.destroyAllWindows()

    return 0


def _show(visualizer, session: GameSession) -> None:
    import cv2

    game = session.game
    image = visualizer.draw_board(game.board)
    if game.is_over:
        info = [format_status(game.last_status)]
    else:
        info = [f"Player {game.active_player} to move"]
    image = visualizer.draw_info_panel(image, info)
    cv2.imshow(WINDOW_NAME, image)
    cv2.waitKey(1)


if __name__ == "__main__":
    sys.exit(main())
