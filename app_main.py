"""Application entry point for Guess the Flag."""

from __future__ import annotations

import argparse
import socket
import sys

from PySide6.QtWidgets import QApplication

from flag_quiz.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from flag_quiz.core.quiz_manager import QuizManager
from flag_quiz.core.services.quiz_session import QuizSession
from flag_quiz.server.api_server import start_api_server
from flag_quiz.ui.main_window import FlagQuizWindow
from flag_quiz.utils.logging_config import configure_logging


def _determine_browser_url(port: int) -> str:
    """Best-effort determination of the local IP for the browser game URL."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            ip_address = sock.getsockname()[0]
    except OSError:
        ip_address = "127.0.0.1"
    return f"http://{ip_address}:{port}/"


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Guess the Flag quiz game.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="Interface for the browser game server.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port for the browser game server.")
    parser.add_argument("--seed", type=int, default=None, help="Seed the shuffle for a reproducible game.")
    parser.add_argument("--no-server", action="store_true", help="Only open the desktop window.")
    return parser.parse_known_args(argv)[0]


def main() -> None:
    """Initialize logging, start the browser server, and launch the Qt UI."""
    args = _parse_args(sys.argv[1:])
    logger = configure_logging()
    logger.info("Starting Guess the Flag…")

    if not args.no_server:
        web_manager = QuizManager()
        web_manager.set_shuffle_seed(args.seed)
        web_manager.restart()
        start_api_server(quiz_manager=web_manager, host=args.host, port=args.port)
        logger.info("Browser game available at %s", _determine_browser_url(args.port))

    session = QuizSession()
    session.set_shuffle_seed(args.seed)
    session.restart()

    app = QApplication(sys.argv)
    window = FlagQuizWindow(session=session)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
