#!/usr/bin/env python3
"""
Flappy Arcade
=============

Single-player flappy game with a persistent best score.

Controls:
    - Space / Up / X / Click / Tap: Flap (restarts after game over)
    - R: Restart round
    - ESC: Quit

Usage:
    python -m flappy_arcade [--db PATH | --no-save] [--seed SEED] [--scaled]
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from typing import Optional, Sequence

from .constants import DB_FILE, LOGGER_NAME
from .game_session import GameSession
from .score_store import MemoryScoreStore, SqliteScoreStore


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace(f"{LOGGER_NAME}.", "")
        return f"{ts} [{record.levelname[0]}] {name}: {record.getMessage()}"


def setup_logging(level: str = "info") -> None:
    """Configure the flappy_arcade root logger."""
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flappy-arcade", description="Play Flappy Arcade")
    store = parser.add_mutually_exclusive_group()
    store.add_argument("--db", default=DB_FILE, help="SQLite file holding the best score")
    store.add_argument("--no-save", action="store_true", help="Do not persist the best score")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for pipe gaps")
    parser.add_argument("--scaled", action="store_true",
                        help="Scale the window to the display while keeping logical coordinates")
    parser.add_argument("--log-level", default="info",
                        choices=["debug", "info", "warning", "error"])
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    logger = logging.getLogger(LOGGER_NAME)

    store = MemoryScoreStore() if args.no_save else SqliteScoreStore(args.db)
    session = GameSession(store=store, seed=args.seed)
    logger.info("Best score so far: %d", session.best)

    # Imported late so the simulation core stays usable without a display
    import pygame
    from .client import FlappyClient

    try:
        client = FlappyClient(session, scaled=args.scaled)
        client.run()
    except pygame.error as e:
        logger.error("Could not open the game window: %s", e)
        return 1
    except KeyboardInterrupt:
        pass
    finally:
        if isinstance(store, SqliteScoreStore):
            store.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
