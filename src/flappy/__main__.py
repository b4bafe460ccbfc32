#!/usr/bin/env python3
"""Command-line entry point.

Usage:
    python -m flappy
    flappy --highscore scores.txt --assets ./assets --mute
"""

import argparse
import logging
import random

from .audio import AudioPlayer, default_sounds
from .constants import HIGHSCORE_FILE, ASSETS_DIR, RENDER_FPS
from .data_models import Session
from .flappy_client import FlappyClient
from .game_engine import GameEngine
from .log import setup_logging
from .pipe_stream import PipeStream
from .score_store import ScoreStore

logger = logging.getLogger("flappy.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flappy", description="Flap through the pipes.")
    parser.add_argument("--highscore", default=HIGHSCORE_FILE, help="high score file")
    parser.add_argument("--assets", default=ASSETS_DIR, help="directory holding sprites/ and audio/")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="frames per second")
    parser.add_argument("--seed", type=int, default=None, help="seed for pipe placement")
    parser.add_argument("--mute", action="store_true", help="disable sound effects")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    store = ScoreStore(args.highscore)
    session = Session(high_score=store.load())
    engine = GameEngine(session=session, pipe_stream=PipeStream(rng=random.Random(args.seed)))
    logger.info("Starting with high score %d", session.high_score)

    audio = AudioPlayer(default_sounds(args.assets), enabled=not args.mute)
    FlappyClient(engine, store, audio, assets_dir=args.assets, fps=args.fps).run()


if __name__ == "__main__":
    main()
