#!/usr/bin/env python3
"""
play_vpong.py – play vpong against the computer paddle.

Move the mouse to steer the bottom paddle; first to 7 wins.  When the game
ends click "Play Again" (or press Space / Enter).  Esc quits.

Usage:
  python play_vpong.py [--profile {auto,normal,compact}] [--fps FPS]
                       [--max-frames N] [--log-level LEVEL]

Options:
  --profile     Speed profile.  ``auto`` picks ``compact`` on screens up to
                600 px wide and ``normal`` otherwise.
  --fps         Frames (= simulation ticks) per second.
  --max-frames  Quit after N frames (handy for smoke runs).
"""
from __future__ import annotations

import argparse
import logging

from vpong.game import Game
from vpong.host import detect_screen_width, run
from vpong.profiles import available, classify_display


def main(argv: list[str] | None = None) -> int:
    argp = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    argp.add_argument("--profile", choices=["auto", *available()], default="auto")
    argp.add_argument("--fps", type=int, default=60)
    argp.add_argument("--max-frames", type=int, default=None)
    argp.add_argument("--log-level", default="WARNING",
                      choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = argp.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    profile = args.profile
    if profile == "auto":
        profile = classify_display(detect_screen_width())
    print(f"🎮 Starting vpong ({profile} profile)")

    finished = run(Game(profile), fps=args.fps, max_frames=args.max_frames)
    print(f"✅ {finished} game(s) finished")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
