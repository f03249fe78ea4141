"""
__main__.py
-----------
Command line entry point.

    python -m pushball [--level FILE] [--log-level LEVEL] [--fps N]
"""

import argparse
import sys

from pushball.core.debug.debug_logger import DebugLogger, LoggerConfig
from pushball.core.runtime.game_settings import Display


def build_parser():
    parser = argparse.ArgumentParser(prog="pushball", description="Push the ball into the goal.")
    parser.add_argument("--level", default="level_01.json",
                        help="Level config file (bare name from pushball/config or a path)")
    parser.add_argument("--log-level", default=None,
                        choices=["NONE", "ERROR", "WARN", "INFO", "VERBOSE"],
                        type=str.upper, help="Console log verbosity")
    parser.add_argument("--fps", type=int, default=Display.FPS,
                        help="Render frame cap")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    LoggerConfig.apply(level=args.log_level)

    # Imported late so --help works without opening a window
    from pushball.core.runtime.main_loop import MainLoop

    DebugLogger.system(f"Starting Pushball with level '{args.level}'")
    MainLoop(level_file=args.level, fps=max(args.fps, 1)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
