"""
game.py
-------
Command-line entry point.
"""

import argparse

from lanerunner.core.debug.debug_logger import LoggerConfig
from lanerunner.core.runtime.main_loop import MainLoop


def main(argv=None):
    parser = argparse.ArgumentParser(prog="lanerunner", description="Lane-crossing arcade game")
    parser.add_argument("--assets", default=".", help="directory containing images/")
    parser.add_argument("--seed", type=int, default=None, help="seed for enemy and bonus spawns")
    parser.add_argument("--log-level", default=LoggerConfig.LOG_LEVEL,
                        choices=("NONE", "ERROR", "WARN", "INFO", "VERBOSE"))
    args = parser.parse_args(argv)

    LoggerConfig.LOG_LEVEL = args.log_level
    MainLoop(asset_root=args.assets, seed=args.seed).run()


if __name__ == "__main__":
    main()
