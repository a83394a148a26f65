"""Mars Robots - Entry Point.

    python rovers.py [input_file]     run an instruction file and print the result
    python rovers.py --serve          serve the HTTP API
"""

import argparse
import sys

from config import load_config
from core.errors import MarsError
from internal.logging import LogLevel, StructuredLogger, get_logger
from simulation.controller import MarsController
from utils.crash import configure as configure_crash, install_crash_handler


def build_parser():
    parser = argparse.ArgumentParser(prog="rovers", description="Drive robots across a Mars grid.")
    parser.add_argument("input_file", nargs="?", help="instruction file (default: mars.input_file from config)")
    parser.add_argument("--config", help="path to a config.json")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARN or ERROR")
    parser.add_argument("--serve", action="store_true", help="serve the HTTP API instead of running a file")
    parser.add_argument("--host")
    parser.add_argument("--port", type=int)
    return parser


def run_file(path, controller=None):
    """Read the instruction file and print the output block. Returns the exit status."""
    try:
        with open(path, encoding="utf-8") as file:
            instructions = file.read()
        output = (controller or MarsController()).run(instructions)
    except (OSError, UnicodeDecodeError, MarsError) as exc:
        get_logger().error("run failed", error=exc, path=str(path))
        print(f"Unexpected error: {exc}.")
        return 1
    print(output)
    return 0


def serve(config, host=None, port=None):
    import uvicorn
    from ui.app import create_app

    uvicorn.run(create_app(config), host=host or config.server.host, port=port or config.server.port)


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    StructuredLogger.configure(min_level=LogLevel.parse(args.log_level or config.logging.level, LogLevel.INFO))
    configure_crash(config.logging.crash_file)
    install_crash_handler()

    if args.serve:
        serve(config, args.host, args.port)
        return 0
    return run_file(args.input_file or config.mars.input_file)


if __name__ == "__main__":
    sys.exit(main())
