import argparse
import logging

from flaghack import config
from flaghack.engine import Engine
from flaghack.logging_config import setup_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Plant flags, draw ley lines, find pentagrams.")
    parser.add_argument("--config", help="YAML settings file (defaults to the packaged one)")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    parser.add_argument("--log-file", help="also write logs to this file")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)
    cfg = config.load_config(args.config)
    engine = Engine(cfg)
    engine.run()


if __name__ == "__main__":
    main()
