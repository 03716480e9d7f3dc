# Write lines to a file log from the command line.
#   python main.py --name service "first line" "second line"
#   some_command | python main.py --name service --queue
import argparse
import sys

from file_log.exception.exception import FileLogException
from file_log.logging.logger import get_logger
from file_log.pipeline.file_logger import FileLogger
from file_log.utils.main_utils.config_utils import load_logger_config

log = get_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Append lines to a rotating text log.")
    parser.add_argument("--name", type=str, default=None, help="Base file name of the log")
    parser.add_argument("--dir", dest="log_dir", type=str, default=None, help="Log directory (default Logs)")
    parser.add_argument("--config", type=str, default=None, help="YAML file with logger settings")
    parser.add_argument("--no-date", dest="use_date", action="store_false", default=None,
                        help="Write one static file instead of one file per day")
    parser.add_argument("--no-prefix", dest="use_prefix", action="store_false", default=None,
                        help="Do not prefix lines with a timestamp")
    parser.add_argument("--queue", action="store_true", help="Write through the background queue")
    parser.add_argument("messages", nargs="*", help="Lines to write; read from stdin when omitted")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        config = load_logger_config(
            base_name=args.name,
            config_file_path=args.config,
            log_dir=args.log_dir,
            use_date=args.use_date,
            use_prefix=args.use_prefix,
        )
    except FileLogException as e:
        log.error(f"Invalid logger configuration: {e}")
        print(f"error: {e.message}", file=sys.stderr)
        return 2

    lines = args.messages or (line.rstrip("\n") for line in sys.stdin)
    with FileLogger.from_config(config) as logger:
        write = logger.queue_log if args.queue else logger.log
        for line in lines:
            write(line)
    # after dispose, so queued lines have been written
    last = logger.last_file
    if last is not None:
        print(last.file_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
