import sys
from dataclasses import dataclass

from file_log.constants import file_logger as constants
from file_log.exception.exception import FileLogException


@dataclass(frozen=True)
class FileLoggerConfig:
    """Configuration for a single FileLogger instance.
    Set at construction and immutable thereafter.

    Attributes:
        base_name (str): Base file name, without directory or extension.
        log_dir (str): Directory the log files live in; created if absent.
        use_date (bool): Rotate daily and embed the date in the file name.
        use_prefix (bool): Prefix every line with a timestamp.
        retention_days (int): Age in days after which rotated files are swept.
        shutdown_timeout (float): Seconds dispose() waits for the consumer thread.
        encoding (str): Text encoding of the log files.
        mark_queued_lines (bool): Prefix queued lines with "Queue " as well.
    """

    base_name: str
    log_dir: str = constants.DEFAULT_LOG_DIR
    use_date: bool = constants.DEFAULT_USE_DATE
    use_prefix: bool = constants.DEFAULT_USE_PREFIX
    retention_days: int = constants.RETENTION_DAYS
    shutdown_timeout: float = constants.SHUTDOWN_TIMEOUT_SECONDS
    encoding: str = constants.DEFAULT_ENCODING
    mark_queued_lines: bool = constants.DEFAULT_MARK_QUEUED_LINES

    def __post_init__(self):
        if not isinstance(self.base_name, str) or not self.base_name.strip():
            raise FileLogException("base_name must be a non-empty string", sys)
        if any(sep in self.base_name for sep in ("/", "\\")):
            raise FileLogException(
                f"base_name must not contain a path separator: {self.base_name!r}", sys
            )
        if not isinstance(self.log_dir, str) or not self.log_dir:
            raise FileLogException("log_dir must be a non-empty string", sys)
        if isinstance(self.retention_days, bool) or not isinstance(
            self.retention_days, int
        ):
            raise FileLogException("retention_days must be an integer", sys)
        if self.retention_days < 0:
            raise FileLogException("retention_days must not be negative", sys)
        if not isinstance(self.shutdown_timeout, (int, float)) or self.shutdown_timeout < 0:
            raise FileLogException("shutdown_timeout must be a non-negative number", sys)
