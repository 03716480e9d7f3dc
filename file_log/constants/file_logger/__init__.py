import os

"""
Defaults for a file logger instance.
Every value here can be overridden per instance through FileLoggerConfig.
"""
DEFAULT_LOG_DIR: str = "Logs"
DEFAULT_USE_DATE: bool = True
DEFAULT_USE_PREFIX: bool = True
DEFAULT_ENCODING: str = "utf-8"
DEFAULT_MARK_QUEUED_LINES: bool = False

"""
Log file naming
{dir}/{base}[({n})][_{Y-M-D}].txt
"""
LOG_FILE_EXTENSION: str = ".txt"
COLLISION_SUFFIX_FORMAT: str = "({index})"
DATE_SUFFIX_SEPARATOR: str = "_"
# upper bound on "(n)" suffixes tried before giving up on an open
MAX_COLLISION_ATTEMPTS: int = 100

"""
Line formatting
"""
LINE_PREFIX_DATETIME_FORMAT: str = "%x %X"  # locale date + locale time
LINE_PREFIX_SEPARATOR: str = ":\t"
QUEUED_LINE_MARKER: str = "Queue "
SESSION_SEPARATOR: str = "\n\n"
INNER_EXCEPTION_LABEL: str = "Inner Exception"

"""
Retention sweep
"""
RETENTION_DAYS: int = 7

"""
Background consumer
"""
SHUTDOWN_TIMEOUT_SECONDS: float = 1.0
CONSUMER_THREAD_NAME_FORMAT: str = "{base_name} QueueLogger thread"

"""
Configuration sources
"""
DEFAULT_CONFIG_FILE_PATH: str = os.path.join("config", "file_log.yaml")
ENV_BASE_NAME: str = "FILE_LOG_BASE_NAME"
ENV_LOG_DIR: str = "FILE_LOG_DIR"
ENV_USE_DATE: str = "FILE_LOG_USE_DATE"
ENV_USE_PREFIX: str = "FILE_LOG_USE_PREFIX"
ENV_RETENTION_DAYS: str = "FILE_LOG_RETENTION_DAYS"

"""
Diagnostics for the package itself (see file_log.logging.logger)
"""
ENV_DIAGNOSTIC_LEVEL: str = "FILE_LOG_DIAGNOSTIC_LEVEL"
ENV_DIAGNOSTIC_DIR: str = "FILE_LOG_DIAGNOSTIC_DIR"
DIAGNOSTIC_LOG_FILE_NAME: str = "file_log_diagnostics.log"
DIAGNOSTIC_MAX_LOG_SIZE: int = 5_000_000
DIAGNOSTIC_BACKUP_COUNT: int = 3
