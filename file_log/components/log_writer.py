from datetime import date, datetime
from typing import Callable, Optional, TextIO

try:
    import fcntl
except ImportError:  # not available on Windows, files are opened unlocked there
    fcntl = None

from file_log.components.retention_sweeper import RetentionSweeper
from file_log.constants import file_logger as constants
from file_log.entity.artifact_entity import OpenedLogFile
from file_log.entity.config_entity import FileLoggerConfig
from file_log.exception.exception import FileLogException
from file_log.logging.logger import get_logger
from file_log.utils.main_utils.general_utils import build_log_file_path, make_directory

log = get_logger(__name__)

# rotation key of an undated (static) log file
_STATIC = "static"


def is_transient_open_error(error: BaseException) -> bool:
    """True when trying the next "(n)" file name might succeed.

    Access denied, a lock held by another writer, a directory in the way:
    all transient. A missing directory is not, every name would fail the same.
    """
    return isinstance(error, OSError) and not isinstance(
        error, (FileNotFoundError, NotADirectoryError)
    )


class LogWriter:
    """Owns the one open log file of a logger and decides when to rotate it.

    Closed -> Open on the first write, Open -> Closed on close() or when the
    calendar day changes (dated files only), then Open again on the next
    write. Not thread-safe: FileLogger serializes every call under its write
    lock.

    Attributes:
        config (FileLoggerConfig): Naming and rotation settings.
        clock (Callable[[], datetime]): Source of "now"; injectable for tests.
        sweeper (RetentionSweeper): Run before each dated file is opened.
        on_failure (Optional[Callable[[str], None]]): Told when an open gives up.
    """

    def __init__(
        self,
        config: FileLoggerConfig,
        clock: Callable[[], datetime] = datetime.now,
        sweeper: Optional[RetentionSweeper] = None,
        on_failure: Optional[Callable[[str], None]] = None,
    ):
        self.config = config
        self.clock = clock
        self.sweeper = sweeper if sweeper is not None else RetentionSweeper(config)
        self.on_failure = on_failure
        self._stream: Optional[TextIO] = None
        self._current: Optional[OpenedLogFile] = None
        self._last: Optional[OpenedLogFile] = None
        self._opened_before = False
        # rotation key an open already failed for; writes for it are dropped
        self._open_failed_for = None

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    @property
    def current_file(self) -> Optional[OpenedLogFile]:
        return self._current

    @property
    def last_file(self) -> Optional[OpenedLogFile]:
        return self._last

    def write(self, line: str) -> bool:
        """Write one line to the current file, rotating first if needed.

        Returns False when the line was dropped (no file could be opened or
        the write itself failed). Never raises for filesystem conditions.
        """
        now = self.clock()
        today = now.date()

        if self.config.use_date:
            if self._current is None or self._current.opened_on != today:
                self._close_stream()
                if self._open_failed_for != today:
                    self._open(today, dated=True)
        elif self._stream is None and self._open_failed_for != _STATIC:
            self._open(today, dated=False)

        if self._stream is None:
            log.debug(f"Dropped log line, no open file for {self.config.base_name}")
            return False

        try:
            self._stream.write(line + "\n")
            self._stream.flush()
            return True
        except (OSError, ValueError) as e:
            log.warning(f"Write to {self._current.file_path} failed, releasing it: {e}")
            self._release()
            return False

    def close(self) -> None:
        """Write the session separator and release the file. No-op when closed.

        Also forgets an earlier failed open, so the next write tries again.
        """
        self._open_failed_for = None
        self._close_stream()

    def _close_stream(self) -> None:
        if self._stream is None:
            return
        try:
            self._stream.write(constants.SESSION_SEPARATOR)
            self._stream.flush()
        except (OSError, ValueError) as e:
            log.warning(f"Could not write session separator to {self._current.file_path}: {e}")
        finally:
            self._release()

    def _open(self, today: date, dated: bool) -> None:
        if dated:
            self.sweeper.sweep(today)

        try:
            make_directory(self.config.log_dir)
        except FileLogException as e:
            self._give_up(today, dated, f"Cannot create log directory {self.config.log_dir}: {e.message}")
            return

        truncate = not dated and not self._opened_before
        collision_index = None
        for _ in range(constants.MAX_COLLISION_ATTEMPTS + 1):
            path = build_log_file_path(
                self.config.log_dir,
                self.config.base_name,
                today if dated else None,
                collision_index,
            )
            try:
                self._stream = self._open_stream(path, truncate)
            except Exception as e:
                if not is_transient_open_error(e):
                    self._give_up(today, dated, f"Cannot open log file {path}: {e}")
                    return
                log.info(f"Log file {path} unavailable ({e}), trying next name")
                collision_index = 1 if collision_index is None else collision_index + 1
                continue

            self._current = OpenedLogFile(path, today, collision_index)
            self._last = self._current
            self._opened_before = True
            log.debug(f"Opened log file {path}")
            return

        self._give_up(
            today,
            dated,
            f"Gave up opening a log file for {self.config.base_name} after "
            f"{constants.MAX_COLLISION_ATTEMPTS} collision suffixes",
        )

    def _open_stream(self, path: str, truncate: bool) -> TextIO:
        # always open for append: truncating before the lock is held would
        # wipe a file another writer still owns
        stream = open(path, "a", encoding=self.config.encoding)
        try:
            if fcntl is not None:
                fcntl.flock(stream.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
            if truncate:
                stream.truncate(0)
        except Exception:
            stream.close()
            raise
        return stream

    def _give_up(self, today: date, dated: bool, message: str) -> None:
        self._stream = None
        self._current = None
        self._open_failed_for = today if dated else _STATIC
        log.warning(message)
        if self.on_failure is not None:
            self.on_failure(message)

    def _release(self) -> None:
        stream, self._stream, self._current = self._stream, None, None
        if stream is None:
            return
        try:
            if fcntl is not None:
                fcntl.flock(stream.fileno(), fcntl.LOCK_UN)
        except (OSError, ValueError):
            pass  # close() below drops the lock as well
        try:
            stream.close()
        except OSError as e:
            log.warning(f"Error closing log file: {e}")
