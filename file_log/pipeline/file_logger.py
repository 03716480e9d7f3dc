"""
FileLogger: synchronous and queued writing of plain-text log lines.

    from file_log import FileLogger

    with FileLogger("service") as logger:
        logger.log("started")
        logger.queue_log("handled request")   # written by the background thread
        try:
            ...
        except Exception as e:
            logger.log_exception(e, label="request failed")

Both paths write through one LogWriter under one lock, so lines never
interleave and rotation is never concurrent with a write.
"""
import threading
from datetime import datetime
from typing import Callable, Optional

from file_log.components.blocking_queue import BlockingQueue
from file_log.components.log_writer import LogWriter
from file_log.components.retention_sweeper import RetentionSweeper
from file_log.constants import file_logger as constants
from file_log.entity.artifact_entity import OpenedLogFile
from file_log.entity.config_entity import FileLoggerConfig
from file_log.exception.exception import FileLogException
from file_log.logging.logger import get_logger
from file_log.utils.main_utils.general_utils import (
    exception_log_lines,
    format_line_prefix,
    make_directory,
)

log = get_logger(__name__)

# put on the queue by dispose(); everything enqueued before it is written first
_END_OF_QUEUE = object()


class FileLogger:
    """Append-only text logger with daily rotation and a background writer.

    Attributes:
        config (FileLoggerConfig): Settings fixed at construction.
        clock (Callable[[], datetime]): Source of "now" for prefixes and rotation.
        diagnostic_callback (Optional[Callable[[str], None]]): Receives a message
            when lines are lost (unopenable file, expired file that would not
            delete, consumer thread that would not stop).
    """

    def __init__(
        self,
        base_name: str,
        log_dir: str = constants.DEFAULT_LOG_DIR,
        use_date: bool = constants.DEFAULT_USE_DATE,
        use_prefix: bool = constants.DEFAULT_USE_PREFIX,
        clock: Callable[[], datetime] = datetime.now,
        diagnostic_callback: Optional[Callable[[str], None]] = None,
        **options,
    ):
        self._setup(
            FileLoggerConfig(
                base_name=base_name,
                log_dir=log_dir,
                use_date=use_date,
                use_prefix=use_prefix,
                **options,
            ),
            clock,
            diagnostic_callback,
        )

    @classmethod
    def from_config(
        cls,
        config: FileLoggerConfig,
        clock: Callable[[], datetime] = datetime.now,
        diagnostic_callback: Optional[Callable[[str], None]] = None,
    ) -> "FileLogger":
        logger = cls.__new__(cls)
        logger._setup(config, clock, diagnostic_callback)
        return logger

    def _setup(
        self,
        config: FileLoggerConfig,
        clock: Callable[[], datetime],
        diagnostic_callback: Optional[Callable[[str], None]],
    ) -> None:
        self.config = config
        self.clock = clock
        self.diagnostic_callback = diagnostic_callback

        try:
            make_directory(config.log_dir)
        except FileLogException as e:
            # the writer tries again on open; logging must not stop the host
            log.warning(f"Could not create log directory {config.log_dir}: {e.message}")

        self._writer = LogWriter(
            config,
            clock=clock,
            sweeper=RetentionSweeper(config, on_failure=self._report),
            on_failure=self._report,
        )
        self._write_lock = threading.RLock()
        # set by dispose() under _write_lock once the file is closed for good
        self._writer_retired = False

        self._queue: BlockingQueue = BlockingQueue()
        self._consumer: Optional[threading.Thread] = None
        self._consumer_lock = threading.Lock()
        self._consumer_started = False
        self._cancelled = threading.Event()

        self._disposed = False
        self._dispose_lock = threading.Lock()

    # ------------------------------------------------------------ properties
    @property
    def is_open(self) -> bool:
        with self._write_lock:
            return self._writer.is_open

    @property
    def current_file(self) -> Optional[OpenedLogFile]:
        with self._write_lock:
            return self._writer.current_file

    @property
    def last_file(self) -> Optional[OpenedLogFile]:
        """The most recently opened file, still known after close() and dispose()."""
        with self._write_lock:
            return self._writer.last_file

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def pending(self) -> int:
        """Queued lines not yet taken by the consumer thread."""
        return len(self._queue)

    # ------------------------------------------------------- synchronous API
    def log(self, line: str) -> None:
        """Write a line now, prefixed with a timestamp when use_prefix is on."""
        if self._disposed:
            log.debug(f"Logger {self.config.base_name} is disposed, dropped line")
            return
        self._write(self._format(line, queued=False))

    def log_exception(self, exc: BaseException, label: Optional[str] = None) -> None:
        """Write exc (and every inner exception, labeled) as separate records."""
        for record in exception_log_lines(exc, label):
            self.log(record)

    # ------------------------------------------------------------ queued API
    def queue_log(self, line: str) -> None:
        """Hand a line to the background thread; returns without waiting for I/O."""
        if self._disposed:
            log.debug(f"Logger {self.config.base_name} is disposed, dropped queued line")
            return
        self._queue.enqueue(self._format(line, queued=True))
        self._ensure_consumer()

    def queue_log_exception(self, exc: BaseException, label: Optional[str] = None) -> None:
        for record in exception_log_lines(exc, label):
            self.queue_log(record)

    # -------------------------------------------------------------- lifecycle
    def close(self) -> None:
        """Release the current file; the next write reopens one."""
        with self._write_lock:
            self._writer.close()

    def dispose(self) -> None:
        """Drain the queue, stop the consumer thread and close the file.

        Waits at most config.shutdown_timeout for the consumer. A consumer
        that does not stop in time is told to cancel and abandoned (it is a
        daemon thread), and the diagnostic callback is told. Safe to call
        more than once.
        """
        with self._dispose_lock:
            if self._disposed:
                return
            self._disposed = True

        timeout = self.config.shutdown_timeout
        # _ensure_consumer checks _disposed under the same lock, so no thread
        # can start after this point
        with self._consumer_lock:
            consumer = self._consumer
        if consumer is not None and consumer.is_alive():
            self._queue.enqueue(_END_OF_QUEUE)
            consumer.join(timeout)
            if consumer.is_alive():
                self._cancelled.set()
                # the end-of-queue marker is still behind the stuck line
                dropped = max(len(self._queue) - 1, 0)
                self._queue.clear()
                message = (
                    f"Queue consumer for {self.config.base_name} did not stop within "
                    f"{timeout}s; abandoned it and dropped {dropped} queued line(s)"
                )
                log.warning(message)
                self._report(message)

        if self._write_lock.acquire(timeout=timeout):
            try:
                self._writer_retired = True
                self._writer.close()
            finally:
                self._write_lock.release()
        else:
            self._writer_retired = True
            message = (
                f"Could not close log file for {self.config.base_name}: "
                f"writer still busy after {timeout}s"
            )
            log.warning(message)
            self._report(message)

    def __enter__(self) -> "FileLogger":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.dispose()

    # -------------------------------------------------------------- internals
    def _format(self, line: str, queued: bool) -> str:
        prefix = ""
        if queued and self.config.mark_queued_lines:
            prefix = constants.QUEUED_LINE_MARKER
        if self.config.use_prefix:
            prefix += format_line_prefix(self.clock())
        return prefix + str(line)

    def _write(self, line: str) -> None:
        with self._write_lock:
            if self._writer_retired:
                # a log() that got past the _disposed check before dispose() ran
                log.debug(f"Logger {self.config.base_name} is disposed, dropped line")
                return
            self._writer.write(line)

    def _ensure_consumer(self) -> None:
        if self._consumer_started:
            return
        with self._consumer_lock:
            if self._consumer_started or self._disposed:
                return
            self._consumer = threading.Thread(
                target=self._consume,
                name=constants.CONSUMER_THREAD_NAME_FORMAT.format(
                    base_name=self.config.base_name
                ),
                daemon=True,
            )
            self._consumer.start()
            self._consumer_started = True

    def _consume(self) -> None:
        log.debug(f"Queue consumer for {self.config.base_name} started")
        while not self._cancelled.is_set():
            line = self._queue.dequeue()
            if line is _END_OF_QUEUE:
                break
            if line is None:
                # queue was cleared under us
                continue
            if self._cancelled.is_set():
                break
            try:
                self._write(line)
            except Exception:
                # keep draining; the writer already turns I/O errors into drops
                log.exception(f"Queue consumer for {self.config.base_name} failed to write a line")
        if self._cancelled.is_set():
            # dispose() gave up waiting for us and may not have closed the file
            self.close()
        log.debug(f"Queue consumer for {self.config.base_name} stopped")

    def _report(self, message: str) -> None:
        if self.diagnostic_callback is None:
            return
        try:
            self.diagnostic_callback(message)
        except Exception:
            log.exception("diagnostic_callback raised")
