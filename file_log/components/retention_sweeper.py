import os
from datetime import date, datetime, time, timedelta
from typing import Callable, Optional

from file_log.entity.artifact_entity import RetentionSweepArtifact
from file_log.entity.config_entity import FileLoggerConfig
from file_log.logging.logger import get_logger

log = get_logger(__name__)


class RetentionSweeper:
    """Deletes log files of one logger once they are past the retention age.

    A file belongs to the logger when its name contains the base name. It is
    deleted when its last modification is older than midnight
    ``retention_days`` before today. Runs only when a dated file is opened.

    Attributes:
        config (FileLoggerConfig): Supplies log_dir, base_name and retention_days.
        on_failure (Optional[Callable[[str], None]]): Told about each file that
            could not be deleted.
    """

    def __init__(
        self,
        config: FileLoggerConfig,
        on_failure: Optional[Callable[[str], None]] = None,
    ):
        self.config = config
        self.on_failure = on_failure

    def cutoff(self, today: date) -> datetime:
        return datetime.combine(today - timedelta(days=self.config.retention_days), time.min)

    def sweep(self, today: date) -> RetentionSweepArtifact:
        artifact = RetentionSweepArtifact()
        cutoff = self.cutoff(today).timestamp()
        try:
            entries = list(os.scandir(self.config.log_dir))
        except OSError as e:
            log.warning(f"Retention sweep skipped, cannot list {self.config.log_dir}: {e}")
            return artifact

        for entry in entries:
            if self.config.base_name not in entry.name:
                continue
            try:
                if not entry.is_file() or entry.stat().st_mtime >= cutoff:
                    continue
                os.remove(entry.path)
                artifact.deleted_files.append(entry.path)
                log.info(f"Deleted expired log file: {entry.path}")
            except OSError as e:
                # each file stands alone; keep sweeping
                artifact.failed_files.append(entry.path)
                log.warning(f"Could not delete expired log file {entry.path}: {e}")
                if self.on_failure is not None:
                    self.on_failure(f"Could not delete expired log file {entry.path}: {e}")
        return artifact
