from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass
class OpenedLogFile:
    """Data class describing the file a LogWriter currently has open.

    Attributes:
        file_path (str): Full path of the open log file.
        opened_on (date): Calendar day the file was opened for (the rotation key).
        collision_index (Optional[int]): The "(n)" suffix used, None for the plain name.
    """

    file_path: str
    opened_on: date
    collision_index: Optional[int] = None


@dataclass
class RetentionSweepArtifact:
    """Data class for the result of one retention sweep.

    Attributes:
        deleted_files (List[str]): Paths removed because they were past the cutoff.
        failed_files (List[str]): Paths past the cutoff that could not be removed.
    """

    deleted_files: List[str] = field(default_factory=list)
    failed_files: List[str] = field(default_factory=list)
