import os
import sys
import traceback
from datetime import date, datetime
from typing import Iterator, Optional

from file_log.constants import file_logger as constants
from file_log.exception.exception import FileLogException
from file_log.logging.logger import get_logger

log = get_logger(__name__)


# make directory if not exists
def make_directory(dir_path: str) -> None:
    """Create a directory if it does not exist.

    Args:
        dir_path (str): The path of the directory to be created.
    """
    try:
        os.makedirs(dir_path, exist_ok=True)
        log.debug(f"Directory created or already exists: {dir_path}")

    except Exception as e:
        raise FileLogException(e, sys)


def format_log_date(day: date) -> str:
    """Year-month-day without zero padding, e.g. 2026-3-7."""
    return f"{day.year}-{day.month}-{day.day}"


def build_log_file_path(
    log_dir: str,
    base_name: str,
    day: Optional[date] = None,
    collision_index: Optional[int] = None,
) -> str:
    """Build the path of a log file.

    Args:
        log_dir (str): Directory the file lives in.
        base_name (str): Base file name.
        day (Optional[date]): Date to embed; None for a static (undated) file.
        collision_index (Optional[int]): "(n)" suffix; None on the first attempt.

    Returns:
        str: e.g. Logs/app(2)_2026-10-19.txt
    """
    file_name = base_name
    if collision_index is not None:
        file_name += constants.COLLISION_SUFFIX_FORMAT.format(index=collision_index)
    if day is not None:
        file_name += constants.DATE_SUFFIX_SEPARATOR + format_log_date(day)
    return os.path.join(log_dir, file_name + constants.LOG_FILE_EXTENSION)


def format_line_prefix(moment: datetime) -> str:
    """Locale formatted timestamp followed by ':<TAB>'."""
    return moment.strftime(constants.LINE_PREFIX_DATETIME_FORMAT) + constants.LINE_PREFIX_SEPARATOR


def _exception_source(exc: BaseException) -> str:
    # module of the frame that raised, like the "Source" of a managed exception
    tb = exc.__traceback__
    if tb is None:
        return type(exc).__module__
    while tb.tb_next is not None:
        tb = tb.tb_next
    module = tb.tb_frame.f_globals.get("__name__")
    return module or tb.tb_frame.f_code.co_filename


def format_exception_block(exc: BaseException) -> str:
    """Format an exception into the multi-line block written to the log.

    The block holds the exception kind, its message, the module it was
    raised from and the traceback:

        Exception:	ValueError
        	Exception Message:	bad value
        	Source:	app.parser
        	Stack:	  File "...", line 12, in parse ...
    """
    kind = type(exc).__qualname__
    if type(exc).__module__ not in ("builtins", "__main__"):
        kind = f"{type(exc).__module__}.{kind}"
    stack = "".join(traceback.format_tb(exc.__traceback__)).rstrip("\n")
    return (
        f"Exception:\t{kind}\n"
        f"\tException Message:\t{exc}\n"
        f"\tSource:\t{_exception_source(exc)}\n"
        f"\tStack:\t{stack}\n"
    )


def inner_exception(exc: BaseException) -> Optional[BaseException]:
    """The exception that caused exc: explicit cause first, then implicit context."""
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__context__ is not None and not exc.__suppress_context__:
        return exc.__context__
    return None


def exception_log_lines(
    exc: BaseException, label: Optional[str] = None
) -> Iterator[str]:
    """Yield one formatted record per exception in the chain of exc.

    The first record carries the caller's label (if any); every inner
    exception after it is labeled "Inner Exception". A chain that loops
    back on itself stops at the first repeat.
    """
    seen = set()
    current: Optional[BaseException] = exc
    current_label = label
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        block = format_exception_block(current)
        yield f"{current_label} {block}" if current_label else block
        current = inner_exception(current)
        current_label = constants.INNER_EXCEPTION_LABEL


def parse_bool(value, name: str) -> bool:
    """Interpret a YAML or environment value as a boolean."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in ("1", "true", "yes", "on"):
        return True
    if text in ("0", "false", "no", "off"):
        return False
    raise FileLogException(f"{name} must be a boolean, got {value!r}", sys)


