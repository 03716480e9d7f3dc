from file_log.components.blocking_queue import BlockingQueue
from file_log.entity.config_entity import FileLoggerConfig
from file_log.exception.exception import FileLogException
from file_log.pipeline.file_logger import FileLogger

__version__ = "0.0.1"

__all__ = ["BlockingQueue", "FileLogger", "FileLoggerConfig", "FileLogException"]
