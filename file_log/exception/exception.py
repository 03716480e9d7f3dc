import sys


class FileLogException(Exception):
    """
    Custom exception class for the file_log package.
    Captures the message, filename, and line number where the exception occurred.

    Only configuration problems surface as FileLogException; the write path
    never raises.
    """

    def __init__(self, message, error_details: sys = sys):
        """
        Args:
            message: Human-readable error message, or the exception being wrapped.
            error_details (sys): Typically pass 'sys' so we can extract traceback info.
        """
        self.message = str(message)

        _, _, exc_tb = error_details.exc_info()

        if exc_tb is not None:
            # walk to the innermost frame, that is where the error happened
            while exc_tb.tb_next is not None:
                exc_tb = exc_tb.tb_next
            self.line_number = exc_tb.tb_lineno
            self.file_name = exc_tb.tb_frame.f_code.co_filename
        else:
            # raised directly, not while handling another exception
            frame = error_details._getframe(1)
            self.line_number = frame.f_lineno
            self.file_name = frame.f_code.co_filename

        super().__init__(self.message)

    def __str__(self) -> str:
        return (
            f"Error occurred in script: {self.file_name} "
            f"at line number: {self.line_number} "
            f"with message: {self.message}"
        )
