"""Debug logging to file with live updates."""

from datetime import datetime


class DebugLogger:
    """Writes timestamped client activity to a log file and, optionally, the console."""

    def __init__(self, log_file_path=None, console_debug=False):
        """Initialize the debug logger.

        Args:
            log_file_path (str, optional): Path to the debug log file; console only when omitted
            console_debug (bool): Whether to also print to console
        """
        self.log_file_path = log_file_path
        self.console_debug = console_debug
        self.file_handle = None

        if log_file_path:
            # Line buffered so the log can be tailed while a report runs
            try:
                self.file_handle = open(log_file_path, 'w', encoding='utf-8', buffering=1)
            except OSError as e:
                print(f"Warning: Could not open debug log file: {e}")
        self.log(f"Debug log started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    def log(self, message):
        """Write a message to the debug log.

        Args:
            message (str): Message to log
        """
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]

        if self.file_handle:
            try:
                self.file_handle.write(f"[{timestamp}] {message}\n")
            except OSError as e:
                print(f"Warning: Failed to write to debug log: {e}")

        if self.console_debug:
            print(message)

    def close(self):
        """Close the log file."""
        if self.file_handle:
            self.log(f"Debug log ended: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
            self.file_handle.close()
            self.file_handle = None

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
