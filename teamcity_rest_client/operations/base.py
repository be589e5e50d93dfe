class Operation:
    """Base class for all operations."""

    def __init__(self, config, client, progress=None, debug_logger=None):
        """Initialize the operation.

        Args:
            config (Config): Configuration instance
            client (Teamcity): TeamCity client instance
            progress (ProgressTracker, optional): Progress tracker instance
            debug_logger (DebugLogger, optional): Debug logger instance
        """
        self.config = config
        self.client = client
        self.progress = progress
        self.logger = debug_logger

    def execute(self):
        """Execute the operation.

        This method should be overridden by specific operations.
        """
        raise NotImplementedError("Operation must implement execute method")
