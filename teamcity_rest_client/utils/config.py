import os
from dotenv import load_dotenv

from teamcity_rest_client.client import Teamcity


class Config:
    def __init__(self):
        """Initialize configuration with default values."""
        # Server
        self.host = None
        self.port = None

        # Authentication (both required for basic auth)
        self.user = None
        self.password = None

        # General
        self.debug = False
        self.request_timeout = 60

        # Report
        self.project = None
        self.output_file = None
        self.debug_log_file = None

    @classmethod
    def from_args(cls, args):
        """Create configuration from command line arguments.

        Args:
            args: Parsed command line arguments
        """
        config = cls()
        config.apply_args(args)
        return config

    def apply_args(self, args):
        """Override values with any command line arguments that were given.

        Args:
            args: Parsed command line arguments
        """
        for name in ('host', 'port', 'user', 'password', 'project', 'output_file', 'debug_log_file'):
            value = getattr(args, name, None)
            if value:
                setattr(self, name, value)
        if getattr(args, 'timeout', None):
            self.request_timeout = args.timeout
        if getattr(args, 'debug', False):
            self.debug = True
        return self

    @classmethod
    def from_env(cls, env_file='.env'):
        """Create configuration from environment variables.

        Args:
            env_file (str): Path to environment file (default: '.env')
        """
        load_dotenv(env_file)  # Load specified .env file if it exists

        config = cls()
        config.host = os.getenv('TEAMCITY_HOST')
        config.port = os.getenv('TEAMCITY_PORT')
        config.user = os.getenv('TEAMCITY_USER')
        config.password = os.getenv('TEAMCITY_PASSWORD')
        config.debug = os.getenv('TEAMCITY_DEBUG', '').lower() == 'true'

        # Optional environment overrides
        if os.getenv('TEAMCITY_TIMEOUT'):
            config.request_timeout = os.getenv('TEAMCITY_TIMEOUT')
        if os.getenv('TEAMCITY_OUTPUT'):
            config.output_file = os.getenv('TEAMCITY_OUTPUT')

        return config

    def validate(self):
        """Validate the configuration.

        Returns:
            tuple: (bool, str) - (is_valid, error_message)
        """
        if not self.host:
            return False, "TeamCity host is required"
        if not self.port:
            return False, "TeamCity port is required"
        try:
            self.port = int(self.port)
        except (TypeError, ValueError):
            return False, f"TeamCity port must be a number, got '{self.port}'"
        try:
            self.request_timeout = float(self.request_timeout)
        except (TypeError, ValueError):
            return False, f"Request timeout must be a number of seconds, got '{self.request_timeout}'"
        return True, None

    def create_client(self, debug_logger=None):
        """Build a Teamcity client from this configuration."""
        return Teamcity(
            self.host,
            self.port,
            user=self.user,
            password=self.password,
            timeout=self.request_timeout,
            debug_logger=debug_logger
        )
