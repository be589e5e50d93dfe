"""Authentication strategies for talking to TeamCity."""

import requests

from teamcity_rest_client.utils.errors import TransportError


class Authentication:
    """Base class for the ways of reaching the TeamCity REST API.

    A strategy knows how to turn a server path into a full URL and how to
    GET it. It never looks at the body it returns.
    """

    def __init__(self, host, port, timeout=None):
        """Initialize the strategy.

        Args:
            host (str): TeamCity host name
            port (int): TeamCity port
            timeout (float, optional): Request timeout in seconds
        """
        self.host = host
        self.port = port
        self.timeout = timeout

    def url(self, path):
        """Build the absolute URL for a server path."""
        raise NotImplementedError("Authentication must implement url method")

    def _credentials(self):
        """Return the value passed as ``auth`` to requests."""
        return None

    def get(self, path):
        """GET a server path and return the response body.

        Args:
            path (str): Server path, e.g. ``/app/rest/projects``

        Returns:
            str: Response body

        Raises:
            TransportError: If the connection fails or the status is not a success
        """
        url = self.url(path)
        try:
            response = requests.get(url, auth=self._credentials(), timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise TransportError(url, e) from e
        return response.text


class Open(Authentication):
    """Anonymous access."""

    def url(self, path):
        return f"http://{self.host}:{self.port}{path}"

    def __str__(self):
        return "No Authentication"


class HttpBasicAuthentication(Authentication):
    """HTTP Basic access through the server's /httpAuth namespace."""

    def __init__(self, host, port, user, password, timeout=None):
        """Initialize the strategy.

        Args:
            host (str): TeamCity host name
            port (int): TeamCity port
            user (str): User name
            password (str): Password
            timeout (float, optional): Request timeout in seconds
        """
        super().__init__(host, port, timeout)
        self.user = user
        self.password = password

    def url(self, path):
        return f"http://{self.host}:{self.port}/httpAuth{path}"

    def _credentials(self):
        return (self.user, self.password)

    def __str__(self):
        return f"HttpBasicAuthentication {self.user}:****"
