"""Error types raised by the TeamCity client."""


class TeamcityError(Exception):
    """Base class for all client errors."""


class TransportError(TeamcityError):
    """Raised when the HTTP request itself fails (connection, timeout, status)."""

    def __init__(self, url, cause):
        """Initialize the error.

        Args:
            url (str): The URL that was requested
            cause (Exception): The underlying requests exception
        """
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause}")


class ServerAuthError(TeamcityError):
    """Raised when TeamCity answers with an HTML page instead of XML."""

    def __init__(self, message="Teamcity returned html, perhaps you need to use authentication??"):
        super().__init__(message)


class ResponseParseError(TeamcityError):
    """Raised when a response body is not well-formed XML."""


class MissingAttributeError(TeamcityError):
    """Raised when a required XML attribute is absent."""

    def __init__(self, tag, attribute):
        self.tag = tag
        self.attribute = attribute
        super().__init__(f"<{tag}> element is missing required attribute '{attribute}'")


class ProjectNotFoundError(TeamcityError):
    """Raised when no project matches a name-or-id lookup."""

    def __init__(self, spec):
        self.spec = spec
        super().__init__(f"Sorry, cannot find project with name or id '{spec}'")
