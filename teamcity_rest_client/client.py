"""Read-only client for the TeamCity REST API."""

import re

from teamcity_rest_client.models.build import Build
from teamcity_rest_client.models.build_type import BuildType
from teamcity_rest_client.models.project import Project
from teamcity_rest_client.utils import xml_mapper
from teamcity_rest_client.utils.auth import HttpBasicAuthentication, Open
from teamcity_rest_client.utils.errors import ProjectNotFoundError, ServerAuthError

PROJECTS_PATH = '/app/rest/projects'
BUILD_TYPES_PATH = '/app/rest/buildTypes'
BUILDS_PATH = '/app/rest/builds'

PROJECT_ID_PATTERN = re.compile(r'project\d+')
HTML_PAGE_PATTERN = re.compile(r'<html.*</html>', re.IGNORECASE | re.DOTALL)


class Teamcity:
    """Client for one TeamCity server.

    Every query goes to the server; nothing is cached between calls.
    """

    def __init__(self, host, port, user=None, password=None, timeout=None, debug_logger=None):
        """Initialize the client.

        Basic authentication is used only when both ``user`` and ``password``
        are given, otherwise requests are anonymous.

        Args:
            host (str): TeamCity host name
            port (int): TeamCity port
            user (str, optional): User name
            password (str, optional): Password
            timeout (float, optional): Request timeout in seconds
            debug_logger (DebugLogger, optional): Debug logger instance
        """
        self.host = host
        self.port = port
        self.logger = debug_logger
        if user and password:
            self.authentication = HttpBasicAuthentication(host, port, user, password, timeout)
        else:
            self.authentication = Open(host, port, timeout)

    def project(self, spec):
        """Find a project by id (when ``spec`` looks like ``project<digits>``) or by name.

        Raises:
            ProjectNotFoundError: If no project matches
        """
        projects = self.projects()
        if PROJECT_ID_PATTERN.search(spec):
            project = next((p for p in projects if p.id == spec), None)
        else:
            project = next((p for p in projects if p.name == spec), None)

        if project is not None:
            return project

        if self.logger:
            self.logger.log(f"ERROR: No project with name or id '{spec}'")
        raise ProjectNotFoundError(spec)

    def projects(self):
        """Fetch all projects.

        Returns:
            list: List of Project objects
        """
        return self._collect(
            self.get(PROJECTS_PATH),
            'project',
            lambda e: Project.from_element(e, self.url, self)
        )

    def build_types(self):
        """Fetch all build types.

        Returns:
            list: List of BuildType objects
        """
        return self._collect(
            self.get(BUILD_TYPES_PATH),
            'buildType',
            lambda e: BuildType.from_element(e, self.url)
        )

    def builds(self):
        """Fetch builds.

        Only the first page the server returns is read.

        Returns:
            list: List of Build objects
        """
        # TeamCity leaves the ampersand in webUrl unescaped on this endpoint
        body = self.get(BUILDS_PATH).replace('&buildTypeId', '&amp;buildTypeId')
        return self._collect(body, 'build', lambda e: Build.from_element(e, self.url))

    def get(self, path):
        """GET a server path, refusing HTML pages.

        Raises:
            ServerAuthError: If the server answered with an HTML page
        """
        if self.logger:
            self.logger.log(f"GET {self.url(path)} ({self.authentication})")

        body = self.authentication.get(path)
        if HTML_PAGE_PATTERN.search(body):
            if self.logger:
                self.logger.log(f"ERROR: {path} returned an HTML page")
            raise ServerAuthError()
        return body

    def url(self, path):
        return self.authentication.url(path)

    def _collect(self, body, tag, build):
        entities = [build(element) for element in xml_mapper.elements(body, tag)]
        if self.logger:
            self.logger.log(f"  Mapped {len(entities)} <{tag}> elements")
        return entities

    def __str__(self):
        return f"Teamcity @ http://{self.host}:{self.port}"
