import os
from unittest.mock import Mock, patch
from urllib.parse import urlparse

import pytest
import requests

from .fixtures import BUILD_TYPES_XML, BUILDS_XML, PROJECTS_XML


class FakeServer:
    """Answers requests.get calls from a path -> body table."""

    def __init__(self, bodies):
        self.bodies = bodies
        self.requested = []

    def get(self, url, auth=None, timeout=None):
        self.requested.append((url, auth, timeout))
        path = urlparse(url).path
        response = Mock()
        if path in self.bodies:
            response.text = self.bodies[path]
            response.raise_for_status.return_value = None
        else:
            response.text = "Not Found"
            response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"404 Client Error: {url}")
        return response


@pytest.fixture
def server():
    fake = FakeServer({
        '/app/rest/projects': PROJECTS_XML,
        '/app/rest/buildTypes': BUILD_TYPES_XML,
        '/app/rest/builds': BUILDS_XML,
        '/httpAuth/app/rest/projects': PROJECTS_XML,
        '/httpAuth/app/rest/buildTypes': BUILD_TYPES_XML,
        '/httpAuth/app/rest/builds': BUILDS_XML,
    })
    with patch('teamcity_rest_client.utils.auth.requests.get', side_effect=fake.get):
        yield fake


ENV_VARS = [
    'TEAMCITY_HOST', 'TEAMCITY_PORT', 'TEAMCITY_USER', 'TEAMCITY_PASSWORD',
    'TEAMCITY_DEBUG', 'TEAMCITY_TIMEOUT', 'TEAMCITY_OUTPUT',
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for name in ENV_VARS:
        os.environ.pop(name, None)
