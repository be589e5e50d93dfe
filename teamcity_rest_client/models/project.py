"""Project data model."""

from dataclasses import dataclass, field
from typing import Any, Optional

from teamcity_rest_client.utils.errors import TeamcityError
from teamcity_rest_client.utils.xml_mapper import attribute


@dataclass(frozen=True)
class Project:
    """Represents a TeamCity project.

    ``teamcity`` is the client the project was fetched with. It is only used
    to answer ``build_types()`` and ``builds()``, both of which go back to the
    server on every call.
    """
    name: str
    id: str
    href: str
    teamcity: Optional[Any] = field(default=None, compare=False, repr=False)

    def _client(self):
        if self.teamcity is None:
            raise TeamcityError(f"Project '{self.name}' is not bound to a Teamcity client")
        return self.teamcity

    def build_types(self):
        """Fetch the build types belonging to this project, in server order."""
        return [bt for bt in self._client().build_types() if bt.project_id == self.id]

    def builds(self):
        """Fetch the builds of every build type belonging to this project."""
        build_type_ids = {bt.id for bt in self.build_types()}
        return [b for b in self._client().builds() if b.build_type_id in build_type_ids]

    def to_dict(self):
        """Convert to dictionary."""
        return {
            'project_name': self.name,
            'project_id': self.id,
            'href': self.href
        }

    @classmethod
    def from_element(cls, element, url, teamcity=None):
        """Create Project from a <project> element.

        Args:
            element: The XML element
            url (callable): Turns the server-relative href into an absolute URL
            teamcity (Teamcity, optional): Owning client
        """
        return cls(
            name=attribute(element, 'name'),
            id=attribute(element, 'id'),
            href=url(attribute(element, 'href')),
            teamcity=teamcity
        )
