"""Build type data model."""

from dataclasses import dataclass

from teamcity_rest_client.utils.xml_mapper import attribute


@dataclass(frozen=True)
class BuildType:
    """Represents a TeamCity build configuration."""
    id: str
    name: str
    href: str
    project_name: str
    project_id: str
    web_url: str

    def to_dict(self):
        """Convert to dictionary."""
        return {
            'build_type_id': self.id,
            'build_type_name': self.name,
            'href': self.href,
            'project_name': self.project_name,
            'project_id': self.project_id,
            'web_url': self.web_url
        }

    @classmethod
    def from_element(cls, element, url):
        """Create BuildType from a <buildType> element."""
        return cls(
            id=attribute(element, 'id'),
            name=attribute(element, 'name'),
            href=url(attribute(element, 'href')),
            project_name=attribute(element, 'projectName'),
            project_id=attribute(element, 'projectId'),
            web_url=attribute(element, 'webUrl')
        )
