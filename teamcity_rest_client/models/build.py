"""Build data model."""

from dataclasses import dataclass
from enum import Enum

from teamcity_rest_client.utils.xml_mapper import attribute, attribute_or


class BuildStatus(str, Enum):
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    ERROR = "ERROR"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN


@dataclass(frozen=True)
class Build:
    """Represents one run of a build type."""
    id: str
    number: str
    status: BuildStatus
    build_type_id: str
    start_date: str  # empty when the server omits it
    href: str
    web_url: str

    @property
    def success(self):
        return self.status is BuildStatus.SUCCESS

    def to_dict(self):
        """Convert to dictionary."""
        return {
            'build_id': self.id,
            'build_number': self.number,
            'status': self.status.value,
            'build_type_id': self.build_type_id,
            'start_date': self.start_date,
            'href': self.href,
            'web_url': self.web_url
        }

    @classmethod
    def from_element(cls, element, url):
        """Create Build from a <build> element.

        Args:
            element: The XML element
            url (callable): Turns the server-relative href into an absolute URL
        """
        return cls(
            id=attribute(element, 'id'),
            number=attribute(element, 'number'),
            status=BuildStatus(attribute(element, 'status').upper()),
            build_type_id=attribute(element, 'buildTypeId'),
            start_date=attribute_or(element, 'startDate', ''),
            href=url(attribute(element, 'href')),
            web_url=attribute(element, 'webUrl')
        )
