"""
Conference data model.

Value objects sent to and received from the Telemost API, with JSON
marshaling and local validation of conference settings.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Iterable

from .exceptions import ValidationError


ROOM_LEVEL_PUBLIC = "PUBLIC"
ROOM_LEVEL_ORG = "ORGANIZATION"
ROOM_LEVEL_ADMINS = "ADMINS"
ROOM_LEVEL_UNKNOWN = "UNKNOWN"

ROOM_LEVELS = (ROOM_LEVEL_PUBLIC, ROOM_LEVEL_ORG, ROOM_LEVEL_ADMINS, ROOM_LEVEL_UNKNOWN)

ACCESS_LEVEL_PUBLIC = "PUBLIC"
ACCESS_LEVEL_ORG = "ORGANIZATION"
ACCESS_LEVEL_UNKNOWN = "UNKNOWN"

ACCESS_LEVELS = (ACCESS_LEVEL_PUBLIC, ACCESS_LEVEL_ORG, ACCESS_LEVEL_UNKNOWN)

MAX_TITLE_LENGTH = 1024
MAX_DESCRIPTION_LENGTH = 2048
MAX_COHOSTS = 30


def _object(data: Any, name: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"{name}: expected JSON object, got {type(data).__name__}")
    return data


def _string(data: Dict[str, Any], key: str) -> str:
    """Read an optional string field; null and missing give an empty string."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key}: expected string, got {type(value).__name__}")
    return value


@dataclass
class Host:
    """Conference co-host."""

    email: str

    def to_dict(self) -> Dict[str, Any]:
        return {"email": self.email}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Host":
        return cls(email=_string(_object(data, "cohost"), "email"))


class Hosts(list):
    """List of co-hosts."""

    @classmethod
    def from_emails(cls, emails: Iterable[str]) -> "Hosts":
        """Build hosts from plain email addresses."""
        return cls(Host(email) for email in emails)

    @classmethod
    def from_list(cls, data: Optional[List[Dict[str, Any]]]) -> "Hosts":
        if data is None:
            return cls()
        if not isinstance(data, list):
            raise TypeError(f"cohosts: expected JSON array, got {type(data).__name__}")
        return cls(Host.from_dict(item) for item in data)

    def flatten(self) -> List[str]:
        """Return email addresses of all hosts."""
        return [host.email for host in self]

    def to_list(self) -> List[Dict[str, Any]]:
        return [host.to_dict() for host in self]


@dataclass
class LiveStream:
    """Live stream settings of a conference."""

    access_level: str = ""
    title: str = ""
    description: str = ""
    watch_url: str = ""  # assigned by the server

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.access_level:
            data["access_level"] = self.access_level
        if self.title:
            data["title"] = self.title
        if self.description:
            data["description"] = self.description
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LiveStream":
        data = _object(data, "live_stream")
        return cls(
            access_level=_string(data, "access_level"),
            title=_string(data, "title"),
            description=_string(data, "description"),
            watch_url=_string(data, "watch_url"),
        )


@dataclass
class Conference:
    """
    Conference settings used to create or update a conference.

    Empty fields are not sent, so the server keeps (or defaults) them.
    """

    waiting_room_level: str = ""
    live_stream: Optional[LiveStream] = None
    cohosts: Hosts = field(default_factory=Hosts)

    def with_cohosts(self, *emails: str) -> "Conference":
        """Append co-hosts and return the conference for chaining."""
        self.cohosts = Hosts(self.cohosts or ())
        self.cohosts.extend(Hosts.from_emails(emails))
        return self

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.waiting_room_level:
            data["waiting_room_level"] = self.waiting_room_level
        if self.live_stream is not None:
            data["live_stream"] = self.live_stream.to_dict()
        if self.cohosts:
            data["cohosts"] = Hosts(self.cohosts).to_list()
        return data


@dataclass
class ConferenceInfo(Conference):
    """Information about an existing conference."""

    id: str = ""
    join_url: str = ""
    sip_uri_meeting: str = ""
    sip_uri_telemost: str = ""
    sip_id: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConferenceInfo":
        """
        Build conference info from an API response.

        Raises:
            TypeError: If the payload or one of its fields has the wrong type
        """
        data = _object(data, "conference")
        live_stream = data.get("live_stream")

        return cls(
            waiting_room_level=_string(data, "waiting_room_level"),
            live_stream=LiveStream.from_dict(live_stream) if live_stream is not None else None,
            cohosts=Hosts.from_list(data.get("cohosts")),
            id=_string(data, "id"),
            join_url=_string(data, "join_url"),
            sip_uri_meeting=_string(data, "sip_uri_meeting"),
            sip_uri_telemost=_string(data, "sip_uri_telemost"),
            sip_id=_string(data, "sip_id"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        if self.live_stream is not None and self.live_stream.watch_url:
            data["live_stream"]["watch_url"] = self.live_stream.watch_url
        data.update({
            "id": self.id,
            "join_url": self.join_url,
            "sip_uri_meeting": self.sip_uri_meeting,
            "sip_uri_telemost": self.sip_uri_telemost,
            "sip_id": self.sip_id,
        })
        return data


def validate_conference(conf: Conference) -> None:
    """
    Validate conference settings before sending them.

    Checks run in order and the first failure is raised.

    Raises:
        ValidationError: If settings are not accepted by the API
    """
    stream = conf.live_stream

    if conf.waiting_room_level and conf.waiting_room_level not in ROOM_LEVELS:
        raise ValidationError(f"unknown waiting room level: {conf.waiting_room_level}")

    if stream is not None and stream.access_level and stream.access_level not in ACCESS_LEVELS:
        raise ValidationError(f"unknown live stream access level: {stream.access_level}")

    if stream is not None and len(stream.title) > MAX_TITLE_LENGTH:
        raise ValidationError(
            f"title exceeds maximum length ({len(stream.title)} > {MAX_TITLE_LENGTH})"
        )

    if stream is not None and len(stream.description) > MAX_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"description exceeds maximum length ({len(stream.description)} > {MAX_DESCRIPTION_LENGTH})"
        )

    cohost_count = len(conf.cohosts or ())
    if cohost_count > MAX_COHOSTS:
        raise ValidationError(f"too many cohosts ({cohost_count} > {MAX_COHOSTS})")
