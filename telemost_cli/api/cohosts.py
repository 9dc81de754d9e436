"""
Cohosts API - Conference co-host management.
"""

from typing import Any, List, Optional

from ._http import HTTPClient
from ..exceptions import EmptyCohostsError, EmptyIDError
from ..models import Hosts

COHOSTS_PAGE_LIMIT = 256


def _decode_cohosts(data: Any) -> Hosts:
    if not isinstance(data, dict):
        raise TypeError(f"cohosts response: expected JSON object, got {type(data).__name__}")
    return Hosts.from_list(data.get("cohosts"))


class CohostsAPI:
    """
    API for conference co-hosts.

    Handles:
    - Listing co-hosts
    - Adding, replacing and removing co-hosts
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Cohosts API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    @staticmethod
    def _check_args(conference_id: str, cohosts: Optional[List[str]]) -> None:
        if not conference_id:
            raise EmptyIDError()
        if not cohosts:
            raise EmptyCohostsError()

    def list(self, conference_id: str) -> Hosts:
        """
        Get all co-hosts of a conference.

        https://yandex.ru/dev/telemost/doc/ru/cohosts-read

        Args:
            conference_id: Conference ID

        Returns:
            Conference co-hosts
        """
        if not conference_id:
            raise EmptyIDError()

        return self._http.request(
            "GET", f"/{conference_id}/cohosts",
            params={"offset": 0, "limit": COHOSTS_PAGE_LIMIT},
            decoder=_decode_cohosts
        )

    def add(self, conference_id: str, cohosts: List[str]) -> None:
        """Append co-hosts to a conference."""
        self._check_args(conference_id, cohosts)

        self._http.request(
            "PATCH", f"/{conference_id}/cohosts",
            json_data={"cohosts": Hosts.from_emails(cohosts).to_list()}
        )

    def update(self, conference_id: str, cohosts: List[str]) -> None:
        """Replace all co-hosts of a conference."""
        self._check_args(conference_id, cohosts)

        self._http.request(
            "PUT", f"/{conference_id}/cohosts",
            json_data={"cohosts": Hosts.from_emails(cohosts).to_list()}
        )

    def delete(self, conference_id: str, cohosts: List[str]) -> None:
        """Remove given co-hosts from a conference."""
        self._check_args(conference_id, cohosts)

        self._http.request(
            "DELETE", f"/{conference_id}/cohosts",
            params={"cohost_emails": list(cohosts)}
        )
