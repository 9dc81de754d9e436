"""
Conferences API - Conference management.

https://yandex.ru/dev/telemost/doc/ru/conference-create
"""

from typing import Optional

from ._http import HTTPClient
from ..exceptions import EmptyIDError, MissingConferenceError
from ..models import Conference, ConferenceInfo, validate_conference


class ConferencesAPI:
    """
    API for conference management.

    Handles:
    - Conference creation
    - Reading and updating conference settings
    - Conference cancellation
    """

    def __init__(self, http: HTTPClient):
        """
        Initialize Conferences API.

        Args:
            http: HTTP client instance
        """
        self._http = http

    def create(self, conf: Optional[Conference]) -> ConferenceInfo:
        """
        Create a new conference or broadcast.

        Args:
            conf: Conference settings

        Returns:
            Created conference info
        """
        if conf is None:
            raise MissingConferenceError()

        validate_conference(conf)

        return self._http.request(
            "POST", "", json_data=conf.to_dict(), decoder=ConferenceInfo.from_dict
        )

    def get(self, conference_id: str) -> ConferenceInfo:
        """
        Get conference info.

        Args:
            conference_id: Conference ID

        Returns:
            Conference info
        """
        if not conference_id:
            raise EmptyIDError()

        return self._http.request(
            "GET", f"/{conference_id}", decoder=ConferenceInfo.from_dict
        )

    def update(self, conference_id: str, conf: Optional[Conference]) -> ConferenceInfo:
        """
        Update conference settings.

        Args:
            conference_id: Conference ID
            conf: New conference settings (only set fields are changed)

        Returns:
            Updated conference info
        """
        if not conference_id:
            raise EmptyIDError()
        if conf is None:
            raise MissingConferenceError()

        validate_conference(conf)

        return self._http.request(
            "PATCH", f"/{conference_id}",
            json_data=conf.to_dict(),
            decoder=ConferenceInfo.from_dict
        )

    def delete(self, conference_id: str) -> None:
        """Cancel a conference or broadcast."""
        if not conference_id:
            raise EmptyIDError()

        self._http.request("DELETE", f"/{conference_id}")
