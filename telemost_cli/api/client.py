"""
Telemost API Client - Main facade for all API operations.

This module provides flat access to all API endpoints while organizing
functionality into domain-specific modules.
"""

import dataclasses
from typing import Optional, List

from ..config import TelemostConfig, get_config
from ..models import Conference, ConferenceInfo, Hosts
from ._http import HTTPClient
from .conferences import ConferencesAPI
from .cohosts import CohostsAPI


class TelemostClient:
    """
    Client for the Yandex Telemost API.

    This is a facade that provides both:
    - Domain-specific sub-clients (client.conferences, client.cohosts)
    - Flat methods (client.create(), client.get_cohosts(), etc.)

    Usage:
        with TelemostClient("y0_AgAAAA...") as client:
            info = client.create(Conference().with_cohosts("user@yandex.ru"))
            print(info.join_url)
    """

    def __init__(self, token: Optional[str] = None, config: Optional[TelemostConfig] = None):
        """
        Initialize the API client.

        Args:
            token: OAuth token. Overrides the token from configuration.
            config: Optional configuration. Uses global config if not provided.

        Raises:
            EmptyTokenError: If no token is given
        """
        if token is not None:
            config = dataclasses.replace(config or TelemostConfig(), token=token)
        elif config is None:
            config = get_config()

        self._http = HTTPClient(config)

        # Domain-specific API modules
        self.conferences = ConferencesAPI(self._http)
        self.cohosts = CohostsAPI(self._http)

    @property
    def config(self) -> TelemostConfig:
        """Get the configuration."""
        return self._http.config

    @property
    def base_url(self) -> str:
        return self._http.base_url

    def set_user_agent(self, app: str, version: str) -> None:
        """Set application name and version reported in the user agent."""
        self._http.set_user_agent(app, version)

    # ========== Conference Methods ==========

    def create(self, conf: Optional[Conference]) -> ConferenceInfo:
        """Create a new conference."""
        return self.conferences.create(conf)

    def get(self, conference_id: str) -> ConferenceInfo:
        """Get conference info."""
        return self.conferences.get(conference_id)

    def update(self, conference_id: str, conf: Optional[Conference]) -> ConferenceInfo:
        """Update conference settings."""
        return self.conferences.update(conference_id, conf)

    def delete(self, conference_id: str) -> None:
        """Cancel a conference."""
        self.conferences.delete(conference_id)

    # ========== Cohost Methods ==========

    def get_cohosts(self, conference_id: str) -> Hosts:
        """Get conference co-hosts."""
        return self.cohosts.list(conference_id)

    def add_cohosts(self, conference_id: str, cohosts: List[str]) -> None:
        """Append co-hosts to a conference."""
        self.cohosts.add(conference_id, cohosts)

    def update_cohosts(self, conference_id: str, cohosts: List[str]) -> None:
        """Replace conference co-hosts."""
        self.cohosts.update(conference_id, cohosts)

    def delete_cohosts(self, conference_id: str, cohosts: List[str]) -> None:
        """Remove co-hosts from a conference."""
        self.cohosts.delete(conference_id, cohosts)

    # ========== Context Manager ==========

    def close(self) -> None:
        """Close the client session."""
        self._http.close()

    def __enter__(self) -> "TelemostClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def get_client(config: Optional[TelemostConfig] = None) -> TelemostClient:
    """Create an API client from configuration."""
    return TelemostClient(config=config or get_config())
