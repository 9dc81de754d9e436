"""
Base HTTP client for Telemost API.

Handles session management, authentication, and error normalization.
"""

import logging
from typing import Optional, Dict, Any, Callable, TypeVar

import requests

from .. import __version__
from ..config import TelemostConfig, get_config
from ..exceptions import (
    DecodeError,
    EmptyTokenError,
    ServiceError,
    TransportError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

CONTENT_TYPE_JSON = "application/json"


class HTTPClient:
    """
    Base HTTP client for the Telemost API.

    Handles:
    - Session management
    - OAuth authorization header
    - User agent
    - Error response handling
    """

    DEFAULT_USER_AGENT = f"telemost-cli/{__version__}"

    def __init__(self, config: Optional[TelemostConfig] = None):
        """
        Initialize the HTTP client.

        Args:
            config: Optional configuration. Uses global config if not provided.

        Raises:
            EmptyTokenError: If configuration has no token
        """
        self.config = config or get_config()

        if not self.config.token:
            raise EmptyTokenError()

        self._session: Optional[requests.Session] = None
        self._user_agent = self.DEFAULT_USER_AGENT
        self.set_user_agent(self.config.app_name, self.config.app_version)

    @property
    def session(self) -> requests.Session:
        """Get or create HTTP session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({
                "User-Agent": self._user_agent,
                "Accept": CONTENT_TYPE_JSON,
            })

        return self._session

    @property
    def base_url(self) -> str:
        """Get the conferences endpoint URL."""
        return self.config.api_url

    @property
    def user_agent(self) -> str:
        return self._user_agent

    def set_user_agent(self, app: Optional[str], version: Optional[str]) -> None:
        """
        Set user agent sent with every request.

        If either app or version is blank, the default user agent is used.
        """
        if not app or not version:
            self._user_agent = self.DEFAULT_USER_AGENT
        else:
            self._user_agent = f"{app}/{version} {self.DEFAULT_USER_AGENT}"

        if self._session is not None:
            self._session.headers["User-Agent"] = self._user_agent

    def _get_headers(self) -> Dict[str, str]:
        """Get request headers including authorization."""
        return {"Authorization": f"OAuth {self.config.token}"}

    def _handle_error(self, response: requests.Response) -> None:
        """Raise an exception describing an error response."""
        try:
            error_data = response.json()
        except ValueError:
            error_data = None

        if (
            isinstance(error_data, dict)
            and isinstance(error_data.get("error"), (str, type(None)))
            and isinstance(error_data.get("description"), (str, type(None)))
        ):
            code = error_data.get("error") or ""
            description = error_data.get("description") or ""

            logger.warning(
                "API error [%s %s] status=%d code=%s",
                response.request.method,
                response.request.url,
                response.status_code,
                code
            )

            raise ServiceError(
                code,
                description,
                status_code=response.status_code,
                response_data=error_data
            )

        raise UnexpectedStatusError(
            f"API returned non-ok status code {response.status_code}",
            status_code=response.status_code,
            details=response.text
        )

    def request(
        self,
        method: str,
        endpoint: str = "",
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
        decoder: Optional[Callable[[Any], T]] = None,
    ) -> Optional[T]:
        """
        Make an API request.

        Args:
            method: HTTP method
            endpoint: Path appended to the conferences endpoint
            params: Query parameters (list values are repeated)
            json_data: JSON body data
            decoder: Converts the decoded JSON body into a result. If not
                set, the response body is ignored.

        Returns:
            Decoded result, or None if no decoder was given

        Raises:
            TransportError: If the request could not be sent
            ServiceError: If the API returned an error envelope
            UnexpectedStatusError: If the API returned an error status without envelope
            DecodeError: If a successful response could not be decoded
        """
        url = self.base_url + endpoint
        headers = self._get_headers()

        if json_data is not None:
            headers["Content-Type"] = CONTENT_TYPE_JSON

        logger.debug("Request: %s %s", method, url)

        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_data,
                headers=headers,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"can't send request to API: {e}") from e

        logger.debug("Response: %d", response.status_code)

        if response.status_code > 299:
            self._handle_error(response)

        if decoder is None:
            return None

        try:
            return decoder(response.json())
        except (ValueError, TypeError, AttributeError) as e:
            raise DecodeError(
                f"can't decode API response: {e}",
                status_code=response.status_code
            ) from e

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            self._session.close()
            self._session = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
