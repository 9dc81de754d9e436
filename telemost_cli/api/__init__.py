"""
Telemost API Client Package.

Structure:
    - client.py: Main TelemostClient facade
    - _http.py: Base HTTP client with session, auth, and error handling
    - conferences.py: Conference management
    - cohosts.py: Co-host management

Usage:
    from telemost_cli.api import TelemostClient

    client = TelemostClient("y0_AgAAAA...")

    # Domain-specific style
    info = client.conferences.get("12345678901234")
    emails = client.cohosts.list("12345678901234").flatten()

    # Flat style
    info = client.get("12345678901234")
    emails = client.get_cohosts("12345678901234").flatten()
"""

from .client import TelemostClient, get_client
from ._http import HTTPClient
from .conferences import ConferencesAPI
from .cohosts import CohostsAPI

__all__ = [
    # Main client
    "TelemostClient",
    "get_client",
    # HTTP layer
    "HTTPClient",
    # Domain APIs
    "ConferencesAPI",
    "CohostsAPI",
]
