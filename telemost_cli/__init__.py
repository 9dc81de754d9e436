"""
Telemost CLI - Client library and command line tool for the Yandex Telemost API.
"""

__version__ = "1.0.0"
__prog_name__ = "telemost"
