"""Test configuration for the PhoneBook API."""

from tests.fixtures import *  # noqa: F401,F403
