"""Pytest configuration and fixtures for domain-kernel tests."""

import pytest

from domain_kernel import EventTypeRegistry
from domain_kernel.config import reset_settings

from tests.sample_domain import (
    OrderId,
    User,
    UserId,
)


@pytest.fixture
def sample_user_id():
    """Sample user ID for testing."""
    return UserId("u1")


@pytest.fixture
def sample_order_id():
    """Sample order ID for testing."""
    return OrderId.generate()


@pytest.fixture
def sample_user(sample_user_id):
    """Freshly constructed user aggregate with an empty event buffer."""
    return User(sample_user_id, "Ada", "ada@example.com")


@pytest.fixture
def registry():
    """Empty event type registry, isolated from the default one."""
    return EventTypeRegistry()


@pytest.fixture
def clean_settings():
    """Re-read settings from the environment before and after a test."""
    reset_settings()
    yield
    reset_settings()
