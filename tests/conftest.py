"""
Test configuration for geo_rewards.
"""
import os

import pytest


def pytest_configure():
    """Pick the test environment before settings load."""
    os.environ.setdefault('ENVIRONMENT', 'test')


@pytest.fixture
def api_client():
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def user():
    from tests.factories import UserFactory
    return UserFactory()


@pytest.fixture
def admin_user():
    from tests.factories import UserFactory
    return UserFactory(is_staff=True)


@pytest.fixture
def place():
    from tests.factories import PlaceFactory
    return PlaceFactory()


@pytest.fixture
def reward():
    from tests.factories import RewardFactory
    return RewardFactory(points_cost=30)


@pytest.fixture
def auth_client(api_client, user):
    """APIClient authenticated as the ``user`` fixture."""
    api_client.force_authenticate(user=user)
    return api_client
