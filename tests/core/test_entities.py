"""Tests for the Entity base class."""

import pytest

from domain_kernel import Entity, Equatable

from tests.sample_domain import Order, OrderId, User, UserId


class TestEntity:
    """Test cases for identity-based equality."""

    def test_same_id_different_state_is_equal(self):
        """Test that two entities sharing an id are equal whatever their state."""
        user_id = UserId("u1")
        first = User(user_id, "Ada", "ada@example.com")
        second = User(user_id, "Grace", "grace@example.com")
        third = User(UserId("u2"), "Ada", "ada@example.com")

        assert first.equals(second)
        assert first == second
        assert not third.equals(first)
        assert not third.equals(second)
        assert third != first

    def test_same_state_different_id_is_not_equal(self):
        """Test that identical non-id fields do not make entities equal."""
        first = Order(OrderId.generate(), total_cents=100)
        second = Order(OrderId.generate(), total_cents=100)

        assert not first.equals(second)

    def test_equality_survives_state_changes(self):
        """Test that mutating state keeps identity."""
        user = User(UserId("u1"), "Ada", "ada@example.com")
        snapshot = User(UserId("u1"), "Ada", "ada@example.com")

        user.name = "Countess"

        assert user == snapshot

    def test_hash_follows_identity(self):
        """Test entities can be used in sets keyed by identity."""
        users = {
            User(UserId("u1"), "Ada", "a@example.com"),
            User(UserId("u1"), "Other", "o@example.com"),
            User(UserId("u2"), "Ada", "a@example.com"),
        }

        assert len(users) == 2

    def test_id_property(self, sample_user, sample_user_id):
        """Test access to the identity."""
        assert sample_user.id is sample_user_id

    def test_id_cannot_be_reassigned(self, sample_user):
        """Test that the identity is fixed after construction."""
        with pytest.raises(AttributeError):
            sample_user._id = UserId("u2")
        with pytest.raises(AttributeError):
            sample_user.id = UserId("u2")

        assert sample_user.id == UserId("u1")

    def test_not_equal_to_non_entity(self, sample_user):
        """Test comparison with unrelated objects."""
        assert sample_user != "u1"
        assert sample_user != UserId("u1")

    def test_repr(self, sample_user):
        """Test representation shows the identity."""
        assert repr(sample_user) == "User(id=UserId(value='u1'))"

    def test_entities_satisfy_equatable(self, sample_user):
        """Test that entities expose the equality capability."""
        assert isinstance(sample_user, Entity)
        assert isinstance(sample_user, Equatable)
