"""Tests for identifier value objects."""

import uuid
from datetime import datetime, timezone

import pytest

from domain_kernel import EventId, Identifier, InvalidValueError, UUIDIdentifier

from tests.sample_domain import OrderId, TeamId, UserId


class TestIdentifier:
    """Test cases for Identifier."""

    def test_string_and_integer_identifiers(self):
        """Test that str and int values are accepted."""
        class SequenceId(Identifier[int]):
            pass

        assert UserId("u1").value == "u1"
        assert SequenceId(7).value == 7
        assert str(SequenceId(7)) == "7"

    def test_same_kind_same_value_equal(self):
        """Test value equality within one identifier kind."""
        assert UserId("u1").equals(UserId("u1"))
        assert hash(UserId("u1")) == hash(UserId("u1"))

    def test_kinds_are_not_interchangeable(self):
        """Test that identifiers of different kinds never compare equal."""
        assert not UserId("same").equals(TeamId("same"))
        assert UserId("same") != TeamId("same")
        assert len({UserId("same"), TeamId("same")}) == 2

    @pytest.mark.parametrize("value", [True, 1.5, None, b"u1"])
    def test_rejects_non_identifier_values(self, value):
        """Test that booleans, floats and other types are refused."""
        with pytest.raises(InvalidValueError):
            UserId(value)


class TestUUIDIdentifier:
    """Test cases for UUID-backed identifiers."""

    def test_generate_produces_uuid_v7(self):
        """Test generated identifiers are UUIDv7 strings."""
        order_id = OrderId.generate()

        assert isinstance(order_id, OrderId)
        assert uuid.UUID(order_id.value).version == 7

    def test_generated_identifiers_are_distinct_and_ordered(self):
        """Test pairwise distinctness and creation ordering."""
        ids = [OrderId.generate() for _ in range(500)]

        assert len(set(ids)) == len(ids)
        assert ids == sorted(ids)
        assert ids[0] < ids[-1]
        assert ids[-1] > ids[0]
        assert ids[0] <= ids[0]

    def test_accepts_existing_uuid(self):
        """Test wrapping a UUID string from elsewhere."""
        raw = str(uuid.uuid4())

        assert OrderId(raw).value == raw

    def test_rejects_malformed_uuid(self):
        """Test that non-UUID strings are refused."""
        with pytest.raises(InvalidValueError, match="must be a valid UUID"):
            OrderId("not-a-uuid")

    def test_timestamp(self):
        """Test that the creation moment is recovered from a UUIDv7."""
        before = datetime.now(timezone.utc).replace(microsecond=0)
        order_id = OrderId.generate()

        assert order_id.timestamp is not None
        assert order_id.timestamp.tzinfo is not None
        assert order_id.timestamp >= before

    def test_timestamp_none_for_other_versions(self):
        """Test that only UUIDv7 carries a timestamp."""
        assert OrderId(str(uuid.uuid4())).timestamp is None

    def test_ordering_requires_same_kind(self):
        """Test that identifiers of different kinds are not orderable."""
        with pytest.raises(TypeError):
            OrderId.generate() < EventId.generate()

    def test_event_id_is_uuid_identifier(self):
        """Test the event identifier kind."""
        event_id = EventId.generate()

        assert isinstance(event_id, UUIDIdentifier)
        assert not event_id.equals(OrderId(event_id.value))
