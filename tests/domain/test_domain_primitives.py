"""Tests for ValueObject, AggregateRoot and DomainEvent."""

from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from ddd_patterns.domain import AggregateRoot, DomainEvent, ValueObject


class Money(ValueObject):
    amount: int
    currency: str


class Other(ValueObject):
    amount: int
    currency: str


class Wallet(AggregateRoot[str]):
    owner: str = ""


class WalletOpened(DomainEvent):
    aggregate_type: str | None = "Wallet"


class TestValueObject:
    def test_structural_equality(self) -> None:
        assert Money(amount=1, currency="EUR") == Money(amount=1, currency="EUR")
        assert Money(amount=1, currency="EUR") != Money(amount=2, currency="EUR")

    def test_different_types_are_not_equal(self) -> None:
        assert Money(amount=1, currency="EUR") != Other(amount=1, currency="EUR")

    def test_hashable(self) -> None:
        values = {Money(amount=1, currency="EUR"), Money(amount=1, currency="EUR")}

        assert len(values) == 1

    def test_hash_depends_on_class(self) -> None:
        assert hash(Money(amount=1, currency="EUR")) != hash(
            Other(amount=1, currency="EUR")
        )

    def test_frozen(self) -> None:
        money = Money(amount=1, currency="EUR")

        with pytest.raises(ValidationError):
            money.amount = 2  # type: ignore[misc]


class TestAggregateRoot:
    def test_requires_id(self) -> None:
        with pytest.raises(ValidationError):
            Wallet()  # type: ignore[call-arg]

    def test_collect_events_drains(self) -> None:
        wallet = Wallet(id="w1", owner="Alice")
        event = WalletOpened(aggregate_id="w1")
        wallet.add_event(event)

        assert wallet.pending_events == 1
        assert wallet.collect_events() == [event]
        assert wallet.collect_events() == []
        assert wallet.pending_events == 0

    def test_events_are_per_instance(self) -> None:
        first = Wallet(id="w1")
        second = Wallet(id="w2")
        first.add_event(WalletOpened(aggregate_id="w1"))

        assert second.collect_events() == []


def test_domain_event_defaults() -> None:
    event = WalletOpened(aggregate_id="w1")

    assert event.event_id
    assert isinstance(event.occurred_at, datetime)
    assert event.occurred_at.tzinfo is not None
    assert event.aggregate_type == "Wallet"
    assert WalletOpened().event_id != event.event_id
