"""Tests for the Contact entity and field rules."""

import dataclasses

import pytest

from addressbook.domain import Contact, is_valid_email, is_valid_phone, trim


def test_contact_strips_fields() -> None:
    contact = Contact(full_name="  Alice Smith ", phone=" 5551234567", email="alice@example.com  ")
    assert contact.full_name == "Alice Smith"
    assert contact.phone == "5551234567"
    assert contact.email == "alice@example.com"


def test_contact_display_line() -> None:
    contact = Contact(full_name="Alice Smith", phone="5551234567", email="alice@example.com")
    assert str(contact) == "Name: Alice Smith, Phone: 5551234567, Email: alice@example.com"


def test_contact_rejects_empty_name() -> None:
    with pytest.raises(ValueError):
        Contact(full_name="   ", phone="5551234567", email="a@b.io")


@pytest.mark.parametrize("phone", ["555", "55512345678", "555-123-4567", "abcdefghij", "", "٥٥٥١٢٣٤٥٦٧"])
def test_contact_rejects_bad_phone(phone: str) -> None:
    with pytest.raises(ValueError):
        Contact(full_name="Bob", phone=phone, email="bob@x.io")


@pytest.mark.parametrize("email", ["bob", "bob@x", "bob@x.i", "@x.io", "bob@@x.io", "bob x@y.io"])
def test_contact_rejects_bad_email(email: str) -> None:
    with pytest.raises(ValueError):
        Contact(full_name="Bob", phone="5551234567", email=email)


def test_field_rules() -> None:
    assert is_valid_phone("0123456789")
    assert not is_valid_phone("012345678")
    assert is_valid_email("first.last+tag@sub.example.org")
    assert is_valid_email("a_b%c-d@x-y.co")
    assert not is_valid_email("a@b.c0")


def test_matches_name_is_case_insensitive() -> None:
    contact = Contact(full_name="Alice Smith", phone="5551234567", email="alice@example.com")
    assert contact.matches_name("alice smith")
    assert contact.matches_name("ALICE SMITH")
    assert contact.matches_name("  Alice Smith ")
    assert not contact.matches_name("Alice")


def test_with_details_keeps_name_and_validates() -> None:
    contact = Contact(full_name="Alice Smith", phone="5551234567", email="alice@example.com")
    updated = contact.with_details("5559998888", "alice@new.io")
    assert updated.full_name == "Alice Smith"
    assert updated.phone == "5559998888"
    assert updated.email == "alice@new.io"
    assert contact.phone == "5551234567"
    with pytest.raises(ValueError):
        contact.with_details("123", "alice@new.io")


def test_contact_is_immutable() -> None:
    contact = Contact(full_name="Alice Smith", phone="5551234567", email="alice@example.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        contact.full_name = "Other"  # type: ignore[misc]


def test_trim_removes_control_characters_only() -> None:
    assert trim("\x00\x1f Alice \r\n") == "Alice"
    assert trim("\u00a0Alice\u2003") == "\u00a0Alice\u2003"
    assert trim("\x00\x01") == ""
