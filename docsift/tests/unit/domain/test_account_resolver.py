"""Tests for AccountIdentityResolver."""
import pytest

from docsift.domain.entities.account import AccountMetadata
from docsift.domain.services.account_resolver import AccountIdentityResolver
from docsift.domain.value_objects.resolved_identifier import IdentifierSource


@pytest.fixture
def resolver():
    return AccountIdentityResolver(clock=lambda: 1700000000.5)


def test_metadata_account_number_wins(resolver):
    metadata = AccountMetadata(account_number="123")
    resolved = resolver.resolve(metadata, "Account No: 9876543210", previous="555")

    assert resolved.value == "123"
    assert resolved.source is IdentifierSource.METADATA


def test_text_pattern_used_when_metadata_empty(resolver):
    resolved = resolver.resolve(AccountMetadata(), "Statement\nA/c No: 00112233445\n", previous="555")

    assert resolved.value == "00112233445"
    assert resolved.source is IdentifierSource.TEXT_PATTERN


def test_continuation_page_reuses_previous_identifier(resolver):
    first = resolver.resolve(AccountMetadata(account_number="123"), "header", previous=None)
    second = resolver.resolve(AccountMetadata(), "01-Sep FAST PAYMENT 394.71", previous=first.value)

    assert second.value == "123"
    assert second.source is IdentifierSource.CONTINUATION


def test_synthetic_identifier_uses_bank_name_and_clock(resolver):
    resolved = resolver.resolve(AccountMetadata(bank_name="Alpha Bank"), "no numbers here", previous=None)

    assert resolved.value == "UNKNOWN-Alpha Bank-1700000000500"
    assert resolved.source is IdentifierSource.SYNTHETIC


def test_synthetic_identifier_defaults_bank_placeholder(resolver):
    resolved = resolver.resolve(AccountMetadata(), "", previous=None)
    assert resolved.value == "UNKNOWN-BANK-1700000000500"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Account Number : 0725385342 - SGD", "0725385342"),
        ("account no. 12345678", "12345678"),
        ("A/C # 87654321", "87654321"),
        ("Savings A/c 123456789012", "123456789012"),
        ("CURRENT A/C: 99887766", "99887766"),
        ("Account - 44556677", "44556677"),
        ("Customer ref 5012345678901 printed", "5012345678901"),
    ],
)
def test_find_account_number_patterns(resolver, text, expected):
    assert resolver.find_account_number(text) == expected


def test_labelled_number_preferred_over_earlier_bare_number(resolver):
    text = "Ref 99999999999999\nAccount No: 12345678"
    assert resolver.find_account_number(text) == "12345678"


@pytest.mark.parametrize("text", ["", "Phone 12345", "Balance 1,234,567.00", "Card 123456789"])
def test_find_account_number_rejects_short_or_missing_numbers(resolver, text):
    assert resolver.find_account_number(text) is None


def test_default_clock_produces_non_empty_identifier():
    resolved = AccountIdentityResolver().resolve(AccountMetadata(), "", previous=None)
    assert resolved.value.startswith("UNKNOWN-BANK-")
    assert resolved.value.rsplit("-", 1)[1].isdigit()
