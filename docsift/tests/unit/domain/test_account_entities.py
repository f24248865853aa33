import pytest

from docsift.domain.entities.account import Account, AccountMetadata, TransactionRow


class TestAccountMetadata:

    def test_from_payload_maps_all_fields(self):
        metadata = AccountMetadata.from_payload(
            {
                "bankName": "Alpha Bank",
                "accountHolderName": "Jane Doe",
                "accountNumber": " 1234567890 ",
                "accountType": "Savings",
                "currency": "INR",
                "statementStartDate": "01/04/2024",
                "statementEndDate": "30/04/2024",
            }
        )

        assert metadata.bank_name == "Alpha Bank"
        assert metadata.account_holder_name == "Jane Doe"
        assert metadata.account_number == "1234567890"
        assert metadata.account_type == "Savings"
        assert metadata.currency == "INR"
        assert metadata.statement_start_date == "01/04/2024"
        assert metadata.statement_end_date == "30/04/2024"

    def test_missing_and_null_values_become_empty_strings(self):
        metadata = AccountMetadata.from_payload({"bankName": None})

        assert metadata == AccountMetadata()
        assert all(value == "" for value in metadata.to_dict().values())

    def test_numeric_account_number_is_coerced_to_string(self):
        metadata = AccountMetadata.from_payload({"accountNumber": 12345678901})
        assert metadata.account_number == "12345678901"

    def test_non_mapping_payload_yields_empty_metadata(self):
        assert AccountMetadata.from_payload(None) == AccountMetadata()
        assert AccountMetadata.from_payload(["not", "an", "object"]) == AccountMetadata()


class TestTransactionRow:

    def test_rows_keep_extractor_order_and_string_values(self):
        rows = TransactionRow.list_from_payload(
            {
                "transactions": [
                    {"date": "01-Sep", "description": "FAST PAYMENT", "debitAmount": "394.71", "runningBalance": "84,255.32"},
                    {"date": "02-Sep", "description": "SALARY", "creditAmount": 1000},
                ]
            }
        )

        assert [row.description for row in rows] == ["FAST PAYMENT", "SALARY"]
        assert rows[0].debit_amount == "394.71"
        assert rows[0].credit_amount == ""
        assert rows[1].credit_amount == "1000"

    def test_row_values_are_kept_exactly_as_extracted(self):
        rows = TransactionRow.list_from_payload(
            {"transactions": [{"date": " 01-Sep ", "description": "FAST PAYMENT  REF 77 ", "debitAmount": " 394.71"}]}
        )

        assert rows[0].date == " 01-Sep "
        assert rows[0].description == "FAST PAYMENT  REF 77 "
        assert rows[0].debit_amount == " 394.71"

    def test_non_object_entries_are_dropped(self):
        rows = TransactionRow.list_from_payload({"transactions": [{"date": "x"}, "junk", None, 3]})
        assert len(rows) == 1

    @pytest.mark.parametrize("payload", [{}, {"transactions": None}, {"transactions": "none"}, None])
    def test_missing_transactions_yield_no_rows(self, payload):
        assert TransactionRow.list_from_payload(payload) == ()

    def test_to_dict_uses_camel_case_keys(self):
        row = TransactionRow(date="d", description="e", debit_amount="1", credit_amount="2", running_balance="3")
        assert row.to_dict() == {
            "date": "d",
            "description": "e",
            "debitAmount": "1",
            "creditAmount": "2",
            "runningBalance": "3",
        }


class TestAccount:

    def test_account_requires_identifier(self):
        with pytest.raises(ValueError):
            Account.open("", AccountMetadata())

    def test_with_transactions_returns_new_account(self):
        account = Account.open("123", AccountMetadata(bank_name="Alpha Bank"))
        first = TransactionRow(description="one")
        second = TransactionRow(description="two")

        updated = account.with_transactions([first]).with_transactions([second])

        assert account.transactions == ()
        assert updated.transactions == (first, second)
        assert updated.metadata.bank_name == "Alpha Bank"

    def test_to_dict_reports_resolved_identifier(self):
        metadata = AccountMetadata(bank_name="Alpha Bank", account_number="")
        account = Account.open("UNKNOWN-Alpha Bank-1", metadata)

        data = account.to_dict()

        assert data["accountNumber"] == "UNKNOWN-Alpha Bank-1"
        assert data["bankName"] == "Alpha Bank"
        assert data["transactions"] == []
