"""Tests for the monthly VAT return."""
from decimal import Decimal

import pytest
from conftest import make_txn, txn_json

from sanhuu.core.exceptions import InvalidPeriodError, MissingConfigurationError
from sanhuu.models.schemas import Category
from sanhuu.services.vat_service import generate_vat_report


def test_registered_company_sales_and_purchases(vat_company):
    txns = [
        make_txn("110000", "income", date="2024-03-10"),
        make_txn("55000", "expense", date="2024-03-12"),
    ]
    report = generate_vat_report(2024, 3, txns, vat_company)

    assert report.period == "2024 оны 3-р сар"
    assert report.sales.total_sales == 110000.0
    assert report.sales.vat_on_sales == 10000.0
    assert report.sales.vatable_sales == 100000.0
    assert report.purchases.vat_on_purchases == 5000.0
    assert report.vat_summary.output_vat == 10000.0
    assert report.vat_summary.input_vat == 5000.0
    assert report.vat_summary.vat_payable == 5000.0
    assert report.vat_summary.vat_refundable == 0.0


def test_unregistered_company_reports_zero_vat(plain_company):
    txns = [make_txn("110000", "income"), make_txn("20000", "expense")]
    report = generate_vat_report(2024, 3, txns, plain_company)

    assert report.sales.total_sales == 110000.0
    assert report.sales.vat_on_sales == 0.0
    assert report.sales.vatable_sales == 110000.0
    assert report.vat_summary.vat_payable == 0.0
    assert report.vat_summary.vat_refundable == 0.0
    assert report.company_info.vat_registered is False


def test_refundable_when_input_exceeds_output(vat_company):
    txns = [make_txn("11000", "income"), make_txn("33000", "expense")]
    summary = generate_vat_report(2024, 3, txns, vat_company).vat_summary
    assert summary.vat_payable == 0.0
    assert summary.vat_refundable == 2000.0


@pytest.mark.parametrize(
    "sales,purchases",
    [("0", "0"), ("1000", "1000"), ("12345.67", "999.99"), ("10", "77777.77")],
)
def test_payable_and_refundable_are_exclusive(vat_company, sales, purchases):
    txns = [make_txn(sales, "income"), make_txn(purchases, "expense")]
    summary = generate_vat_report(2024, 3, txns, vat_company).vat_summary
    assert summary.vat_payable >= 0 and summary.vat_refundable >= 0
    assert summary.vat_payable == 0 or summary.vat_refundable == 0
    assert round(summary.vat_payable - summary.vat_refundable, 2) == round(
        summary.output_vat - summary.input_vat, 2
    )


def test_vat_sums_unrounded_shares(vat_company):
    # Three sales of 1.05 each: per-row VAT rounds to 0.10, the sum rounds to 0.29
    txns = [make_txn("1.05", "income") for _ in range(3)]
    report = generate_vat_report(2024, 3, txns, vat_company)
    assert report.sales.vat_on_sales == 0.29
    assert [d.vat_amount for d in report.transaction_details.sales] == [0.1, 0.1, 0.1]


def test_details_are_chronological_and_filtered(vat_company):
    txns = [
        make_txn("300", "income", date="2024-03-30", document_no="D3"),
        make_txn("100", "income", date="2024-03-01", document_no="D1"),
        make_txn("999", "income", date="2024-04-01", document_no="OUT"),
        make_txn("200", "income", date="2024-03-15", document_no="D2a"),
        make_txn("250", "income", date="2024-03-15", document_no="D2b"),
    ]
    report = generate_vat_report(2024, 3, txns, vat_company)
    assert [d.document_no for d in report.transaction_details.sales] == ["D1", "D2a", "D2b", "D3"]
    assert report.sales.total_sales == 850.0


def test_detail_rows_resolve_categories(vat_company):
    categories = [Category(id="c1", name="Бараа", type="expense")]
    txns = [
        make_txn("2200", "expense", category_id="c1", description="Бараа авсан"),
        make_txn("1100", "expense"),
    ]
    details = generate_vat_report(2024, 3, txns, vat_company, categories).transaction_details.purchases
    assert details[0].category == "Бараа"
    assert details[0].vat_amount == 200.0
    assert details[0].amount_without_vat == 2000.0
    assert details[1].category == "Ангилаагүй"


def test_company_info_block(vat_company):
    info = generate_vat_report(2024, 3, [], vat_company).company_info
    assert info.name == "Тест ХХК"
    assert info.registration_number == "1234567"
    assert info.tax_number == "TIN-42"
    assert info.vat_registered is True


def test_missing_company_settings_rejected():
    with pytest.raises(MissingConfigurationError) as exc_info:
        generate_vat_report(2024, 3, [], None)
    assert exc_info.value.code == "CFG200"


def test_invalid_month_rejected(vat_company):
    with pytest.raises(InvalidPeriodError):
        generate_vat_report(2024, 13, [], vat_company)


def test_empty_month_is_all_zero(vat_company):
    report = generate_vat_report(2024, 2, [], vat_company)
    assert str(report.end_date) == "2024-02-29"
    assert report.vat_summary.output_vat == 0.0
    assert report.transaction_details.sales == []


# --- HTTP ------------------------------------------------------------------

def test_vat_report_endpoint(client, auth_headers, vat_company):
    payload = {
        "year": 2024,
        "month": 3,
        "transactions": [txn_json(make_txn(Decimal("110000"), "income"))],
        "companySettings": vat_company.model_dump(mode="json", by_alias=True),
    }
    resp = client.post("/generate-vat-report", json=payload, headers=auth_headers)
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["vatSummary"]["outputVat"] == 10000.0
    assert body["sales"]["vatOnSales"] == 10000.0
    assert body["companyInfo"]["registrationNumber"] == "1234567"
    assert body["transactionDetails"]["sales"][0]["amountWithoutVat"] == 100000.0


def test_vat_report_endpoint_without_company(client, auth_headers):
    resp = client.post("/generate-vat-report", json={"year": 2024, "month": 3}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json() == {
        "error": "Компанийн тохиргоо олдсонгүй",
        "code": "CFG200",
        "success": False,
        "details": {"parameter": "companySettings"},
    }


def test_vat_report_endpoint_invalid_month(client, auth_headers, vat_company):
    payload = {
        "year": 2024,
        "month": 13,
        "companySettings": vat_company.model_dump(mode="json", by_alias=True),
    }
    resp = client.post("/generate-vat-report", json=payload, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["code"] == "INP101"


def test_vat_report_endpoint_company_info_states_registration(client, auth_headers, plain_company):
    payload = {"year": 2024, "month": 3, "companySettings": plain_company.model_dump(mode="json", by_alias=True)}
    body = client.post("/generate-vat-report", json=payload, headers=auth_headers).json()
    assert body["companyInfo"] == {
        "name": "Жижиг ХХК",
        "registrationNumber": "7654321",
        "taxNumber": "",
        "vatRegistered": False,
    }
