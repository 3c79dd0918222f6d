"""Salary calculator and payroll batch tests."""
from decimal import Decimal

import pytest

from sanhuu.core.exceptions import InvalidWorkDaysError
from sanhuu.models.schemas import PayrollRates, SalaryInput
from sanhuu.services.payroll_service import calculate_salary, payroll_csv, summarize_payroll


def _input(base="1000000", work="22", total="22", **extra) -> SalaryInput:
    return SalaryInput(
        employee_name=extra.pop("employee_name", "Бат"),
        base_salary=Decimal(base),
        work_days=Decimal(work),
        total_work_days=Decimal(total),
        **extra,
    )


def test_full_month_decomposition():
    result = calculate_salary(_input())
    assert result.actual_salary == 1_000_000
    assert result.gross_salary == 1_000_000
    assert result.social_insurance == 115_000
    assert result.health_insurance == 20_000
    assert result.taxable_income == 865_000
    assert result.personal_income_tax == 86_500
    assert result.total_deductions == 221_500
    assert result.net_salary == 778_500
    assert result.employer_social_insurance == 145_000
    assert result.total_employer_cost == 1_145_000
    assert result.warnings == []


def test_partial_month_is_prorated():
    result = calculate_salary(_input(work="11", total="22"))
    assert result.actual_salary == 500_000
    assert result.gross_salary == 500_000
    assert result.social_insurance == 57_500


def test_bonus_and_deductions_adjust_gross():
    result = calculate_salary(_input(bonus=Decimal("200000"), deductions=Decimal("50000")))
    assert result.gross_salary == 1_150_000
    assert result.bonus == 200000.0
    assert result.deductions == 50000.0


def test_zero_salary_is_all_zero():
    result = calculate_salary(_input(base="0"))
    assert result.gross_salary == 0
    assert result.net_salary == 0
    assert result.total_employer_cost == 0


def test_zero_work_days_is_allowed():
    result = calculate_salary(_input(work="0"))
    assert result.actual_salary == 0
    assert result.net_salary == 0


@pytest.mark.parametrize("total", ["0", "-5"])
def test_non_positive_total_work_days_rejected(total):
    with pytest.raises(InvalidWorkDaysError) as exc_info:
        calculate_salary(_input(total=total))
    assert exc_info.value.code == "INP102"
    assert exc_info.value.details == {"field": "totalWorkDays"}


def test_more_work_days_than_month_warns():
    result = calculate_salary(_input(work="25", total="22"))
    assert result.warnings
    assert result.gross_salary > 1_000_000


def test_negative_gross_warns_instead_of_failing():
    result = calculate_salary(_input(base="100000", deductions=Decimal("300000")))
    assert result.gross_salary == -200_000
    assert result.warnings


def test_net_is_monotonic_in_base_salary():
    nets = [calculate_salary(_input(base=str(base))).net_salary for base in range(0, 3_000_001, 250_000)]
    assert nets == sorted(nets)


def test_net_plus_deductions_equals_gross():
    for base in ("123457", "999999", "1500001", "87"):
        result = calculate_salary(_input(base=base, work="17", total="21"))
        assert result.net_salary + result.total_deductions == result.gross_salary


def test_rates_can_be_overridden():
    rates = PayrollRates(
        social_insurance=Decimal("10"),
        health_insurance=Decimal("0"),
        personal_income_tax=Decimal("0"),
        employer_social_insurance=Decimal("0"),
        employer_health_insurance=Decimal("0"),
    )
    result = calculate_salary(_input(), rates=rates)
    assert result.social_insurance == 100_000
    assert result.net_salary == 900_000
    assert result.total_employer_cost == 1_000_000


def test_payload_rates_used_when_no_explicit_rates():
    result = calculate_salary(_input(rates=PayrollRates(personal_income_tax=Decimal("20"))))
    assert result.personal_income_tax == 173_000


def test_payroll_batch_totals_and_csv():
    employees = [
        _input(employee_name="Бат"),
        _input(base="500000", employee_name="Дорж, ахлах"),
    ]
    summary = summarize_payroll(employees, fmt="csv")
    assert summary.employee_count == 2
    assert summary.total_gross_salary == 1_500_000
    assert summary.total_net_salary == sum(e.net_salary for e in summary.employees)
    assert summary.total_employer_cost == 1_145_000 + 572_500

    csv_text = summary.csv_data
    assert csv_text.startswith("\ufeffАжилтны нэр,")
    lines = csv_text.lstrip("\ufeff").splitlines()
    assert len(lines) == 3
    assert lines[1].startswith("Бат,1000000,1000000,0,1000000,115000,20000,86500,221500,778500,145000,1145000")
    assert lines[2].startswith('"Дорж, ахлах",')


def test_payroll_batch_json_has_no_csv():
    summary = summarize_payroll([_input()])
    assert summary.csv_data is None


def test_payroll_csv_header_order():
    header = payroll_csv([]).lstrip("\ufeff").splitlines()[0]
    assert header.split(",")[0] == "Ажилтны нэр"
    assert header.split(",")[-1] == "Нийт зардал"


# --- HTTP ------------------------------------------------------------------

def test_calculate_salary_endpoint(client, auth_headers):
    resp = client.post(
        "/calculate-salary",
        json={"employeeName": "Бат", "baseSalary": 1000000, "workDays": 22, "totalWorkDays": 22},
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["netSalary"] == 778500
    assert body["totalEmployerCost"] == 1145000
    assert body["personalIncomeTax"] == 86500


def test_calculate_salary_endpoint_rejects_zero_total_days(client, auth_headers):
    resp = client.post(
        "/calculate-salary",
        json={"employeeName": "Бат", "baseSalary": 1000000, "workDays": 0, "totalWorkDays": 0},
        headers=auth_headers,
    )
    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == "INP102"
    assert body["success"] is False


def test_calculate_salary_endpoint_validates_negative_salary(client, auth_headers):
    resp = client.post(
        "/calculate-salary",
        json={"employeeName": "Бат", "baseSalary": -1, "workDays": 22, "totalWorkDays": 22},
        headers=auth_headers,
    )
    assert resp.status_code == 400
    assert resp.json()["code"] == "INP100"


def test_calculate_payroll_endpoint(client, auth_headers):
    resp = client.post(
        "/calculate-payroll",
        json={
            "employees": [
                {"employeeName": "A", "baseSalary": 1000000, "workDays": 22, "totalWorkDays": 22},
                {"employeeName": "B", "baseSalary": 2000000, "workDays": 11, "totalWorkDays": 22},
            ],
            "format": "csv",
        },
        headers=auth_headers,
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["employeeCount"] == 2
    assert body["totalGrossSalary"] == 2000000
    assert body["csvData"].startswith("\ufeff")


@pytest.mark.parametrize(
    "field,value",
    [("baseSalary", 1e28), ("bonus", 1e20), ("deductions", 1e16), ("workDays", 1e25), ("totalWorkDays", 1e25)],
)
def test_calculate_salary_endpoint_rejects_oversized_values(client, auth_headers, field, value):
    payload = {"employeeName": "Бат", "baseSalary": 1000000, "workDays": 22, "totalWorkDays": 22, field: value}
    resp = client.post("/calculate-salary", json=payload, headers=auth_headers)
    assert resp.status_code == 400, resp.text
    body = resp.json()
    assert body["code"] == "INP100"
    assert body["details"]["field"] == field


def test_largest_accepted_salary_still_computes():
    result = calculate_salary(_input(base="1000000000000000", work="366", total="1"))
    assert result.gross_salary == 366_000_000_000_000_000
