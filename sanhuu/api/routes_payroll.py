from fastapi import APIRouter

from sanhuu.api.dependencies import CurrentUserDep
from sanhuu.models import schemas
from sanhuu.services.payroll_service import calculate_salary, summarize_payroll

router = APIRouter()


@router.post("/calculate-salary", response_model=schemas.SalaryResult)
def calculate_salary_endpoint(
    payload: schemas.SalaryInput,
    current_user_id: CurrentUserDep,
):
    """Prorate one employee's salary and decompose it into statutory components."""
    return calculate_salary(payload)


@router.post("/calculate-payroll", response_model=schemas.PayrollSummaryOut)
def calculate_payroll_endpoint(
    payload: schemas.PayrollRequest,
    current_user_id: CurrentUserDep,
):
    """Calculate a batch of employees and total net salary and employer cost."""
    return summarize_payroll(payload.employees, payload.rates, payload.format)
