import math

from .errors import ValidationFailure
from .schemas import EmiMonth, EmiSummary

def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)

def monthly_rate(annual_rate: float) -> float:
    return annual_rate / 12 / 100

def emi_amount(principal: float, annual_rate: float, years: int) -> float:
    """EMI = P * r * (1 + r)^n / ((1 + r)^n - 1), r monthly, n months."""
    r = monthly_rate(annual_rate)
    n = years * 12
    if r == 0:
        return principal / n
    growth = (1 + r) ** n
    return principal * r * growth / (growth - 1)

def monthly_breakdown(principal: float, annual_rate: float, emi: float, months: int = 12) -> list[EmiMonth]:
    r = monthly_rate(annual_rate)
    remaining = principal
    rows: list[EmiMonth] = []
    for month in range(1, months + 1):
        interest = remaining * r
        principal_part = emi - interest
        remaining -= principal_part
        rows.append(EmiMonth(
            month=month,
            emi=emi,
            principal=principal_part,
            interest=interest,
            balance=max(remaining, 0.0),
        ))
    return rows

def calculate_emi(principal: float, annual_rate: float, years: int, months: int = 12) -> EmiSummary:
    if principal <= 0 or years < 1 or annual_rate < 0:
        raise ValidationFailure(
            "Loan amount and tenure must be positive and the rate non-negative",
            details={"principal": principal, "annual_rate": annual_rate, "years": years},
        )
    emi = emi_amount(principal, annual_rate, years)
    total_payment = emi * years * 12
    principal_pct = round_half_up(principal / total_payment * 100) if total_payment else 0
    return EmiSummary(
        emi=emi,
        total_payment=total_payment,
        total_interest=total_payment - principal,
        principal_percentage=principal_pct,
        interest_percentage=100 - principal_pct,
        breakdown=monthly_breakdown(principal, annual_rate, emi, months),
    )
