"""VAT back-calculation for tax-inclusive amounts.

Transaction amounts already contain VAT, so the tax share is
``amount * rate / (100 + rate)`` rather than ``amount * rate / 100``.

Reported figures are rounded to two decimals independently, so
``round(vat) + round(net)`` may differ from ``round(amount)`` by one cent.
Sums inside a report are always taken over the unrounded values.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from sanhuu.core.config import settings
from sanhuu.models.schemas import CompanySettings
from sanhuu.utils.money import HUNDRED, ZERO, round_cents, to_decimal


@dataclass(frozen=True)
class VatSplit:
    vat: Decimal
    net: Decimal

    @property
    def gross(self) -> Decimal:
        return self.vat + self.net

    def rounded(self) -> "VatSplit":
        return VatSplit(round_cents(self.vat), round_cents(self.net))


def decompose_vat(amount: Decimal, rate: Decimal, vat_registered: bool = True) -> VatSplit:
    """Split a VAT-inclusive amount into its tax and net-of-tax parts.

    Unregistered companies (or a zero rate) carry no VAT: the whole amount is net.
    """
    amount = to_decimal(amount)
    rate = to_decimal(rate)
    if not vat_registered or rate <= ZERO:
        return VatSplit(vat=ZERO, net=amount)
    vat = amount * rate / (HUNDRED + rate)
    return VatSplit(vat=vat, net=amount - vat)


def effective_vat_rate(company: CompanySettings) -> Decimal:
    if company.vat_rate is None:
        return settings.DEFAULT_VAT_RATE
    return company.vat_rate


def effective_income_tax_rate(company: CompanySettings) -> Decimal:
    if company.income_tax_rate is None:
        return settings.DEFAULT_INCOME_TAX_RATE
    return company.income_tax_rate


def decompose_for_company(amount: Decimal, company: CompanySettings) -> VatSplit:
    return decompose_vat(amount, effective_vat_rate(company), company.vat_registered)
