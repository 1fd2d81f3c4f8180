"""Cost and financing record models.

Flat, immutable records produced by the cost models and the amortization
engine. Totals are computed fields so they can never disagree with their
components.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

_FROZEN = {"frozen": True}


class TransactionCosts(BaseModel):
    """One-time acquisition costs, derived solely from the price."""

    price: float = Field(default=0.0, description="Purchase price the costs apply to")
    purchase_tax: int = 0
    attorney_fees: int = 0
    appraiser_fee: int = 0
    registration_fee: int = 0

    model_config = _FROZEN

    @computed_field
    @property
    def total(self) -> int:
        """Sum of all acquisition fees."""
        return self.purchase_tax + self.attorney_fees + self.appraiser_fee + self.registration_fee

    @computed_field
    @property
    def total_with_purchase(self) -> float:
        """Cash needed at signing: price plus fees."""
        return self.price + self.total


class AnnualHoldingCosts(BaseModel):
    """Recurring carrying costs for one year of ownership."""

    arnona: int = 0
    arnona_per_sqm: float = 0.0
    management: int = 0
    opportunity_cost: int = Field(default=0, description="Informational, not a cash outflow")

    model_config = _FROZEN

    @computed_field
    @property
    def total_annual(self) -> int:
        """Cash outflow per year (opportunity cost excluded)."""
        return self.arnona + self.management

    @computed_field
    @property
    def total_with_opportunity(self) -> int:
        return self.total_annual + self.opportunity_cost


class ExitCosts(BaseModel):
    """Disposal-time taxation and commission."""

    gross_profit: float = 0.0
    betterment_levy: int = 0
    capital_gains: int = 0
    agent_commission: int = 0

    model_config = _FROZEN

    @computed_field
    @property
    def total_exit(self) -> int:
        return self.betterment_levy + self.capital_gains + self.agent_commission

    @computed_field
    @property
    def net_profit(self) -> float:
        """Gross appreciation minus every exit cost."""
        return self.gross_profit - self.total_exit


class InvestmentPnL(BaseModel):
    """Full profit and loss of holding a plot to its projected value."""

    purchase_price: float
    projected_value: float
    holding_years: float
    transaction: TransactionCosts
    annual: AnnualHoldingCosts
    exit: ExitCosts
    total_holding_costs: float
    total_investment: float
    gross_profit: float
    net_profit: float
    true_roi: int = Field(description="Net profit over total investment, percent")
    headline_roi: int = Field(description="Gross appreciation over price, percent")

    model_config = _FROZEN


class MortgagePayment(BaseModel):
    """Fixed-rate mortgage payment summary."""

    principal: float = 0.0
    annual_rate_pct: float = 0.0
    years: float = 0.0
    monthly_payment: int = 0

    model_config = _FROZEN

    @computed_field
    @property
    def months(self) -> int:
        return int(round(self.years * 12))

    @computed_field
    @property
    def total_payments(self) -> int:
        return self.monthly_payment * self.months

    @computed_field
    @property
    def total_interest(self) -> float:
        return self.total_payments - self.principal


class FinancingPlan(BaseModel):
    """Purchase financed with a down payment and a mortgage."""

    price: float
    down_payment_pct: float
    down_payment: int
    loan_amount: float
    mortgage: MortgagePayment

    model_config = _FROZEN

    @computed_field
    @property
    def ltv(self) -> float:
        """Loan-to-value ratio (0-1)."""
        return self.loan_amount / self.price if self.price > 0 else 0.0

    @computed_field
    @property
    def monthly_payment(self) -> int:
        return self.mortgage.monthly_payment

    @computed_field
    @property
    def total_interest(self) -> float:
        return self.mortgage.total_interest
