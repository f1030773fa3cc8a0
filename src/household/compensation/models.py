#!/usr/bin/env python3
"""
Compensation Data Models

Salary changes, per-earner compensation profiles, and the two-earner
salary configuration. Profiles are immutable: editing operations return a
new profile so that derived views (schedules, totals) never see a partially
edited history.
"""

import logging
import uuid
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any

from ..core.dates import FinancialDate, coerce_date
from ..core.exceptions import LastSalaryChangeError
from ..core.money import Money

logger = logging.getLogger(__name__)

PERSONS = ("user", "partner")
DEFAULT_FREQUENCY_WEEKS = 2


@dataclass(frozen=True)
class SalaryChange:
    """A salary amount that applies from its effective date until superseded."""

    id: str
    amount: Money
    effective_date: FinancialDate

    def __post_init__(self):
        if self.amount.cents < 0:
            raise ValueError(f"Salary amount must be non-negative: {self.amount}")

    @classmethod
    def create(cls, amount: Money, effective_date: "FinancialDate | date | str") -> "SalaryChange":
        """Create a change with a freshly generated identifier."""
        return cls(id=str(uuid.uuid4()), amount=amount, effective_date=coerce_date(effective_date))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SalaryChange":
        return cls(
            id=str(data["id"]),
            amount=Money.from_dollars(str(data.get("amount", 0))),
            effective_date=coerce_date(data["effectiveDate"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "amount": str(self.amount.to_decimal()),
            "effectiveDate": self.effective_date.to_iso_string(),
        }


@dataclass(frozen=True)
class CompensationProfile:
    """
    Recurring salary model for one earner.

    Attributes:
        pay_frequency_weeks: Weeks between two pay dates
        first_pay_date: Anchor from which the pay dates are projected. It
            need not match any salary change's effective date.
        history: Salary changes in entry order (never empty once configured)
    """

    pay_frequency_weeks: int
    first_pay_date: FinancialDate | None
    history: tuple[SalaryChange, ...] = field(default_factory=tuple)

    @classmethod
    def default(cls, person: str, today: FinancialDate | None = None) -> "CompensationProfile":
        """Two-week cadence anchored today with a single zero salary entry."""
        today = today or FinancialDate.today()
        return cls(
            pay_frequency_weeks=DEFAULT_FREQUENCY_WEEKS,
            first_pay_date=today,
            history=(SalaryChange(id=f"default-{person}", amount=Money.zero(), effective_date=today),),
        )

    def find_change(self, change_id: str) -> SalaryChange:
        for change in self.history:
            if change.id == change_id:
                return change
        raise KeyError(f"Unknown salary change: {change_id}")

    def current_amount(self, as_of: "FinancialDate | date | str | None" = None) -> Money:
        """Salary in effect today, or on ``as_of``."""
        from .history import resolve_amount

        return resolve_amount(self.history, as_of or FinancialDate.today())

    def add_change(self, amount: Money, effective_date: "FinancialDate | date | str") -> "CompensationProfile":
        """Return a new profile with an additional salary change."""
        change = SalaryChange.create(amount, effective_date)
        logger.debug(f"Adding salary change {change.id}: {change.amount} from {change.effective_date}")
        return replace(self, history=self.history + (change,))

    def update_change(
        self, change_id: str, amount: Money, effective_date: "FinancialDate | date | str"
    ) -> "CompensationProfile":
        """Return a new profile with one salary change replaced in place."""
        self.find_change(change_id)
        updated = SalaryChange(id=change_id, amount=amount, effective_date=coerce_date(effective_date))
        return replace(
            self,
            history=tuple(updated if change.id == change_id else change for change in self.history),
        )

    def remove_change(self, change_id: str) -> "CompensationProfile":
        """
        Return a new profile without the given salary change.

        Raises:
            KeyError: If no change has this id
            LastSalaryChangeError: If it is the only remaining change
        """
        self.find_change(change_id)
        if len(self.history) <= 1:
            raise LastSalaryChangeError("Cannot remove the last salary entry; at least one must remain")
        return replace(self, history=tuple(change for change in self.history if change.id != change_id))

    def with_schedule(
        self, frequency_weeks: int | None = None, first_pay_date: "FinancialDate | date | str | None" = None
    ) -> "CompensationProfile":
        """Return a new profile with a different pay cadence and/or anchor."""
        return replace(
            self,
            pay_frequency_weeks=self.pay_frequency_weeks if frequency_weeks is None else frequency_weeks,
            first_pay_date=self.first_pay_date if first_pay_date is None else coerce_date(first_pay_date),
        )


@dataclass(frozen=True)
class SalaryConfig:
    """Compensation profiles for the two earners of the household."""

    user: CompensationProfile
    partner: CompensationProfile

    @classmethod
    def default(cls, today: FinancialDate | None = None) -> "SalaryConfig":
        today = today or FinancialDate.today()
        return cls(
            user=CompensationProfile.default("user", today),
            partner=CompensationProfile.default("partner", today),
        )

    def profile(self, person: str) -> CompensationProfile:
        if person not in PERSONS:
            raise KeyError(f"Unknown person: {person} (expected one of {', '.join(PERSONS)})")
        return getattr(self, person)

    def with_profile(self, person: str, profile: CompensationProfile) -> "SalaryConfig":
        self.profile(person)
        return replace(self, **{person: profile})

    @classmethod
    def from_dict(cls, data: dict[str, Any], today: FinancialDate | None = None) -> "SalaryConfig":
        """
        Load a stored configuration.

        Older configurations stored a single ``<person>Amount`` instead of a
        ``<person>SalaryHistory`` list. Such an amount becomes the first
        history entry, effective on the stored first pay date.
        """
        today = today or FinancialDate.today()
        profiles = {}
        for person in PERSONS:
            first_pay_raw = data.get(f"{person}FirstPayDate")
            first_pay_date = coerce_date(first_pay_raw) if first_pay_raw else today

            history_data = data.get(f"{person}SalaryHistory")
            if history_data:
                history = tuple(SalaryChange.from_dict(entry) for entry in history_data)
            else:
                logger.info(f"Migrating legacy single salary amount for {person}")
                legacy_amount = data.get(f"{person}Amount") or 0
                history = (
                    SalaryChange(
                        id=f"init-{person}",
                        amount=Money.from_dollars(str(legacy_amount)),
                        effective_date=first_pay_date,
                    ),
                )

            profiles[person] = CompensationProfile(
                pay_frequency_weeks=int(data.get(f"{person}FrequencyWeeks") or DEFAULT_FREQUENCY_WEEKS),
                first_pay_date=first_pay_date,
                history=history,
            )

        return cls(**profiles)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for person in PERSONS:
            profile = self.profile(person)
            result[f"{person}FrequencyWeeks"] = profile.pay_frequency_weeks
            result[f"{person}FirstPayDate"] = (
                profile.first_pay_date.to_iso_string() if profile.first_pay_date else None
            )
            result[f"{person}SalaryHistory"] = [change.to_dict() for change in profile.history]
        return result
