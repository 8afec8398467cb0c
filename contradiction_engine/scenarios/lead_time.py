"""
Lead-time comparison between a real-world event and model flag dates.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..config.model_config import PLAYGROUND_CONFIG
from .scenario_store import Scenario

DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """Parse a YYYY-MM-DD string; None when missing or unparsable."""
    if not value:
        return None
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT)
    except (ValueError, AttributeError):
        return None


def days_between(later: Optional[str], earlier: Optional[str]) -> Optional[int]:
    """
    Whole days from earlier to later.

    Returns None (unavailable) if either date is missing or invalid.
    """
    later_date = parse_date(later)
    earlier_date = parse_date(earlier)
    if later_date is None or earlier_date is None:
        return None
    return round((later_date - earlier_date).total_seconds() / 86400)


@dataclass(frozen=True)
class LeadTimeComparison:
    """CD model vs alternative model warning lead times (days)."""
    cd_lead: Optional[int] = None
    alt_lead: Optional[int] = None
    alt_model_name: str = PLAYGROUND_CONFIG["alt_model_label"]

    @property
    def advantage(self) -> Optional[int]:
        """CD lead minus alt lead, when both are available."""
        if self.cd_lead is None or self.alt_lead is None:
            return None
        return self.cd_lead - self.alt_lead


def lead_time_comparison(scenario: Scenario) -> LeadTimeComparison:
    return LeadTimeComparison(
        cd_lead=days_between(scenario.event_date, scenario.cd_flag_date),
        alt_lead=days_between(scenario.event_date, scenario.alt_flag_date),
        alt_model_name=scenario.alt_model_name or PLAYGROUND_CONFIG["alt_model_label"],
    )
