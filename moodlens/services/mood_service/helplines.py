"""Crisis helpline directory and safety alert payloads.

Static data only. Delivering the alert (UI banner, counselor
notification) is the caller's job; this module just builds what to show.
"""
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from moodlens.shared.models import ClassificationResult

logger = logging.getLogger(__name__)


DEFAULT_COUNTRY = "US"

SAFETY_ALERT_MESSAGE = (
    "We noticed some concerning content in your entry. "
    "Please remember that help is available."
)


@dataclass(frozen=True)
class HelplineRecord:
    """Contact details for one country's crisis line."""
    country_code: str
    number: str
    text_number: str
    website: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "number": self.number,
            "textNumber": self.text_number,
            "website": self.website,
            "name": self.name,
        }


HELPLINES: Mapping[str, HelplineRecord] = MappingProxyType({
    "US": HelplineRecord(
        country_code="US",
        number="988",
        text_number="Text HOME to 741741",
        website="https://suicidepreventionlifeline.org",
        name="National Suicide Prevention Lifeline",
    ),
    "UK": HelplineRecord(
        country_code="UK",
        number="116 123",
        text_number="Text SHOUT to 85258",
        website="https://www.samaritans.org",
        name="Samaritans",
    ),
    "CA": HelplineRecord(
        country_code="CA",
        number="1-833-456-4566",
        text_number="Text 45645",
        website="https://suicideprevention.ca",
        name="Crisis Services Canada",
    ),
    "AU": HelplineRecord(
        country_code="AU",
        number="13 11 14",
        text_number="Text 0477 13 11 14",
        website="https://www.lifeline.org.au",
        name="Lifeline Australia",
    ),
    "IN": HelplineRecord(
        country_code="IN",
        number="91-22-27546669",
        text_number="Text 9152987821",
        website="https://www.aasra.info",
        name="AASRA",
    ),
})


def get_helpline_info(country_code: Optional[str] = DEFAULT_COUNTRY) -> HelplineRecord:
    """Look up the helpline for a country.

    Args:
        country_code: Two-letter code, case-insensitive (US, UK, CA, AU, IN)

    Returns:
        HelplineRecord; unknown or missing codes fall back to US
    """
    code = country_code.strip().upper() if isinstance(country_code, str) else ""
    record = HELPLINES.get(code)
    if record is None:
        logger.info(
            "HELPLINE_COUNTRY_FALLBACK",
            extra={"requested": code or None, "fallback": DEFAULT_COUNTRY},
        )
        return HELPLINES[DEFAULT_COUNTRY]
    return record


def build_safety_alert(
    result: ClassificationResult,
    country_code: Optional[str] = DEFAULT_COUNTRY,
) -> Optional[Dict[str, Any]]:
    """Build the safety alert a caller shows after a crisis classification.

    Args:
        result: Classification to check
        country_code: Country for the helpline lookup

    Returns:
        Alert payload, or None when no self-harm content was detected
    """
    if not result.self_harm_detected:
        return None
    return {
        "hasSelfHarmContent": True,
        "message": SAFETY_ALERT_MESSAGE,
        "helpline": get_helpline_info(country_code).to_dict(),
    }
