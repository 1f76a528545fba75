"""
Closed Enumerations for the Prospecting Domain.

Every enum is ``str``-valued so the member value *is* the wire string
exchanged with the acquisition service and the dashboard. Parsing
from wire strings goes through ``parse`` which normalizes case and
surrounding whitespace and rejects anything outside the closed set.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

# Selector value meaning "do not constrain this field"
ALL = "all"


class _WireEnum(str, Enum):
    """Base for enums exchanged as lowercase wire strings."""

    @classmethod
    def parse(cls, value: Any) -> "_WireEnum":
        """
        Map a wire value onto a member.

        Raises:
            ValueError: If the value is not one of the known wire strings
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        try:
            return cls(text)
        except ValueError:
            allowed = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unknown {cls.__name__} '{value}'. Allowed: {allowed}"
            ) from None

    @property
    def label(self) -> str:
        """Human readable label for dashboards and badges."""
        return _LABELS.get(self, self.value.replace("_", " ").title())


class ContactType(_WireEnum):
    """Reachability channel discovered for a site."""

    EMAIL = "email"
    FORM = "form"
    NONE = "none"


class OutreachStatus(_WireEnum):
    """Lifecycle stage of a guest-post outreach (declaration order = lifecycle)."""

    NOT_CONTACTED = "not_contacted"
    CONTACTED = "contacted"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class GuestPostFilter(_WireEnum):
    """Tri-state selector for the accepts-guest-posts flag."""

    ALL = "all"
    YES = "yes"
    NO = "no"


class SortDirection(_WireEnum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class SortKey(_WireEnum):
    """Record fields the display list can be ordered by."""

    DOMAIN = "domain"
    URL = "url"
    DOMAIN_AUTHORITY = "domain_authority"
    ORGANIC_TRAFFIC = "organic_traffic"
    CONTACT_TYPE = "contact_type"
    CONTACT_EMAIL = "contact_email"
    CONTACT_FORM_URL = "contact_form_url"
    ACCEPTS_GUEST_POSTS = "accepts_guest_posts"
    OUTREACH_STATUS = "outreach_status"


_LABELS: Dict[Enum, str] = {
    ContactType.EMAIL: "Email",
    ContactType.FORM: "Form",
    ContactType.NONE: "None",
    OutreachStatus.NOT_CONTACTED: "Not Contacted",
    OutreachStatus.CONTACTED: "Contacted",
    OutreachStatus.PENDING: "Pending",
    OutreachStatus.APPROVED: "Approved",
    OutreachStatus.REJECTED: "Rejected",
    SortKey.DOMAIN_AUTHORITY: "DA",
    SortKey.ORGANIC_TRAFFIC: "Traffic",
}
