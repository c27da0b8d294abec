"""typedprompt.validators.network

Validators for network-ish identifiers: `email`, `url`, `uuid` and `ip`.

Only syntax is checked. No DNS lookups or deliverability checks are
made for emails or URLs."""

import re

from email_validator import validate_email as _validate_email, EmailNotValidError

from ..errors import ValidationError

__all__ = (
    "normalize_email",
    "validate_email",
    "validate_url",
    "validate_uuid",
    "validate_ip",
)


URL_PATTERN = re.compile(
    r"^(https?://)?([\w\-]+\.)+[\w\-]+(/[\w\-]*)*$", re.ASCII
)
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
_OCTET = r"(25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
IP_PATTERN = re.compile(rf"^{_OCTET}\.{_OCTET}\.{_OCTET}\.{_OCTET}$")


# ------------------------------------------------------------------------------
# Email normalization
#
# providers whose mailboxes ignore a sub-address after the separator
_GMAIL_DOMAINS = frozenset({"gmail.com", "googlemail.com"})
_PLUS_SUBADDRESS_DOMAINS = frozenset(
    {
        "icloud.com",
        "me.com",
        "mac.com",
        "hotmail.com",
        "live.com",
        "outlook.com",
        "msn.com",
        "hotmail.co.uk",
        "live.co.uk",
        "outlook.co.uk",
    }
)
_DASH_SUBADDRESS_DOMAINS = frozenset(
    {"yahoo.com", "yahoo.co.uk", "ymail.com", "rocketmail.com"}
)
# ------------------------------------------------------------------------------


def normalize_email(raw: str) -> str:
    """
    Normalizes an email address so that equivalent mailboxes compare equal.

    The whole address is lowercased. For Gmail, dots and any `+tag` are
    removed from the local part and `googlemail.com` becomes `gmail.com`.
    Providers known to ignore sub-addresses have their `+tag` (or `-tag`
    for Yahoo) removed.

    Strings without an `@` are returned lowercased and left for validation
    to reject.
    """
    value = raw.strip().lower()
    local, at, domain = value.rpartition("@")
    if not at:
        return value

    if domain in _GMAIL_DOMAINS:
        local = local.split("+", 1)[0].replace(".", "")
        domain = "gmail.com"
    elif domain in _PLUS_SUBADDRESS_DOMAINS:
        local = local.split("+", 1)[0]
    elif domain in _DASH_SUBADDRESS_DOMAINS:
        local = local.split("-", 1)[0]

    return f"{local}@{domain}"


def validate_email(raw: str) -> str:
    value = normalize_email(raw)
    try:
        result = _validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValidationError(
            "Invalid email. Please enter a valid email address."
        ) from e
    return result.normalized


def validate_url(raw: str) -> str:
    value = raw.strip()
    if not URL_PATTERN.match(value):
        raise ValidationError("Invalid URL. Please enter a valid URL.")
    return value


def validate_uuid(raw: str) -> str:
    value = raw.strip()
    if not UUID_PATTERN.match(value):
        raise ValidationError("Invalid UUID. Please enter a valid UUID.")
    return value


def validate_ip(raw: str) -> str:
    value = raw.strip()
    if not IP_PATTERN.match(value):
        raise ValidationError(
            "Invalid IP address. Please enter a valid IP address."
        )
    return value
