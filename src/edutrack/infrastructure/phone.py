"""Phone number normalization (E.164) and display formatting."""

import phonenumbers


def normalize_phone(raw: str | None, default_region: str | None = None) -> str | None:
    """Return the E.164 form of raw, or None if it is not a valid number.

    Numbers typed without a leading + are read in default_region (e.g. "9123 4567"
    with "SG"). Numbers that carry their own country code ignore it.
    """
    if not raw or not str(raw).strip():
        return None
    region = (default_region or "").strip().upper() or None
    try:
        parsed = phonenumbers.parse(str(raw).strip(), region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def format_phone(e164: str) -> str:
    """Render a stored E.164 number in international notation; unparseable input is returned as is."""
    try:
        parsed = phonenumbers.parse(e164, None)
    except phonenumbers.NumberParseException:
        return e164
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.INTERNATIONAL)
