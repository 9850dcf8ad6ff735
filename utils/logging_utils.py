from typing import Dict, Iterable


def mask_email(value: str) -> str:
    if not isinstance(value, str) or "@" not in value:
        return "***"
    name, _, domain = value.partition("@")
    return (name[:2] + "***@" + domain) if name else "***@" + domain


def sanitize_payload(payload: Dict, allowed_keys: Iterable[str]) -> Dict:
    """Return a copy of payload holding only allowed keys, with emails masked."""
    result = {}
    for key in allowed_keys:
        if key in payload:
            result[key] = mask_email(payload[key])
    return result
