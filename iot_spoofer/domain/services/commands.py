"""Normalization of inbound command payloads into canonical state values."""

_STATE_ALIASES = {
    "on": "On",
    "1": "On",
    "true": "On",
    "off": "Off",
    "0": "Off",
    "false": "Off",
    "lock": "Lock",
    "locked": "Lock",
    "unlock": "Unlock",
    "unlocked": "Unlock",
}


def normalize_state_payload(payload: str) -> str:
    """
    Map common command spellings onto the states announced in discovery.

    Matching is case-insensitive and ignores surrounding whitespace;
    unrecognized payloads are returned unchanged.
    """
    return _STATE_ALIASES.get(payload.strip().lower(), payload)
