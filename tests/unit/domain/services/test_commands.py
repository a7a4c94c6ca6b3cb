from __future__ import annotations

import pytest

from iot_spoofer.domain.services.commands import normalize_state_payload


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        ("ON", "On"),
        ("1", "On"),
        ("true", "On"),
        (" on ", "On"),
        ("OFF", "Off"),
        ("0", "Off"),
        ("False", "Off"),
        ("locked", "Lock"),
        ("LOCK", "Lock"),
        ("unlocked", "Unlock"),
        ("Unlock", "Unlock"),
    ],
)
def test_known_payloads_are_normalized(payload, expected) -> None:
    assert normalize_state_payload(payload) == expected


@pytest.mark.parametrize("payload", ["42", "", "open", " 21.5 "])
def test_unknown_payloads_pass_through(payload) -> None:
    assert normalize_state_payload(payload) == payload
