from __future__ import annotations

import pytest

from ncpass_tli.wire.tables import (
    AUTHENTICATION_CODE_MAP,
    VALIDATION_CODE_MAP,
    authentication_label,
    validation_label,
)


def test_validation_labels() -> None:
    assert validation_label(0) == "Validation Successful"
    assert validation_label(4) == "Unknown Userid"
    assert validation_label(5) == "Validation Successful (with RACF PassTicket)"
    assert validation_label(50) == "Other Rejection"


def test_authentication_labels() -> None:
    assert authentication_label(0) == "Authentication Successful"
    assert authentication_label(41) == "Incorrect Token Type"
    assert authentication_label(50) == "Authentication Not Checked"


def test_unknown_codes_use_default_label() -> None:
    assert validation_label(99) == "Unknown Validation Code"
    assert authentication_label(1) == "Unknown Authentication Code"
    assert validation_label(0xFFFF) == "Unknown Validation Code"


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        VALIDATION_CODE_MAP[1] = "nope"  # type: ignore[index]
    with pytest.raises(TypeError):
        AUTHENTICATION_CODE_MAP[1] = "nope"  # type: ignore[index]


def test_table_sizes() -> None:
    assert len(VALIDATION_CODE_MAP) == 11
    assert len(AUTHENTICATION_CODE_MAP) == 8
