from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# ---------------------------------------------------------------------------
# Validation result codes
# ---------------------------------------------------------------------------

VALIDATION_CODE_MAP: Mapping[int, str] = MappingProxyType(
    {
        0: "Validation Successful",
        2: "Invalid Terminal ID",
        3: "Invalid Login/Logon Time",
        4: "Unknown Userid",
        5: "Validation Successful (with RACF PassTicket)",
        6: "No Slot Available",
        10: "Invalid Password",
        20: "Password Expired",
        30: "New Password Invalid",
        40: "PIN Change Required",
        50: "Other Rejection",
    }
)

UNKNOWN_VALIDATION_CODE = "Unknown Validation Code"

# ---------------------------------------------------------------------------
# Authentication result codes
# ---------------------------------------------------------------------------

AUTHENTICATION_CODE_MAP: Mapping[int, str] = MappingProxyType(
    {
        0: "Authentication Successful",
        10: "Authentication Failed",
        20: "Registration Failed",
        30: "Reregistration Failed",
        40: "PIN Change Failed (unassigned token)",
        41: "Incorrect Token Type",
        42: "PIN Change Failed",
        50: "Authentication Not Checked",
    }
)

UNKNOWN_AUTHENTICATION_CODE = "Unknown Authentication Code"


def validation_label(code: int) -> str:
    return VALIDATION_CODE_MAP.get(code, UNKNOWN_VALIDATION_CODE)


def authentication_label(code: int) -> str:
    return AUTHENTICATION_CODE_MAP.get(code, UNKNOWN_AUTHENTICATION_CODE)


__all__ = [
    "VALIDATION_CODE_MAP",
    "UNKNOWN_VALIDATION_CODE",
    "AUTHENTICATION_CODE_MAP",
    "UNKNOWN_AUTHENTICATION_CODE",
    "validation_label",
    "authentication_label",
]
