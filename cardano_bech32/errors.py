"""
cardano_bech32.errors
---------------------

A small, consistent error system for the codec.

Design goals
------------
- One root `CardanoBech32Error` with a machine-friendly `code` and optional `data`.
- One concrete class per failure so callers can catch exactly what they expect.
- Two families: `Bech32Error` (generic text codec) and `CardanoAddressError`
  (CIP-0019 addresses and CIP-0014 fingerprints).
- Safe JSON representation (`to_dict`) suitable for logs and the CLI.

Every failure is terminal: operations are pure, so nothing here is retryable.
All errors derive from `ValueError`, which keeps `except ValueError` callers working.

This module uses only stdlib to avoid import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping

# ---------------------------------------------------------------------------
# Error codes
# ---------------------------------------------------------------------------


class ErrorCode(str, Enum):
    # Bech32 string structure
    TOO_SHORT = "BECH32/TOO_SHORT"
    OUT_OF_RANGE_CHARACTER = "BECH32/OUT_OF_RANGE_CHARACTER"
    MIXED_CASE = "BECH32/MIXED_CASE"
    MISSING_SEPARATOR = "BECH32/MISSING_SEPARATOR"
    EMPTY_HRP = "BECH32/EMPTY_HRP"
    HRP_TOO_LONG = "BECH32/HRP_TOO_LONG"
    INVALID_HRP_CHARACTERS = "BECH32/INVALID_HRP_CHARACTERS"
    CHECKSUM_TOO_SHORT = "BECH32/CHECKSUM_TOO_SHORT"
    INVALID_CHARACTER = "BECH32/INVALID_CHARACTER"
    INVALID_CHECKSUM = "BECH32/INVALID_CHECKSUM"

    # Bit regrouping / hex
    INVALID_VALUE = "BITS/INVALID_VALUE"
    INVALID_PADDING = "BITS/INVALID_PADDING"
    INVALID_HEX = "BITS/INVALID_HEX"

    # Cardano addresses (CIP-0019)
    NOT_CARDANO_ADDRESS = "CARDANO/NOT_CARDANO_ADDRESS"
    NOT_STAKE_ADDRESS = "CARDANO/NOT_STAKE_ADDRESS"
    HRP_NETWORK_MISMATCH = "CARDANO/HRP_NETWORK_MISMATCH"
    UNKNOWN_ADDRESS_TYPE = "CARDANO/UNKNOWN_ADDRESS_TYPE"
    UNKNOWN_NETWORK_ID = "CARDANO/UNKNOWN_NETWORK_ID"
    MISSING_STAKE_HASH = "CARDANO/MISSING_STAKE_HASH"
    INVALID_HASH_LENGTH = "CARDANO/INVALID_HASH_LENGTH"

    # Native assets (CIP-0014)
    NOT_ASSET_FINGERPRINT = "ASSET/NOT_ASSET_FINGERPRINT"
    INVALID_FINGERPRINT_LENGTH = "ASSET/INVALID_FINGERPRINT_LENGTH"
    INVALID_POLICY_ID = "ASSET/INVALID_POLICY_ID"
    INVALID_ASSET_NAME = "ASSET/INVALID_ASSET_NAME"

    # Runtime
    CONFIG = "RUNTIME/CONFIG"


@dataclass(eq=False)
class CardanoBech32Error(ValueError):
    """
    Root error for the package.

    Attributes
    ----------
    code: str
        Machine-stable error code (see ErrorCode).
    message: str
        Human hint suitable for logs.
    data: dict
        Optional machine data (positions, lengths, offending values).
    """

    code: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Make Exception(args) meaningful for interop
        super().__init__(f"{self.code}: {self.message}")

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe shape suitable for logs and CLI output."""
        return {
            "code": self.code_str,
            "message": self.message,
            "data": _jsonmap(self.data),
        }

    def __str__(self) -> str:  # pragma: no cover - human formatting
        return self.message

    @property
    def code_str(self) -> str:
        return self.code.value if isinstance(self.code, ErrorCode) else str(self.code)


class Bech32Error(CardanoBech32Error):
    """Raised by the generic Bech32 engine and bit converter."""


class CardanoAddressError(CardanoBech32Error):
    """Raised by the Cardano address and native-asset layer."""


# ---------------------------------------------------------------------------
# Generic Bech32 engine
# ---------------------------------------------------------------------------


class TooShort(Bech32Error):
    def __init__(self, message="Bech32 string is too short", **data: Any) -> None:
        super().__init__(code=ErrorCode.TOO_SHORT, message=message, data=_jsonmap(data))


class OutOfRangeCharacter(Bech32Error):
    def __init__(
        self, message="Out of range character in Bech32 string", **data: Any
    ) -> None:
        super().__init__(
            code=ErrorCode.OUT_OF_RANGE_CHARACTER, message=message, data=_jsonmap(data)
        )


class MixedCase(Bech32Error):
    def __init__(
        self, message="Data contains mixed case characters", **data: Any
    ) -> None:
        super().__init__(code=ErrorCode.MIXED_CASE, message=message, data=_jsonmap(data))


class MissingSeparator(Bech32Error):
    def __init__(self, message="Missing separator character", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.MISSING_SEPARATOR, message=message, data=_jsonmap(data)
        )


class InvalidHrp(Bech32Error):
    """Common base for the three ways a human-readable part can be rejected."""


class EmptyHrp(InvalidHrp):
    def __init__(self, message="HRP too short", **data: Any) -> None:
        super().__init__(code=ErrorCode.EMPTY_HRP, message=message, data=_jsonmap(data))


class HrpTooLong(InvalidHrp):
    def __init__(self, message="HRP too long", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.HRP_TOO_LONG, message=message, data=_jsonmap(data)
        )


class InvalidHrpCharacters(InvalidHrp):
    def __init__(self, message="Invalid characters in HRP", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_HRP_CHARACTERS, message=message, data=_jsonmap(data)
        )


class ChecksumTooShort(Bech32Error):
    def __init__(self, message="Too short checksum", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.CHECKSUM_TOO_SHORT, message=message, data=_jsonmap(data)
        )


class InvalidCharacter(Bech32Error):
    def __init__(
        self, message="Invalid characters in Bech32 data", **data: Any
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CHARACTER, message=message, data=_jsonmap(data)
        )


class InvalidChecksum(Bech32Error):
    def __init__(self, message="Invalid Bech32 checksum", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CHECKSUM, message=message, data=_jsonmap(data)
        )


class InvalidValueForBitConversion(Bech32Error):
    def __init__(self, message="Invalid value for convert bits", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_VALUE, message=message, data=_jsonmap(data)
        )


class InvalidPadding(Bech32Error):
    def __init__(self, message="Invalid padding in converted data", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PADDING, message=message, data=_jsonmap(data)
        )


class InvalidHex(Bech32Error):
    def __init__(self, message="Invalid hex string", **data: Any) -> None:
        super().__init__(code=ErrorCode.INVALID_HEX, message=message, data=_jsonmap(data))


# ---------------------------------------------------------------------------
# Cardano addresses & native assets
# ---------------------------------------------------------------------------


class NotCardanoAddress(CardanoAddressError):
    def __init__(self, message="Not a Cardano Shelley address", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.NOT_CARDANO_ADDRESS, message=message, data=_jsonmap(data)
        )


class NotStakeAddress(CardanoAddressError):
    def __init__(self, message="Not a Cardano stake address", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.NOT_STAKE_ADDRESS, message=message, data=_jsonmap(data)
        )


class HrpNetworkMismatch(CardanoAddressError):
    def __init__(self, message="HRP does not match network ID", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.HRP_NETWORK_MISMATCH, message=message, data=_jsonmap(data)
        )


class UnknownAddressType(CardanoAddressError):
    def __init__(self, message="Unknown address type", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_ADDRESS_TYPE, message=message, data=_jsonmap(data)
        )


class UnknownNetworkId(CardanoAddressError):
    def __init__(self, message="Unknown network id", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_NETWORK_ID, message=message, data=_jsonmap(data)
        )


class MissingStakeHash(CardanoAddressError):
    def __init__(
        self,
        message="Specified a staking address type without a stake hash",
        **data: Any,
    ) -> None:
        super().__init__(
            code=ErrorCode.MISSING_STAKE_HASH, message=message, data=_jsonmap(data)
        )


class InvalidHashLength(CardanoAddressError):
    def __init__(self, message="Credential hash must be 28 bytes", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_HASH_LENGTH, message=message, data=_jsonmap(data)
        )


class NotAssetFingerprint(CardanoAddressError):
    def __init__(self, message="Not a native asset fingerprint", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.NOT_ASSET_FINGERPRINT, message=message, data=_jsonmap(data)
        )


class InvalidFingerprintLength(CardanoAddressError):
    def __init__(
        self, message="Asset fingerprint must carry a 20-byte digest", **data: Any
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_FINGERPRINT_LENGTH,
            message=message,
            data=_jsonmap(data),
        )


class InvalidPolicyId(CardanoAddressError):
    def __init__(self, message="Policy id must be 28 bytes", **data: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_POLICY_ID, message=message, data=_jsonmap(data)
        )


class InvalidAssetName(CardanoAddressError):
    def __init__(
        self, message="Asset name must be at most 32 bytes", **data: Any
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ASSET_NAME, message=message, data=_jsonmap(data)
        )


# ---------------------------------------------------------------------------
# Runtime
# ---------------------------------------------------------------------------


class ConfigError(CardanoBech32Error):
    def __init__(self, message="invalid configuration", **data: Any) -> None:
        super().__init__(code=ErrorCode.CONFIG, message=message, data=_jsonmap(data))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _jsonmap(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: _coerce_json(v) for k, v in data.items()}


def _coerce_json(v: Any) -> Any:
    # Keep JSON primitives; stringify the rest; hex-encode bytes.
    if v is None or isinstance(v, (bool, int, float, str, list, dict)):
        return v
    if isinstance(v, (bytes, bytearray)):
        return v.hex()
    return str(v)


__all__ = [
    "ErrorCode",
    "CardanoBech32Error",
    "Bech32Error",
    "CardanoAddressError",
    "TooShort",
    "OutOfRangeCharacter",
    "MixedCase",
    "MissingSeparator",
    "InvalidHrp",
    "EmptyHrp",
    "HrpTooLong",
    "InvalidHrpCharacters",
    "ChecksumTooShort",
    "InvalidCharacter",
    "InvalidChecksum",
    "InvalidValueForBitConversion",
    "InvalidPadding",
    "InvalidHex",
    "NotCardanoAddress",
    "NotStakeAddress",
    "HrpNetworkMismatch",
    "UnknownAddressType",
    "UnknownNetworkId",
    "MissingStakeHash",
    "InvalidHashLength",
    "NotAssetFingerprint",
    "InvalidFingerprintLength",
    "InvalidPolicyId",
    "InvalidAssetName",
    "ConfigError",
]
