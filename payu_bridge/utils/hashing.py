"""PayU request/response integrity hashing.

The gateway signs ``key|txnid|amount|productinfo|firstname|email|`` followed by
a fixed run of empty user-defined fields and the merchant salt. Field order and
placeholder count must match on both the signing and verifying side, so the
signing string is built in exactly one place: :func:`build_signing_string`.
"""

import hashlib
import hmac
from dataclasses import dataclass
from decimal import Decimal

SIGNING_DELIMITER = "|"
RESERVED_FIELD_COUNT = 14


@dataclass(frozen=True)
class SigningFields:
    key: str
    txnid: str
    amount: str
    productinfo: str
    firstname: str
    email: str

    def ordered(self) -> tuple[str, ...]:
        return (self.key, self.txnid, self.amount, self.productinfo, self.firstname, self.email)


def format_amount(value: Decimal | int | float) -> str:
    """Render a numeric amount in its canonical signing form.

    Plain decimal notation with trailing zeros dropped: ``499`` and
    ``Decimal("499.00")`` both become ``"499"``, ``499.5`` becomes ``"499.5"``.
    Both the outbound payload and any numeric verification input go through
    here; amount strings received for verification are never reformatted.
    """
    if isinstance(value, bool):
        raise TypeError("amount must be numeric, not bool")
    if isinstance(value, float):
        # repr() is the shortest round-tripping form of the float.
        value = Decimal(repr(value))
    elif isinstance(value, int):
        value = Decimal(value)
    if not value.is_finite():
        raise ValueError("amount must be finite")
    return format(value.normalize(), "f")


def build_signing_string(fields: SigningFields, salt: str) -> str:
    parts = [*fields.ordered(), *([""] * RESERVED_FIELD_COUNT), salt]
    return SIGNING_DELIMITER.join(parts)


def sign(fields: SigningFields, salt: str) -> str:
    signing_string = build_signing_string(fields, salt)
    return hashlib.sha512(signing_string.encode("utf-8")).hexdigest()


def verify(claimed_hash: str, fields: SigningFields, salt: str) -> bool:
    expected = sign(fields, salt)
    # Compare bytes so non-ASCII input is rejected instead of raising.
    return hmac.compare_digest(expected.encode("utf-8"), claimed_hash.encode("utf-8"))
