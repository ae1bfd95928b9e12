import re
from dataclasses import dataclass
from decimal import Decimal, DecimalException

from payu_bridge.utils.enums import ErrorKind, PlanType

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
MOBILE_PATTERN = re.compile(r"\+?[1-9][0-9]{1,14}")
WHITESPACE_PATTERN = re.compile(r"\s+")

RawValue = bool | str | int | float | None


@dataclass(frozen=True)
class PaymentIntent:
    amount: Decimal
    plan_name: str
    plan_type: PlanType
    customer_name: str
    customer_email: str
    customer_mobile: str
    user_id: str | None = None


@dataclass(frozen=True)
class ValidationOutcome:
    intent: PaymentIntent | None = None
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _is_missing(value: RawValue) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def _as_text(value: RawValue) -> str:
    return value if isinstance(value, str) else str(value)


def parse_amount(value: RawValue) -> Decimal | None:
    """Return the amount as a positive finite Decimal, or None if it is not one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, float):
            amount = Decimal(repr(value))
        elif isinstance(value, int):
            amount = Decimal(value)
        else:
            amount = Decimal(value.strip())
        if not amount.is_finite():
            return None
        # Context rounding can overflow huge amounts and flush tiny ones to zero.
        amount = amount.normalize()
    except (DecimalException, ValueError):
        return None
    if amount <= 0:
        return None
    return amount


def resolve_plan_type(value: RawValue) -> PlanType:
    # Anything that is not explicitly "service" is billed as a startup plan.
    if value == PlanType.SERVICE.value:
        return PlanType.SERVICE
    return PlanType.STARTUP


def validate_payment_intent(
    *,
    amount: RawValue,
    plan_name: RawValue,
    customer_name: RawValue,
    customer_email: RawValue,
    customer_mobile: RawValue,
    plan_type: RawValue = None,
    user_id: RawValue = None,
) -> ValidationOutcome:
    required = (amount, plan_name, customer_name, customer_email, customer_mobile)
    if any(_is_missing(value) for value in required):
        return ValidationOutcome(error=ErrorKind.MISSING_FIELDS)

    parsed_amount = parse_amount(amount)
    if parsed_amount is None:
        return ValidationOutcome(error=ErrorKind.INVALID_AMOUNT)

    email = _as_text(customer_email)
    if EMAIL_PATTERN.fullmatch(email) is None:
        return ValidationOutcome(error=ErrorKind.INVALID_EMAIL)

    mobile = _as_text(customer_mobile)
    if MOBILE_PATTERN.fullmatch(WHITESPACE_PATTERN.sub("", mobile)) is None:
        return ValidationOutcome(error=ErrorKind.INVALID_MOBILE)

    return ValidationOutcome(
        intent=PaymentIntent(
            amount=parsed_amount,
            plan_name=_as_text(plan_name),
            plan_type=resolve_plan_type(plan_type),
            customer_name=_as_text(customer_name),
            customer_email=email,
            customer_mobile=mobile,
            user_id=None if _is_missing(user_id) else _as_text(user_id),
        )
    )
