import logging

from payu_bridge.dto.verification import PaymentVerificationIn, PaymentVerificationOut
from payu_bridge.utils.config import Settings
from payu_bridge.utils.enums import ErrorKind
from payu_bridge.utils.errors import PaymentRequestError
from payu_bridge.utils.hashing import SigningFields, format_amount, verify

logger = logging.getLogger(__name__)

VERIFIED_MESSAGE = "Payment verified successfully"
REJECTED_MESSAGE = "Payment verification failed"
WEBHOOK_MESSAGE = "Webhook processed successfully"


def _signing_text(value: bool | str | int | float | None) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    # Numbers arriving in JSON render the way the client serialized them.
    return format_amount(value)


class VerificationService:
    def __init__(self, settings: Settings):
        self.settings = settings

    def verify(self, payload: PaymentVerificationIn) -> PaymentVerificationOut:
        required = (payload.key, payload.txnid, payload.amount, payload.hash)
        if any(value is None or value == "" for value in required):
            raise PaymentRequestError(ErrorKind.MISSING_VERIFICATION_FIELDS)

        fields = SigningFields(
            key=_signing_text(payload.key),
            txnid=_signing_text(payload.txnid),
            amount=_signing_text(payload.amount),
            productinfo=_signing_text(payload.productinfo),
            firstname=_signing_text(payload.firstname),
            email=_signing_text(payload.email),
        )
        is_valid = verify(
            _signing_text(payload.hash),
            fields,
            self.settings.payu_merchant_salt.get_secret_value(),
        )
        status = None if payload.status is None else _signing_text(payload.status)

        log = logger.info if is_valid else logger.warning
        log(
            "Payment verification. txnid=%s status=%s is_valid=%s amount=%s",
            fields.txnid,
            status,
            is_valid,
            fields.amount,
        )
        return PaymentVerificationOut(
            is_valid=is_valid,
            status=status,
            transaction_id=fields.txnid,
            message=VERIFIED_MESSAGE if is_valid else REJECTED_MESSAGE,
        )

    def handle_webhook(self, payload: PaymentVerificationIn) -> PaymentVerificationOut:
        # Notifications are only re-verified; nothing is recorded.
        result = self.verify(payload)
        return result.model_copy(update={"message": WEBHOOK_MESSAGE})
