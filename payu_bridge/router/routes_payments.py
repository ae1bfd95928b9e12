import logging

from fastapi import APIRouter, Depends, Request, status

from payu_bridge.dto.payment import PaymentInitializeIn, PaymentInitializeOut
from payu_bridge.dto.verification import PaymentVerificationIn, PaymentVerificationOut
from payu_bridge.services.payment_service import PaymentService
from payu_bridge.services.verification_service import VerificationService
from payu_bridge.utils.config import Settings, get_settings
from payu_bridge.utils.enums import ErrorKind
from payu_bridge.utils.errors import InternalServiceError, PaymentAPIError, PaymentRequestError

router = APIRouter(prefix="/api/payment", tags=["payments"])
logger = logging.getLogger(__name__)

FORM_MEDIA_TYPES = frozenset({"application/x-www-form-urlencoded", "multipart/form-data"})


def get_payment_service(settings: Settings = Depends(get_settings)) -> PaymentService:
    return PaymentService(settings)


def get_verification_service(settings: Settings = Depends(get_settings)) -> VerificationService:
    return VerificationService(settings)


def _internal_error(settings: Settings, message: str, exc: Exception) -> InternalServiceError:
    return InternalServiceError(message, detail=None if settings.is_production else str(exc))


async def read_notification(request: Request) -> dict:
    media_type = request.headers.get("content-type", "").split(";", 1)[0].strip().lower()
    if media_type in FORM_MEDIA_TYPES:
        form = await request.form()
        return {name: value for name, value in form.items() if isinstance(value, str)}
    body = await request.body()
    if not body.strip():
        return {}
    return await request.json()


@router.post("/initialize", response_model=PaymentInitializeOut, status_code=status.HTTP_200_OK)
def initialize_payment(
    payload: PaymentInitializeIn,
    settings: Settings = Depends(get_settings),
    service: PaymentService = Depends(get_payment_service),
) -> PaymentInitializeOut:
    try:
        return service.initialize(payload)
    except PaymentAPIError:
        raise
    except Exception as exc:
        logger.exception("Payment initialization error")
        raise _internal_error(settings, "Internal server error during payment initialization", exc) from exc


@router.post("/verify", response_model=PaymentVerificationOut, status_code=status.HTTP_200_OK)
def verify_payment(
    payload: PaymentVerificationIn,
    settings: Settings = Depends(get_settings),
    service: VerificationService = Depends(get_verification_service),
) -> PaymentVerificationOut:
    try:
        return service.verify(payload)
    except PaymentAPIError:
        raise
    except Exception as exc:
        logger.exception("Payment verification error")
        raise _internal_error(settings, "Internal server error during verification", exc) from exc


@router.post("/webhook", response_model=PaymentVerificationOut, status_code=status.HTTP_200_OK)
async def receive_payment_webhook(
    request: Request,
    settings: Settings = Depends(get_settings),
    service: VerificationService = Depends(get_verification_service),
) -> PaymentVerificationOut:
    try:
        # PayU posts form-encoded notifications; JSON is accepted for replays.
        data = await read_notification(request)
        payload = PaymentVerificationIn.model_validate(data)
    except ValueError as exc:
        logger.warning("Unreadable webhook body: %s", exc)
        raise PaymentRequestError(ErrorKind.INVALID_REQUEST_BODY) from exc

    logger.info("PayU webhook received. txnid=%s status=%s", payload.txnid, payload.status)
    try:
        return service.handle_webhook(payload)
    except PaymentAPIError:
        raise
    except Exception as exc:
        logger.exception("Webhook processing error")
        raise _internal_error(settings, "Webhook processing failed", exc) from exc
