import logging

from payu_bridge.dto.payment import PaymentData, PaymentInitializeIn, PaymentInitializeOut
from payu_bridge.utils.config import Settings
from payu_bridge.utils.enums import PlanType
from payu_bridge.utils.errors import PaymentRequestError
from payu_bridge.utils.hashing import SigningFields, format_amount, sign
from payu_bridge.utils.ids import generate_transaction_id
from payu_bridge.utils.validation import validate_payment_intent

logger = logging.getLogger(__name__)

SUCCESS_PATH = "/payment-success"
FAILURE_PATH = "/payment-failure"
SERVICE_PROVIDER = "payu_paisa"


def describe_product(plan_type: PlanType, plan_name: str) -> str:
    label = "Service" if plan_type == PlanType.SERVICE else "Startup"
    return f"{label} Plan - {plan_name}"


class PaymentService:
    def __init__(self, settings: Settings):
        self.settings = settings

    def initialize(self, payload: PaymentInitializeIn) -> PaymentInitializeOut:
        outcome = validate_payment_intent(
            amount=payload.amount,
            plan_name=payload.plan_name,
            plan_type=payload.plan_type,
            customer_name=payload.customer_name,
            customer_email=payload.customer_email,
            customer_mobile=payload.customer_mobile,
            user_id=payload.user_id,
        )
        if not outcome.ok:
            logger.info("Rejected payment initialization. reason=%s", outcome.error)
            raise PaymentRequestError(outcome.error)
        intent = outcome.intent

        txn_id = generate_transaction_id()
        product_info = describe_product(intent.plan_type, intent.plan_name)
        frontend_url = self.settings.resolved_frontend_url
        amount = format_amount(intent.amount)

        fields = SigningFields(
            key=self.settings.payu_merchant_key,
            txnid=txn_id,
            amount=amount,
            productinfo=product_info,
            firstname=intent.customer_name,
            email=intent.customer_email,
        )
        payment_hash = sign(fields, self.settings.payu_merchant_salt.get_secret_value())

        logger.info(
            "Payment initialized. txnid=%s amount=%s plan=%s user_id=%s",
            txn_id,
            amount,
            product_info,
            intent.user_id,
        )
        return PaymentInitializeOut(
            payment_data=PaymentData(
                key=fields.key,
                txnid=fields.txnid,
                amount=fields.amount,
                productinfo=fields.productinfo,
                firstname=fields.firstname,
                email=fields.email,
                phone=intent.customer_mobile,
                surl=f"{frontend_url}{SUCCESS_PATH}",
                furl=f"{frontend_url}{FAILURE_PATH}",
                hash=payment_hash,
                service_provider=SERVICE_PROVIDER,
            ),
            payu_url=self.settings.payu_base_url,
            transaction_id=txn_id,
        )
