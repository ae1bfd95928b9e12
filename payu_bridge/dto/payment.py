from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

# Raw client input is validated by the payment policy, not by pydantic.
RawField = StrictBool | StrictStr | StrictInt | StrictFloat | None


class PaymentInitializeIn(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    amount: RawField = None
    plan_name: RawField = None
    plan_type: RawField = None
    customer_name: RawField = None
    customer_email: RawField = None
    customer_mobile: RawField = None
    user_id: RawField = None


class PaymentData(BaseModel):
    key: str
    txnid: str
    amount: str
    productinfo: str
    firstname: str
    email: str
    phone: str
    surl: str
    furl: str
    hash: str
    service_provider: str = "payu_paisa"


class PaymentInitializeOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    payment_data: PaymentData
    payu_url: str
    transaction_id: str
    message: str = "Payment initialized successfully"
