from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

RawField = StrictBool | StrictStr | StrictInt | StrictFloat | None


class PaymentVerificationIn(BaseModel):
    # Gateway callbacks carry many more fields than the six that are signed.
    model_config = ConfigDict(extra="ignore")

    key: RawField = None
    txnid: RawField = None
    amount: RawField = None
    productinfo: RawField = None
    firstname: RawField = None
    email: RawField = None
    status: RawField = None
    hash: RawField = None


class PaymentVerificationOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    is_valid: bool
    status: str | None
    transaction_id: str
    message: str
