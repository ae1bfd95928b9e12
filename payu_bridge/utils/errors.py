from payu_bridge.utils.enums import ErrorKind

ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.MISSING_FIELDS: "Missing required fields",
    ErrorKind.INVALID_AMOUNT: "Invalid amount",
    ErrorKind.INVALID_EMAIL: "Invalid email format",
    ErrorKind.INVALID_MOBILE: "Invalid mobile number format",
    ErrorKind.MISSING_VERIFICATION_FIELDS: "Missing required verification fields",
    ErrorKind.INVALID_REQUEST_BODY: "Invalid request body",
    ErrorKind.INTERNAL_ERROR: "Internal server error",
}


class PaymentAPIError(Exception):
    status_code: int = 500

    def __init__(self, kind: ErrorKind, message: str | None = None, detail: str | None = None):
        self.kind = kind
        self.message = message or ERROR_MESSAGES[kind]
        # Only populated for non-production deployments.
        self.detail = detail
        super().__init__(self.message)


class PaymentRequestError(PaymentAPIError):
    status_code = 400


class InternalServiceError(PaymentAPIError):
    status_code = 500

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(ErrorKind.INTERNAL_ERROR, message=message, detail=detail)
