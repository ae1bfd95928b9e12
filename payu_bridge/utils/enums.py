from enum import StrEnum


class PlanType(StrEnum):
    SERVICE = "service"
    STARTUP = "startup"


class ErrorKind(StrEnum):
    MISSING_FIELDS = "MissingFields"
    INVALID_AMOUNT = "InvalidAmount"
    INVALID_EMAIL = "InvalidEmail"
    INVALID_MOBILE = "InvalidMobile"
    MISSING_VERIFICATION_FIELDS = "MissingVerificationFields"
    INVALID_REQUEST_BODY = "InvalidRequestBody"
    INTERNAL_ERROR = "InternalError"
