from typing import Optional


class MoneroRequestError(Exception):
    code: int
    detail: str

    def __init__(self, detail, code=0):
        super().__init__(detail)
        self.code = code
        self.detail = detail


class InvalidFieldError(MoneroRequestError):
    detail = "invalid field"
    code = 10000

    def __init__(self, field: str, detail: Optional[str] = None):
        self.field = field
        super().__init__(detail or f"{self.detail}: {field}", code=self.code)


class MalformedInputError(MoneroRequestError):
    detail = "invalid input format"
    code = 20000

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.detail, code=self.code)


class UnsupportedVersionError(MoneroRequestError):
    detail = "unsupported version"
    code = 20001

    def __init__(self, version: Optional[str] = None):
        self.version = version
        if version is not None:
            self.detail = f"{self.detail}: {version!r}"
        super().__init__(self.detail, code=self.code)


class DecodeFailureError(MoneroRequestError):
    detail = "failed to decode and decompress the payload"
    code = 20002

    def __init__(self, detail: Optional[str] = None, code: Optional[int] = None):
        super().__init__(detail or self.detail, code=code or self.code)


class CanonicalFormatError(DecodeFailureError):
    detail = "payload is not a flat object"
    code = 20003

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail or self.detail, code=self.code)


class CoercionError(DecodeFailureError):
    detail = "field is not an integer"
    code = 20004

    def __init__(self, field: str, value=None):
        self.field = field
        super().__init__(f"{field} is not an integer: {value!r}", code=self.code)
