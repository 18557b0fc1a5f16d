from bluecanary._codes import codes


class BlueCanaryException(Exception):
    _code: codes = None

    def __init__(self, message, code: codes = None):
        super().__init__(message)
        self._code = code

    @property
    def code(self):
        return self._code


class BadRequestError(BlueCanaryException):
    def __init__(self, message, code: codes = codes.BAD_REQUEST):
        super().__init__(message, code)


class InvalidManifestError(BadRequestError):
    def __init__(self, message, code: codes = codes.INVALID_MANIFEST):
        super().__init__(message, code)


class InternalServerError(BlueCanaryException):
    def __init__(self, message, code: codes = codes.INTERNAL_SERVER_ERROR):
        super().__init__(message, code)


class ModelNotLoadedError(InternalServerError):
    def __init__(self, message="sentiment model is not loaded", code: codes = codes.MODEL_NOT_LOADED):
        super().__init__(message, code)


class SmokeCheckError(BlueCanaryException):
    def __init__(self, message, code: codes = codes.SMOKE_CHECK_FAILED):
        super().__init__(message, code)


def raise_for_code(code: codes, message: str):
    if code is None or codes.is_success(code):
        return

    if code == codes.INVALID_MANIFEST:
        raise InvalidManifestError(message)
    if codes.is_client_error(code):
        raise BadRequestError(message)
    if code == codes.MODEL_NOT_LOADED:
        raise ModelNotLoadedError(message)
    if codes.is_server_error(code):
        raise InternalServerError(message)
    if codes.is_check_failure(code):
        raise SmokeCheckError(message)

    raise BlueCanaryException(message, code=code)
