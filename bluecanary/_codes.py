from __future__ import annotations

from enum import IntEnum

__all__ = ["codes"]


class codes(IntEnum):
    """
    bluecanary status codes enumeration.

    Each member carries an integer value and a human-readable phrase. The ranges
    mirror HTTP semantics with an extra 6xxx band for smoke check failures.
    """

    _ignore_ = ["phrase"]
    phrase: str = ""

    def __new__(cls, value: int, phrase: str = "") -> codes:
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.phrase = phrase
        return obj

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def get_reason_phrase(cls, value: int) -> str:
        """
        Get the reason phrase for a given status code value.

        Example:
            >>> codes.get_reason_phrase(2000)
            'OK'
            >>> codes.get_reason_phrase(9999)
            ''
        """
        try:
            return codes(value).phrase
        except ValueError:
            return ""

    @classmethod
    def is_success(cls, value: int) -> bool:
        return 2000 <= value <= 2999

    @classmethod
    def is_client_error(cls, value: int) -> bool:
        return 4000 <= value <= 4999

    @classmethod
    def is_server_error(cls, value: int) -> bool:
        return 5000 <= value <= 5999

    @classmethod
    def is_check_failure(cls, value: int) -> bool:
        return 6000 <= value <= 6999

    @classmethod
    def is_error(cls, value: int) -> bool:
        return 4000 <= value <= 6999

    OK = 2000, "OK"

    BAD_REQUEST = 4000, "Bad Request"
    """
    Client error codes (4xxx): the caller sent something unusable.
    """

    INVALID_MANIFEST = 4001, "Invalid Manifest"

    INTERNAL_SERVER_ERROR = 5000, "Internal Server Error"
    """
    Server error codes (5xxx): the service could not do its job.
    """

    MODEL_NOT_LOADED = 5003, "Model Not Loaded"

    SMOKE_CHECK_FAILED = 6000, "Smoke Check Failed"
    """
    Check failure codes (6xxx): a deployed instance answered, but not the way
    the smoke suite expects.
    """


# Include lower-case styles for `requests` compatibility.
for code in codes:
    setattr(codes, code._name_.lower(), int(code))
