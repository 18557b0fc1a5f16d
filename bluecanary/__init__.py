from ._codes import codes
from .common.exceptions import (
    BadRequestError,
    BlueCanaryException,
    InternalServerError,
    InvalidManifestError,
    ModelNotLoadedError,
    SmokeCheckError,
    raise_for_code,
)

__version__ = "0.1.0"

__all__ = [
    "codes",
    "BlueCanaryException",
    "BadRequestError",
    "InvalidManifestError",
    "InternalServerError",
    "ModelNotLoadedError",
    "SmokeCheckError",
    "raise_for_code",
]
