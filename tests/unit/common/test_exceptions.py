import pytest

from bluecanary import (
    BadRequestError,
    BlueCanaryException,
    InternalServerError,
    InvalidManifestError,
    ModelNotLoadedError,
    SmokeCheckError,
    codes,
    raise_for_code,
)


class TestBlueCanaryException:
    def test_basic_creation(self):
        exception = BlueCanaryException("Test error message")

        assert str(exception) == "Test error message"
        assert exception.code is None
        assert isinstance(exception, Exception)

    def test_with_code(self):
        exception = BlueCanaryException("Test error with code", codes.BAD_REQUEST)

        assert exception.code == 4000
        assert exception.code.phrase == "Bad Request"

    def test_subclass_default_codes(self):
        assert BadRequestError("x").code == codes.BAD_REQUEST
        assert InvalidManifestError("x").code == codes.INVALID_MANIFEST
        assert InternalServerError("x").code == codes.INTERNAL_SERVER_ERROR
        assert ModelNotLoadedError().code == codes.MODEL_NOT_LOADED
        assert SmokeCheckError("x").code == codes.SMOKE_CHECK_FAILED

    def test_hierarchy(self):
        assert issubclass(InvalidManifestError, BadRequestError)
        assert issubclass(ModelNotLoadedError, InternalServerError)
        assert issubclass(SmokeCheckError, BlueCanaryException)


class TestRaiseForCode:
    def test_success_and_none_do_not_raise(self):
        raise_for_code(None, "ignored")
        raise_for_code(codes.OK, "ignored")

    @pytest.mark.parametrize(
        "code, exc_type",
        [
            (codes.BAD_REQUEST, BadRequestError),
            (codes.INVALID_MANIFEST, InvalidManifestError),
            (codes.INTERNAL_SERVER_ERROR, InternalServerError),
            (codes.MODEL_NOT_LOADED, ModelNotLoadedError),
            (codes.SMOKE_CHECK_FAILED, SmokeCheckError),
        ],
    )
    def test_maps_code_to_exception(self, code, exc_type):
        with pytest.raises(exc_type, match="boom"):
            raise_for_code(code, "boom")

    def test_unknown_range_raises_base_exception(self):
        with pytest.raises(BlueCanaryException) as exc_info:
            raise_for_code(3000, "redirect")
        assert exc_info.value.code == 3000
