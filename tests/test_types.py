from __future__ import annotations

import pytest

from ulidkit import DecodeError, InvalidLengthError, ULIDError, decode, from_bytes


class TestULIDError:
    def test_is_value_error_subclass(self) -> None:
        assert issubclass(ULIDError, ValueError)

    def test_can_catch_as_value_error(self) -> None:
        try:
            raise ULIDError("test message")
        except ValueError as e:
            assert str(e) == "test message"

    @pytest.mark.parametrize("error", [DecodeError, InvalidLengthError])
    def test_specific_errors_are_ulid_errors(self, error: type[ULIDError]) -> None:
        assert issubclass(error, ULIDError)

    def test_decode_and_length_errors_are_distinct(self) -> None:
        assert not issubclass(DecodeError, InvalidLengthError)
        assert not issubclass(InvalidLengthError, DecodeError)


class TestErrorMessageQuality:
    def test_symbol_error_shows_symbol(self) -> None:
        with pytest.raises(DecodeError, match="'!'"):
            decode("!" * 26)

    def test_length_error_shows_expected_and_actual(self) -> None:
        with pytest.raises(InvalidLengthError) as exc_info:
            decode("0" * 25)
        assert "26" in str(exc_info.value)
        assert "25" in str(exc_info.value)

    def test_bytes_length_error_shows_expected_and_actual(self) -> None:
        with pytest.raises(InvalidLengthError) as exc_info:
            from_bytes(b"\x00" * 17)
        assert "16" in str(exc_info.value)
        assert "17" in str(exc_info.value)
