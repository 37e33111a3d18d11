import pytest

from txlookup.encoding import hex_to_int, number_to_hex


class TestNumberToHex:
    def test_zero(self):
        assert number_to_hex(0) == "0x0"

    def test_small(self):
        assert number_to_hex(255) == "0xff"
        assert number_to_hex(256) == "0x100"

    def test_large_value_is_exact(self):
        assert number_to_hex(2**256 - 1) == "0x" + "f" * 64

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            number_to_hex(-1)

    def test_non_integer_rejected(self):
        with pytest.raises(ValueError):
            number_to_hex(1.5)
        with pytest.raises(ValueError):
            number_to_hex(True)


class TestHexToInt:
    def test_basic(self):
        assert hex_to_int("0x5208") == 21000
        assert hex_to_int("0x0") == 0

    def test_uppercase_digits(self):
        assert hex_to_int("0xFF") == 255

    def test_beyond_64_bits(self):
        assert hex_to_int("0x" + "f" * 64) == 2**256 - 1

    @pytest.mark.parametrize(
        "value", [None, "", "0x", "5208", "0xzz", "0x5_208", " 0x1", "0x5208\n", "0x5208 "]
    )
    def test_malformed(self, value):
        with pytest.raises(ValueError):
            hex_to_int(value)
