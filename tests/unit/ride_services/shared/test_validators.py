from decimal import Decimal

import pytest

from ride_services.shared.utils import to_decimal


class TestToDecimal:
    def test_decimal_is_returned_as_is(self):
        value = Decimal("12.50")
        assert to_decimal(value) is value

    def test_float_is_converted_via_str(self):
        assert to_decimal(7.4) == Decimal("7.4")

    def test_numeric_string(self):
        assert to_decimal(" 2450.00 ") == Decimal("2450.00")

    @pytest.mark.parametrize("value", ["abc", "", None, True])
    def test_non_numeric_raises_value_error(self, value):
        with pytest.raises(ValueError, match="Not a decimal number"):
            to_decimal(value)
