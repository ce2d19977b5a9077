import pytest

from airline.reservation.domain.value_object import ReferenceNumber


class TestReferenceNumber:
    """ReferenceNumber のテスト"""

    def test_valid_reference_number(self):
        assert ReferenceNumber("RB7K2Q9Z").value == "RB7K2Q9Z"

    def test_lowercase_is_normalized(self):
        """小文字・前後の空白は正規化される"""
        assert ReferenceNumber(" rb7k2q9z ").value == "RB7K2Q9Z"

    @pytest.mark.parametrize("value", ["XX123456", "RB12345", "RB1234567", "RB12-456"])
    def test_invalid_format_raises_error(self, value):
        with pytest.raises(ValueError, match="Invalid reference number format"):
            ReferenceNumber(value)

    def test_generate(self):
        """生成された予約番号は形式を満たす"""
        reference = ReferenceNumber.generate()
        assert ReferenceNumber.PATTERN.match(reference.value)
