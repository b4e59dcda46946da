"""Tests for the Well model."""
from decimal import Decimal

import pytest

from microplate.exceptions import DataRangeError, NumericTypeError, WellIndexError
from microplate.models import NumericType, Well, WellIndex, WellSet


@pytest.fixture
def well():
    """Create a well with repeated values."""
    return Well("B2", data=[1, 2, 3, 2, 5])


class TestWellConstruction:
    """Test cases for constructing wells."""

    def test_from_index_string(self):
        """Test a well built from an index string."""
        well = Well("C10")
        assert well.row == 2
        assert well.column == 10
        assert well.index == WellIndex(2, 10)
        assert well.index_string == "C10"
        assert well.is_empty()

    def test_from_row_letters(self):
        """Test row letters and numeric strings are both accepted."""
        assert Well("AA", 3).key() == (26, 3)
        assert Well("4", "5").key() == (4, 5)

    def test_index_string_with_positional_data(self):
        """Test data may follow a full index string positionally."""
        well = Well("B3", [1, 2, 3])
        assert well.key() == (1, 3)
        assert well.data == [1, 2, 3]
        assert Well("B3", (4.5,), numeric_type=NumericType.DOUBLE).data == [4.5]

    def test_invalid_index(self):
        """Test a malformed index is rejected."""
        with pytest.raises(WellIndexError):
            Well("1A")

    def test_invalid_coordinates(self):
        """Test negative rows and zero columns are rejected."""
        with pytest.raises(ValueError):
            Well(0, 0)
        with pytest.raises(ValueError):
            Well(-1, 1)

    def test_data_is_coerced(self):
        """Test data is converted to the numeric type."""
        assert Well("A1", data=["1", " 2 ", 3.0]).data == [1, 2, 3]
        assert Well("A1", data=[1], numeric_type=NumericType.DOUBLE).data == [1.0]
        assert Well("A1", data=["1.10"], numeric_type=NumericType.BIGDECIMAL).data == [Decimal("1.10")]

    def test_integer_overflow(self):
        """Test values beyond 32 bits are rejected for INTEGER wells."""
        with pytest.raises(NumericTypeError):
            Well("A1", data=[2 ** 31])
        assert Well("A1", data=[2 ** 40], numeric_type=NumericType.BIGINTEGER).data == [2 ** 40]

    def test_non_integral_value(self):
        """Test fractional values are rejected for integral types."""
        with pytest.raises(NumericTypeError):
            Well("A1", data=[1.5])

    def test_booleans_rejected(self):
        """Test booleans are not numbers here."""
        with pytest.raises(NumericTypeError):
            Well("A1", data=[True])


class TestWellData:
    """Test cases for data mutation."""

    def test_add(self, well):
        """Test values are appended from several sources."""
        well.add(6)
        well.add("7,8")
        well.add([9])
        well.add(Well("A1", data=[10]))
        assert well.data == [1, 2, 3, 2, 5, 6, 7, 8, 9, 10]

    def test_add_with_delimiter(self, well):
        """Test an explicit delimiter splits the value string."""
        well.add("7;8", delimiter=";")
        assert well.data[-2:] == [7, 8]

    def test_replace_data(self, well):
        """Test replacing data swaps the whole list."""
        well.replace_data([9, 9])
        assert well.data == [9, 9]

    def test_remove_all_occurrences(self, well):
        """Test removing a value drops every occurrence."""
        well.remove(2)
        assert well.data == [1, 3, 5]

    def test_remove_range(self, well):
        """Test removing a half-open range."""
        well.remove_range(1, 3)
        assert well.data == [1, 2, 5]

    def test_retain(self, well):
        """Test retaining keeps every occurrence of retained values."""
        well.retain([2, 5, 42])
        assert well.data == [2, 2, 5]

    def test_retain_well_set(self, well):
        """Test retaining against a set intersects with every member."""
        others = WellSet([Well("A1", data=[1, 2, 3]), Well("A2", data=[2, 3, 4])])
        well.retain(others)
        assert well.data == [2, 3, 2]

    def test_retain_range(self, well):
        """Test retaining a half-open range."""
        well.retain_range(1, 3)
        assert well.data == [2, 3]

    @pytest.mark.parametrize("begin, end", [(-1, 2), (3, 1), (0, 6)])
    def test_invalid_ranges(self, well, begin, end):
        """Test ranges outside the data raise DataRangeError."""
        with pytest.raises(DataRangeError):
            well.remove_range(begin, end)
        with pytest.raises(DataRangeError):
            well.retain_range(begin, end)

    def test_failed_range_leaves_data(self, well):
        """Test a failing range operation does not mutate."""
        with pytest.raises(DataRangeError):
            well.remove_range(2, 99)
        assert well.data == [1, 2, 3, 2, 5]

    def test_sub_list(self, well):
        """Test sub lists keep the index and copy a slice."""
        sub = well.sub_list(1, 3)
        assert sub.index_string == "B2"
        assert sub.data == [2, 3, 2]
        with pytest.raises(DataRangeError):
            well.sub_list(4, 3)

    def test_clear(self, well):
        """Test clearing empties the data."""
        well.clear()
        assert well.is_empty()
        assert len(well) == 0


class TestWellQueries:
    """Test cases for well queries."""

    def test_index_of(self, well):
        """Test first and last positions of a value."""
        assert well.index_of(2) == 1
        assert well.last_index_of(2) == 3
        assert well.index_of(42) is None
        assert well.last_index_of(42) is None

    def test_index_of_unrepresentable_value(self):
        """Test values the numeric type cannot hold are simply absent."""
        well = Well("A1", data=[1])
        assert well.index_of(1.5) is None
        assert well.last_index_of(1.5) is None
        assert well.index_of("x") is None

    def test_contains(self, well):
        """Test membership of values."""
        assert 5 in well
        assert 42 not in well
        assert "x" not in well

    def test_conversions(self, well):
        """Test conversions to other numeric representations."""
        assert well.to_float() == [1.0, 2.0, 3.0, 2.0, 5.0]
        assert well.to_decimal()[0] == Decimal(1)
        assert Well("A1", data=[2.0], numeric_type=NumericType.DOUBLE).to_int() == [2]

    def test_copy_is_independent(self, well):
        """Test copies do not share data lists."""
        copy = well.copy()
        copy.add(100)
        assert 100 not in well
        assert copy == well


class TestWellIdentity:
    """Test cases for equality, ordering and string form."""

    def test_equality_ignores_data(self):
        """Test wells at one index are equal whatever their data."""
        assert Well("A1", data=[1]) == Well("A1", data=[2])
        assert hash(Well("A1", data=[1])) == hash(Well("A1"))
        assert Well("A1") != Well("A2")

    def test_ordering(self):
        """Test wells order row-major."""
        wells = [Well("B1"), Well("A12"), Well("A2")]
        assert [w.index_string for w in sorted(wells)] == ["A2", "A12", "B1"]

    def test_string_form(self, well):
        """Test the "<index> [values]" rendering."""
        assert str(well) == "B2 [1, 2, 3, 2, 5]"
        assert str(Well("A1")) == "A1 []"
        assert well.type_string == "Integer"
