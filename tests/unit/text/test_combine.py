"""
Unit tests for pairwise string combinations.
"""

import pytest

from textcal.exceptions import InvalidArgumentError
from textcal.text import cartesian_frame, cartesian_join


@pytest.mark.unit
class TestCartesianJoin:
    """Test the full combination matrix and unique pairs."""

    LOCATIONS = ["NY", "LA", "CHI", "HOU"]
    TREATMENTS = ["T1", "T2", "T3"]

    def test_full_matrix_shape(self):
        """Row i holds a[i] combined with every element of b."""
        matrix = cartesian_join(self.LOCATIONS, self.TREATMENTS)
        assert len(matrix) == 4
        assert all(len(row) == 3 for row in matrix)
        assert matrix[0] == ["NY T1", "NY T2", "NY T3"]
        assert matrix[3][2] == "HOU T3"

    def test_custom_separator(self):
        assert cartesian_join(["a"], ["b", "c"], sep="-") == [["a-b", "a-c"]]

    def test_custom_combiner(self):
        matrix = cartesian_join([1, 2], [10, 20], combiner=lambda x, y: x * y)
        assert matrix == [[10, 20], [20, 40]]

    def test_empty_input(self):
        assert cartesian_join([], ["a"]) == []
        assert cartesian_join(["a"], []) == [[]]

    def test_unique_pairs_with_diagonal(self):
        pairs = cartesian_join(["a", "b", "c"], ["a", "b", "c"], unique_pairs=True)
        assert pairs == ["a a", "a b", "a c", "b b", "b c", "c c"]

    def test_unique_pairs_without_diagonal(self):
        """Each unordered pair appears once and self-pairs are left out."""
        pairs = cartesian_join(
            ["a", "b", "c"], ["a", "b", "c"], unique_pairs=True, include_diagonal=False
        )
        assert pairs == ["a b", "a c", "b c"]

    def test_unique_pairs_count(self):
        n = len(self.LOCATIONS)
        pairs = cartesian_join(
            self.LOCATIONS, self.LOCATIONS, unique_pairs=True, include_diagonal=False
        )
        assert len(pairs) == n * (n - 1) // 2

    def test_unique_pairs_requires_equal_sets(self):
        with pytest.raises(InvalidArgumentError) as exc_info:
            cartesian_join(["a", "b"], ["a", "c"], unique_pairs=True)
        assert exc_info.value.error_code == "INVALID_ARGUMENT"

    def test_accepts_generators(self):
        matrix = cartesian_join((x for x in "ab"), iter(["1"]), sep="")
        assert matrix == [["a1"], ["b1"]]


@pytest.mark.unit
class TestCartesianFrame:
    """Test the DataFrame rendition of the matrix."""

    def test_frame_labels(self):
        frame = cartesian_frame(["NY", "LA"], ["T1", "T2", "T3"])
        assert frame.shape == (2, 3)
        assert list(frame.index) == ["NY", "LA"]
        assert list(frame.columns) == ["T1", "T2", "T3"]
        assert frame.loc["LA", "T2"] == "LA T2"
