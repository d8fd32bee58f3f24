"""
Tests for the Color value type.
"""
import pytest

from pigment.colors import Color


class TestColorParsing:
    """Tests for the "r,g,b" string form."""

    def test_parse_comma_separated(self):
        """Comma-separated channels parse into a Color."""
        assert Color.parse("255,0,0") == Color(255, 0, 0)
        assert Color.parse("0,255,0") == Color(0, 255, 0)
        assert Color.parse("0,0,255") == Color(0, 0, 255)

    def test_parse_tolerates_spaces(self):
        """Whitespace around channels is ignored."""
        assert Color.parse(" 0, 128 ,255 ") == Color(0, 128, 255)

    @pytest.mark.parametrize("text", ["", "1,2", "1,2,3,4", "a,b,c", "0,0,256", "-1,0,0"])
    def test_parse_rejects_malformed(self, text):
        """Malformed or out-of-range strings raise ValueError."""
        with pytest.raises(ValueError):
            Color.parse(text)

    def test_str_round_trips(self):
        """str() gives back the toolbar form."""
        assert str(Color(12, 34, 56)) == "12,34,56"
        assert Color.parse(str(Color(12, 34, 56))) == Color(12, 34, 56)


class TestColorRendering:
    """Tests for conversions used by the view layer."""

    def test_to_css(self):
        """to_css renders an rgb() string."""
        assert Color(255, 0, 0).to_css() == "rgb(255, 0, 0)"
        assert Color(0, 128, 255).to_css() == "rgb(0, 128, 255)"

    def test_from_sequence(self):
        """A numeric triple converts both ways."""
        color = Color.from_sequence([10, 20, 30])
        assert color.as_tuple() == (10, 20, 30)

    def test_from_sequence_wrong_length(self):
        """Only three channels are accepted."""
        with pytest.raises(ValueError):
            Color.from_sequence([1, 2])

    def test_equality(self):
        """Colors compare by channel values."""
        assert Color(1, 2, 3) == Color(1, 2, 3)
        assert Color(1, 2, 3) != Color(3, 2, 1)
        assert Color(1, 2, 3) is not None
