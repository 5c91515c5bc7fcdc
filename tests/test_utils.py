import pytest
from unittest.mock import patch, mock_open
from door_decal.utils import load_css, gesture_token, build_summary_table, format_magnitude
from door_decal.pricing import quote

@patch("door_decal.utils.st")
def test_load_css(mock_st):
    """Tests that load_css reads the file and calls st.markdown."""

    # Mock file content
    mock_css_content = "body { color: red; }"

    with patch("builtins.open", mock_open(read_data=mock_css_content)) as mock_file:
        load_css("fake_path.css")

        # Verify file was opened
        mock_file.assert_called_once_with("fake_path.css")

        # Verify st.markdown was called
        mock_st.markdown.assert_called_once()

        # Check that the CSS content was injected (partially)
        args, _ = mock_st.markdown.call_args
        injected_style = args[0]
        assert mock_css_content in injected_style
        assert ":root {" in injected_style
        assert "--door-color" in injected_style

@patch("door_decal.utils.st")
def test_load_css_file_not_found(mock_st):
    """Tests that load_css handles FileNotFoundError silently."""

    with patch("builtins.open", side_effect=FileNotFoundError):
        load_css("non_existent_file.css")

        # Verify st.markdown was NOT called
        mock_st.markdown.assert_not_called()

def test_gesture_token():
    assert gesture_token([1, 2], [3, 4]) == gesture_token([1, 2], [3, 4])
    assert gesture_token([1, 2], [3, 4]) != gesture_token([1, 2], [3, 5])

def test_format_magnitude():
    assert format_magnitude(36.0) == "36"
    assert format_magnitude(91.44) == "91.44"
    assert format_magnitude(None) == "0"

def test_build_summary_table():
    """Summary shows the per-decal price and the quantity-inclusive total separately."""
    price = quote(3.0, 6.0, quantity=2, rate=99)
    table = build_summary_table(36.0, 72.0, "in", price)
    values = dict(zip(table["Concepto"], table["Valor"]))
    assert values["Ancho"] == "36 in"
    assert values["Alto"] == "72 in"
    assert values["Área"] == "18.00 ft²"
    assert values["Cantidad"] == "2"
    assert "1,782" in values["Precio"]
    assert "3,564" in values["Total"]
