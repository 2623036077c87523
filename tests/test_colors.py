import re

import pytest

from modcharts.constants import MODEL_HEX_COLORS, PREFERRED_CSV_ORDER
from modcharts.visualization.colors import MODEL_COLOR_MAP, generate_colors, hex_to_hsl

HSL_RE = re.compile(r"^hsl\((\d+), (\d+)%, (\d+)%\)$")


def test_hex_to_hsl_black_and_white():
    assert hex_to_hsl("#000000") == "hsl(0, 0%, 0%)"
    assert hex_to_hsl("#ffffff") == "hsl(0, 0%, 100%)"


def test_hex_to_hsl_primaries():
    assert hex_to_hsl("#ff0000") == "hsl(0, 100%, 50%)"
    assert hex_to_hsl("#00ff00") == "hsl(120, 100%, 50%)"
    assert hex_to_hsl("#0000ff") == "hsl(240, 100%, 50%)"


def test_hex_to_hsl_preset_values():
    assert hex_to_hsl("#2e3792") == "hsl(235, 52%, 38%)"
    assert hex_to_hsl("#969696") == "hsl(0, 0%, 59%)"
    assert hex_to_hsl("#4b4b4b") == "hsl(0, 0%, 29%)"
    # Lightness above 50% takes the other saturation branch
    assert hex_to_hsl("#6affb9") == "hsl(152, 100%, 71%)"


def test_hex_to_hsl_hash_optional_and_case_insensitive():
    assert hex_to_hsl("2e3792") == hex_to_hsl("#2e3792")
    assert hex_to_hsl("#9DCB62") == hex_to_hsl("#9dcb62")


def test_hex_to_hsl_hue_near_360_wraps_to_zero():
    # Red with a trace of blue rounds to 360 degrees
    assert hex_to_hsl("#ff0001") == "hsl(0, 100%, 50%)"


@pytest.mark.parametrize("bad", ["#12345", "#1234567", "#gg0000", "", "#", None, 0x2E3792])
def test_hex_to_hsl_rejects_malformed_input(bad):
    with pytest.raises(ValueError):
        hex_to_hsl(bad)


def test_hex_to_hsl_ranges_over_presets():
    for hex_color in set(MODEL_HEX_COLORS.values()):
        match = HSL_RE.match(hex_to_hsl(hex_color))
        assert match, hex_color
        h, s, l = (int(v) for v in match.groups())
        assert 0 <= h <= 359
        assert 0 <= s <= 100
        assert 0 <= l <= 100


def test_hex_to_hsl_is_idempotent():
    assert hex_to_hsl("#bc1932") == hex_to_hsl("#bc1932")


def test_model_color_map_covers_presets():
    assert len(MODEL_COLOR_MAP) == 32
    assert set(MODEL_COLOR_MAP) == set(MODEL_HEX_COLORS)
    assert MODEL_COLOR_MAP["m6Anet"] == "hsl(235, 52%, 38%)"


def test_model_color_map_retrain_variants_share_color():
    for name in ["m6Anet", "EpiNano", "SingleMod", "NanoSPA", "TandemMod", "Dinopore"]:
        assert MODEL_COLOR_MAP[name] == MODEL_COLOR_MAP[f"{name}-retrain"]


def test_model_color_map_is_read_only():
    with pytest.raises(TypeError):
        MODEL_COLOR_MAP["m6Anet"] = "hsl(0, 0%, 0%)"


def test_generate_colors_prefers_presets():
    colors = generate_colors(3, ["m6Anet", "Unknown", "EpiNano"])
    assert colors == [
        MODEL_COLOR_MAP["m6Anet"],
        "hsl(120, 70%, 60%)",
        MODEL_COLOR_MAP["EpiNano"],
    ]


def test_generate_colors_fallback_hues_are_evenly_spaced():
    colors = generate_colors(4, ["a", "b", "c", "d"])
    assert colors == [
        "hsl(0, 70%, 60%)",
        "hsl(90, 70%, 60%)",
        "hsl(180, 70%, 60%)",
        "hsl(270, 70%, 60%)",
    ]


def test_generate_colors_empty():
    assert generate_colors(0, []) == []


def test_generate_colors_more_positions_than_names():
    colors = generate_colors(3, ["Xron"])
    assert colors == [MODEL_COLOR_MAP["Xron"], "hsl(120, 70%, 60%)", "hsl(240, 70%, 60%)"]


def test_generate_colors_fewer_positions_than_names():
    assert generate_colors(1, ["Tombo", "xPore"]) == [MODEL_COLOR_MAP["Tombo"]]


def test_preferred_csv_order():
    assert len(PREFERRED_CSV_ORDER) == 12
    assert len(set(PREFERRED_CSV_ORDER)) == 12
    assert PREFERRED_CSV_ORDER[:6] == (
        "m6A_002.csv",
        "ψ_002.csv",
        "m5C_002.csv",
        "AtoI_002.csv",
        "m7G_002.csv",
        "m1A_002.csv",
    )
    assert all(name.endswith("_004.csv") for name in PREFERRED_CSV_ORDER[6:])


_CHANNELS = ["00", "33", "66", "99", "cc", "ff"]
_SWEEP = [f"#{r}{g}{b}" for r in _CHANNELS for g in _CHANNELS for b in _CHANNELS]


@pytest.mark.parametrize("hex_color", _SWEEP + ["#ff0001", "#ff00ff", "#fe00ff", "#fe0001", "#01ff00"])
def test_hex_to_hsl_ranges_over_sweep(hex_color):
    match = HSL_RE.match(hex_to_hsl(hex_color))
    assert match
    h, s, l = (int(v) for v in match.groups())
    assert 0 <= h <= 359
    assert 0 <= s <= 100
    assert 0 <= l <= 100


def test_hex_to_hsl_magenta_corners():
    assert hex_to_hsl("#ff00ff") == "hsl(300, 100%, 50%)"
    assert hex_to_hsl("#fe00ff") == "hsl(300, 100%, 50%)"


def test_generate_colors_non_positive_count_with_names():
    assert generate_colors(0, ["m6Anet", "Unknown"]) == []
    assert generate_colors(-2, ["a"]) == []
