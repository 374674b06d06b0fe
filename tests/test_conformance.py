import pytest

from wcag_contrast import conformance
from wcag_contrast.colors import parse_color, rgb_to_hsl
from wcag_contrast.conformance import (
    analyze_color_pair,
    calculate_contrast,
    get_contrast_requirements,
    get_requirement,
    get_wcag_guideline,
    suggest_accessible_colors,
)
from wcag_contrast.errors import ColorParseError, InvalidTargetRatioError, UnsupportedOptionError


def test_requirement_table_values():
    table = get_contrast_requirements()
    assert table["normal-text"]["AA"] == 4.5
    assert table["normal-text"]["AAA"] == 7.0
    assert table["large-text"]["AA"] == 3.0
    assert table["large-text"]["AAA"] == 4.5
    # No stricter AAA threshold for non-text contrast
    assert table["ui-component"]["AA"] == table["ui-component"]["AAA"] == 3.0


def test_requirement_table_is_read_only():
    table = get_contrast_requirements()
    with pytest.raises(TypeError):
        table["normal-text"] = {"AA": 1.0, "AAA": 1.0}  # type: ignore[index]
    with pytest.raises(TypeError):
        table["normal-text"]["AA"] = 1.0  # type: ignore[index]


def test_guidelines_and_requirement_lookup():
    assert get_wcag_guideline("normal-text") == "1.4.3 Contrast (Minimum)"
    assert get_wcag_guideline("large-text") == "1.4.3 Contrast (Minimum)"
    assert get_wcag_guideline("ui-component") == "1.4.11 Non-text Contrast"
    req = get_requirement("large-text", "AAA")
    assert req.minimum_ratio == 4.5
    assert req.to_dict() == {
        "level": "AAA",
        "contentType": "large-text",
        "minimumRatio": 4.5,
        "guideline": "1.4.3 Contrast (Minimum)",
    }


@pytest.mark.parametrize("content_type,level", [("body-text", "AA"), ("normal-text", "A")])
def test_unknown_options_rejected(content_type, level):
    with pytest.raises(UnsupportedOptionError):
        analyze_color_pair("#000", "#fff", content_type, level)  # type: ignore[arg-type]


def test_calculate_contrast_returns_parsed_colors():
    result = calculate_contrast("#fff", "rgb(0,0,0)")
    assert result.ratio == pytest.approx(21.0)
    assert tuple(result.foreground) == (255, 255, 255)
    assert tuple(result.background) == (0, 0, 0)


def test_analyze_boundary_pair_passes_normal_text_aa():
    analysis = analyze_color_pair("#767676", "#ffffff")
    assert analysis.ratio == pytest.approx(4.5, abs=0.05)
    assert analysis.meets_requirement is True
    assert analysis.requirement.content_type == "normal-text"
    assert analysis.requirement.level == "AA"
    assert analysis.passes.normal_text and analysis.passes.large_text and analysis.passes.ui_component


def test_analyze_same_pair_fails_aaa():
    analysis = analyze_color_pair("#767676", "#ffffff", "normal-text", "AAA")
    assert analysis.requirement.minimum_ratio == 7.0
    assert analysis.meets_requirement is False
    # Informational AA flags are unaffected by the requested level
    assert analysis.passes.normal_text is True


def test_analyze_low_contrast_fails_every_category():
    analysis = analyze_color_pair("#a0a0a0", "#ffffff")
    assert analysis.ratio == pytest.approx(2.6, abs=0.05)
    assert analysis.meets_requirement is False
    assert not (
        analysis.passes.normal_text or analysis.passes.large_text or analysis.passes.ui_component
    )


def test_analyze_mid_gray_passes_large_text_only_categories():
    analysis = analyze_color_pair("#949494", "#ffffff", "large-text")
    assert analysis.ratio == pytest.approx(3.03, abs=0.01)
    assert analysis.passes.normal_text is False
    assert analysis.passes.large_text is True
    assert analysis.passes.ui_component is True
    assert analysis.meets_requirement is True


def test_analyze_normalizes_colors_and_serializes():
    analysis = analyze_color_pair(" #FFF ", "rgb(0, 0, 0)", "ui-component")
    data = analysis.to_dict()
    assert data["foreground"] == "#ffffff"
    assert data["background"] == "#000000"
    assert data["ratio"] == 21.0
    assert data["passes"] == {"normalText": True, "largeText": True, "uiComponent": True}
    assert data["requirement"]["guideline"] == "1.4.11 Non-text Contrast"
    assert data["meetsRequirement"] is True


def test_pass_fail_uses_unrounded_ratio(monkeypatch):
    monkeypatch.setattr(conformance, "contrast_ratio", lambda a, b: 4.4999)
    analysis = analyze_color_pair("#000", "#fff")
    assert analysis.ratio == 4.5
    assert analysis.meets_requirement is False
    assert analysis.passes.normal_text is False


def test_analyze_rejects_bad_color():
    with pytest.raises(ColorParseError) as exc:
        analyze_color_pair("notacolor", "#fff")
    assert "notacolor" in str(exc.value)


def test_suggest_foreground_keeps_hue():
    suggestions = suggest_accessible_colors("#7c8aff", "#ffffff", 4.5, "background")
    assert len(suggestions) == 1
    s = suggestions[0]
    assert s.adjusted_property == "foreground"
    assert s.ratio >= 4.5
    assert abs(rgb_to_hsl(parse_color(s.color)).h - rgb_to_hsl(parse_color("#7c8aff")).h) <= 2


def test_suggest_both_sides_sorted_by_fit():
    suggestions = suggest_accessible_colors("#999999", "#666666", 3.0)
    assert {s.adjusted_property for s in suggestions} == {"foreground", "background"}
    diffs = [abs(s.ratio - 3.0) for s in suggestions]
    assert diffs == sorted(diffs)
    assert all(s.ratio >= 3.0 for s in suggestions)


def test_suggest_omits_exhausted_searches():
    # White cannot be lightened further, so only the foreground can move
    both = suggest_accessible_colors("#777777", "#ffffff", 4.5)
    assert [s.adjusted_property for s in both] == ["foreground"]
    assert suggest_accessible_colors("#777777", "#ffffff", 4.5, "foreground") == []
    assert suggest_accessible_colors("#777777", "#ffffff", 22) == []


def test_suggest_rejects_bad_input():
    with pytest.raises(UnsupportedOptionError):
        suggest_accessible_colors("#000", "#fff", 4.5, "neither")  # type: ignore[arg-type]
    with pytest.raises(ColorParseError):
        suggest_accessible_colors("#000", "nope", 4.5)
    with pytest.raises(InvalidTargetRatioError):
        suggest_accessible_colors("#000", "#fff", -2)
