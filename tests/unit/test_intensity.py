import pytest

from shared.utils.intensity import STRENGTH_THRESHOLDS, perceived_strength


@pytest.mark.parametrize("cdi,label", [
    (0, "Not felt"),
    (1.9, "Not felt"),
    (2, "Weak"),
    (3.4, "Light"),
    (4.0, "Moderate"),
    (5.5, "Strong"),
    (6.99, "Very strong"),
    (7, "Severe"),
    (8.2, "Violent"),
    (9, "Extreme"),
    (12, "Extreme"),
])
def test_threshold_labels(cdi, label):
    assert perceived_strength(cdi) == label


@pytest.mark.parametrize("cdi", [None, "", "n/a", True, float("nan"), [7]])
def test_missing_or_malformed_cdi_is_not_felt(cdi):
    assert perceived_strength(cdi) == "Not felt"


def test_numeric_string_cdi():
    assert perceived_strength("7.0") == "Severe"


def test_table_is_ordered():
    bounds = [upper for upper, _ in STRENGTH_THRESHOLDS]
    assert bounds == sorted(bounds)
    assert bounds[-1] == float("inf")
