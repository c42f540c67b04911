from chromamix.conversions.to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb, hsv_to_unit_rgb, np_hsv_to_unit_rgb
import numpy as np
from ..samples import samples_rgb_hsl, samples_rgb_hsv

def test_hsl_to_unit_rgb():
    for (r_exp, g_exp, b_exp), (h, s, l) in samples_rgb_hsl.items():
        r, g, b = hsl_to_unit_rgb(h, s, l)
        assert abs(float(r) - r_exp) < 1/255
        assert abs(float(g) - g_exp) < 1/255
        assert abs(float(b) - b_exp) < 1/255

def test_hsl_to_unit_rgb_numpy():
    hsl = np.array(list(samples_rgb_hsl.values()))
    expected = np.array(list(samples_rgb_hsl.keys()))
    result = np_hsl_to_unit_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2])
    assert result.shape == expected.shape
    assert np.allclose(result, expected, atol=1/255)

def test_hsv_to_unit_rgb():
    for (r_exp, g_exp, b_exp), (h, s, v) in samples_rgb_hsv.items():
        r, g, b = hsv_to_unit_rgb(h, s, v)
        assert abs(float(r) - r_exp) < 1/255
        assert abs(float(g) - g_exp) < 1/255
        assert abs(float(b) - b_exp) < 1/255

def test_hsv_to_unit_rgb_numpy():
    hsv = np.array(list(samples_rgb_hsv.values()))
    expected = np.array(list(samples_rgb_hsv.keys()))
    result = np_hsv_to_unit_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])
    assert np.allclose(result, expected, atol=1/255)

def test_hue_360_equals_hue_0():
    assert np.allclose(hsl_to_unit_rgb(360.0, 1.0, 0.5), hsl_to_unit_rgb(0.0, 1.0, 0.5))
    assert np.allclose(hsv_to_unit_rgb(360.0, 1.0, 1.0), hsv_to_unit_rgb(0.0, 1.0, 1.0))

def test_numpy_broadcasts_over_grids():
    h = np.linspace(0, 359, 12).reshape(3, 4)
    result = np_hsl_to_unit_rgb(h, 0.5, 0.5)
    assert result.shape == (3, 4, 3)
    assert np.all((result >= 0) & (result <= 1))
