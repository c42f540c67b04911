from chromamix.conversions.to_hsl import hsv_to_hsl, np_hsv_to_hsl, unit_rgb_to_hsl, np_unit_rgb_to_hsl
import numpy as np
from ..samples import samples_hsv_hsl, samples_rgb_hsl

def test_hsv_to_hsl():
    for (h, s, v), (h_exp, s_exp, l_exp) in samples_hsv_hsl.items():
        h_out, s_out, l_out = hsv_to_hsl(h, s, v)

        assert abs(h_out - h_exp) < 1/360
        assert abs(float(s_out) - s_exp) < 1/255
        assert abs(float(l_out) - l_exp) < 1/255

def test_hsv_to_hsl_numpy():
    the_matrix = np.array(list(samples_hsv_hsl.keys()))
    expected = np.array(list(samples_hsv_hsl.values()))
    result = np_hsv_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=1/255)

def test_unit_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = unit_rgb_to_hsl(r, g, b)

        assert abs(h_out - h_exp) < 1/2
        assert abs(float(s_out) - s_exp) < 1/255
        assert abs(float(l_out) - l_exp) < 1/255

def test_unit_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    hsl = np_unit_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert np.allclose(hsl[..., 0], expected[..., 0], atol=1/2)
    assert np.allclose(hsl[..., 1], expected[..., 1], atol=1/255)
    assert np.allclose(hsl[..., 2], expected[..., 2], atol=1/255)

def test_scalar_and_numpy_agree():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    vectorized = np_unit_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    for row, (r, g, b) in zip(vectorized, the_matrix):
        assert np.allclose(row, [float(x) for x in unit_rgb_to_hsl(r, g, b)], atol=1e-9)

def test_hue_stays_below_360():
    h, _, _ = unit_rgb_to_hsl(1.0, 0.0, 1e-9)
    assert 0 <= h < 360
