"""Reference values shared by the conversion tests."""

# unit rgb -> (hue degrees, saturation, lightness)
samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (120.0, 1.0, 0.5),
    (0.0, 0.0, 1.0): (240.0, 1.0, 0.5),
    (1.0, 1.0, 0.0): (60.0, 1.0, 0.5),
    (0.0, 1.0, 1.0): (180.0, 1.0, 0.5),
    (1.0, 0.0, 1.0): (300.0, 1.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 0.5, 0.0): (30.0, 1.0, 0.5),
    (0.5, 0.25, 0.75): (270.0, 0.5, 0.5),
    (0.2, 0.4, 0.6): (210.0, 0.5, 0.4),
}

# unit rgb -> (hue degrees, saturation, value)
samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120.0, 1.0, 1.0),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1.0),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 0.5, 0.0): (30.0, 1.0, 1.0),
    (0.5, 0.25, 0.75): (270.0, 2 / 3, 0.75),
    (0.2, 0.4, 0.6): (210.0, 2 / 3, 0.6),
}

# hsv -> hsl, both as (degrees, unit, unit)
samples_hsv_hsl = {
    (0.0, 1.0, 1.0): (0.0, 1.0, 0.5),
    (30.0, 1.0, 1.0): (30.0, 1.0, 0.5),
    (270.0, 2 / 3, 0.75): (270.0, 0.5, 0.5),
    (210.0, 2 / 3, 0.6): (210.0, 0.5, 0.4),
    (0.0, 0.0, 1.0): (0.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

# unit rgb -> CIE L*a*b* (D65)
samples_rgb_lab = {
    (1.0, 0.0, 0.0): (53.24, 80.09, 67.20),
    (0.0, 1.0, 0.0): (87.73, -86.18, 83.18),
    (0.0, 0.0, 1.0): (32.30, 79.19, -107.86),
    (1.0, 1.0, 1.0): (100.0, 0.0, 0.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

# 8-bit colors for round trips through every notation
round_trip_rgb = [
    (0, 0, 0),
    (255, 255, 255),
    (255, 0, 0),
    (12, 200, 99),
    (128, 128, 128),
    (51, 102, 153),
    (240, 17, 180),
    (1, 2, 3),
    (254, 253, 1),
    (102, 51, 153),
]
