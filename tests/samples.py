# 8-bit RGB -> rounded hue model (h, s, x)
samples_rgb_hsv = {
    (255, 0, 0): (0, 100, 100),
    (0, 255, 0): (120, 100, 100),
    (0, 0, 255): (240, 100, 100),
    (255, 255, 0): (60, 100, 100),
    (0, 255, 255): (180, 100, 100),
    (255, 0, 255): (300, 100, 100),
    (255, 128, 0): (30, 100, 100),
    (128, 128, 128): (0, 0, 50),
    (255, 255, 255): (0, 0, 100),
    (0, 0, 0): (0, 0, 0),
}

samples_rgb_hsl = {
    (255, 0, 0): (0, 100, 50),
    (0, 255, 0): (120, 100, 50),
    (0, 0, 255): (240, 100, 50),
    (255, 128, 0): (30, 100, 50),
    (128, 128, 128): (0, 0, 50),
    (255, 255, 255): (0, 0, 100),
    (0, 0, 0): (0, 0, 0),
}

samples_rgb_hsi = {
    (255, 0, 0): (0, 100, 33),
    (0, 255, 0): (120, 100, 33),
    (0, 0, 255): (240, 100, 33),
    (255, 255, 0): (60, 100, 67),
    (128, 128, 128): (0, 0, 50),
    (0, 0, 0): (0, 0, 0),
}

# 8-bit RGB -> rounded (c, m, y, k)
samples_rgb_cmyk = {
    (255, 0, 0): (0, 100, 100, 0),
    (0, 255, 255): (100, 0, 0, 0),
    (255, 255, 255): (0, 0, 0, 0),
    (0, 0, 0): (0, 0, 0, 100),
    (128, 128, 128): (0, 0, 0, 50),
}

# 8-bit RGB -> normalised (y, i, q)
samples_rgb_yiq = {
    (255, 255, 255): (255, 0, 0),
    (0, 0, 0): (0, 0, 0),
    (255, 0, 0): (76, 128, 52),
    (0, 0, 255): (29, -69, 76),
}

samples_rgb_hex = {
    (255, 0, 255): "ff00ff",
    (255, 128, 0): "ff8000",
    (16, 32, 48): "102030",
    (0, 0, 0): "000000",
    (255, 255, 255): "ffffff",
}

# sRGB / D65
samples_rgb_xyz = {
    (255, 255, 255): (0.95047, 1.00000, 1.08883),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 0, 0): (0.41246, 0.21267, 0.01933),
    (0, 255, 0): (0.35758, 0.71515, 0.11919),
    (0, 0, 255): (0.18044, 0.07218, 0.95030),
}

samples_rgb_lab = {
    (255, 255, 255): (100, 0, 0),
    (0, 0, 0): (0, 0, 0),
    (255, 0, 0): (53, 80, 67),
}

samples_rgb_luv = {
    (255, 255, 255): (100, 0, 0),
    (0, 0, 0): (0, 0, 0),
    (255, 0, 0): (53, 175, 38),
}

# Rec.709 luma coefficients
REC709_KB = 0.0722
REC709_KR = 0.2126

# wavelength -> 8-bit RGB
samples_nm_rgb = {
    600: (255, 190, 0),
    440: (0, 0, 255),
    700: (255, 0, 0),
    300: (0, 0, 0),
    500: (0, 0, 0),
    800: (0, 0, 0),
}

# colors every round trip is checked against
round_trip_rgb = [
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (0, 255, 255),
    (255, 0, 255),
    (255, 255, 255),
    (0, 0, 0),
    (128, 128, 128),
    (255, 128, 0),
    (12, 200, 90),
    (200, 100, 50),
    (34, 56, 78),
    (250, 5, 128),
]

# the six primaries and secondaries plus grey
primary_rgb = round_trip_rgb[:9]

grid_rgb = [
    (r, g, b)
    for r in (0, 64, 128, 192, 255)
    for g in (0, 64, 128, 192, 255)
    for b in (0, 64, 128, 192, 255)
]
