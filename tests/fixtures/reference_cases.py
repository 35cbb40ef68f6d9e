"""Reference conversion results for fixed points, northern and southern hemisphere.

Tolerances: 1e-6 degrees for latitude/longitude, 0.01 m for easting/northing.
"""

TOL_DEG = 1e-6
TOL_M = 0.01


# (easting, northing, zone, lat, lon)
NORTH_CASES = [
    (234000, 712398, 24, 6.439349839009083, -41.40485722864011),
    (498129, 3908457, 3, 35.319332918415085, -165.02058402610695),
    (649282, 1293870, 54, 11.701152956338074, 142.3697214371168),
    (344509, 90812, 12, 0.8213581392892807, -112.397361571286),
    (240989, 1298731, 26, 11.738499978895081, -29.37642755394301),
    (500918, 5001989, 29, 45.1713809074954, -8.988317635735969),
]

SOUTH_CASES = [
    (364980, 1239888, 6, -78.84668384971482, -153.2641590470919),
    (801239, 8102939, 48, -17.13840803300152, 107.83117176701103),
    (350029, 2193879, 17, -70.31677158840408, -84.99200976423859),
    (698711, 4028939, 27, -53.84996759976053, -17.97896312219287),
    (246098, 9007879, 44, -8.968079052679851, 78.6907948671293),
    (355987, 3451980, 60, -59.047252269304884, 174.4895290221281),
]

# (lat, lon, zone, easting, northing)
NOZONE_CASES = [
    (-28.234982, 79.293801, 44, 332593.76, 6875587.59),
    (89.123980, 1.238790, 31, 496994.11, 9900204.20),
    (29.109890, -9.237811, 29, 476861.73, 3220183.95),
    (34.123080, 19.237891, 34, 337498.55, 3777205.02),
    (-33.298711, 127.000999, 52, 313878.33, 6313814.18),
    (60.109830, 18.238791, 34, 346526.84, 6666849.93),
]

ZONE_CASES = [
    (87.012113, 133.198711, 53, 489518.85, 9664537.05),
    (45.333988, -134.982133, 8, 501399.99, 5020053.48),
    (-27.298790, 89.011000, 45, 699015.55, 6978868.08),
    (-78.123978, 11.037809, 32, 546806.68, 1326979.69),
    (32.871032, -10.923898, 29, 320002.44, 3638630.26),
    (0.129899, -178.129381, 1, 374320.30, 14360.55),
]
