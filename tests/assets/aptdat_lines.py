"""Sample apt.dat lines shared by the tests."""

KSEA_HEADER = "1 433 1 0 KSEA Seattle Tacoma Intl"

# Runway 09/27 on the equator, 1000 meters long and 30 meters wide
RUNWAY_09_27 = ("100 30.00 1 0 0.25 0 2 1 "
                "09 0.00000000 0.00000000 0 0 3 0 0 0 "
                "27 0.00000000 0.00899321 0 0 3 0 0 0")

SAMPLE_FILE = """I
1100 Generated by WorldEditor 2.5.0

1      433 1 0 KSEA Seattle Tacoma Intl
1302 city Seattle
1302 country United States
1302 datum_lat 47.449888889
1302 datum_lon -122.309
100 45.72 2 1 0.25 1 3 1 16L 47.46374720 -122.30799390 0.00 0.00 3 8 1 1 34R 47.43099780 -122.30804940 0.00 0.00 3 8 1 1
14 47.44 -122.31 100 0 Tower
1300 47.44422706 -122.30163917 90.00 gate jets|turboprops A1
1301 E airline aal
1300 47.44470111 -122.30113278 90.00 gate jets A2
110 2 0.25 0.00 Terminal apron
111 47.4440 -122.3020
111 47.4450 -122.3020
113 47.4450 -122.3000
1201 47.4420 -122.3050 both 0 A_start
1201 47.4440 -122.3050 both 1 A_end
1202 0 1 twoway taxiway A
54 11990 SEA TWR
1050 118000 SEA ATIS

17 50 0 0 WA01 Harborview Medical Center [H]
102 H1 47.6040 -122.3240 0.00 15.24 15.24 1 0 0 0.25 0

1      21 1 0 KBFI Boeing Fld King Co Intl
100 60.96 1 0 0.25 0 2 1 14R 47.54070000 -122.31470000 0 0 3 0 0 0 32L 47.51580000 -122.29130000 0 0 3 0 0 0
99
"""
