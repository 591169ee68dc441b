"""
Bundled sample script: a 4x6 inch shipping label.
"""


SAMPLE_SCRIPT = """\
!Y37 0
!Y66 0
!Y17 2
!Y34 10000
!Y68 0
!Y69 -50
!Y17 2
!Y100 0
!Y9 0
!V3194
!C
!Y35 10
!Y72 2
!Y73 3
!Y74 4
!Y75 5
!Y76 6
!Y101 0
!Y102 0
!Y103 0
!Y104 0
!Y105 0
!Y106 0

!F T S 1911 990 L 2 1 1 "Från"
!F T S 1867 990 L 2 1 3 "202 Ikea Espoo"
!F T S 1818 990 L 2 1 3 "Espoontie 21"
!F T S 1768 990 L 2 1 3 "02740 Espoo"
!F T S 1737 990 L 2 1 1 "Tel:"
!F T S 1739 935 L 1 1 3 ""
!F T S 1737 493 L 2 1 1 "Avs-datum:"
!F T S 1739 370 L 1 1 3 "2025-01-31"

!F B E 1000 1675 L 10 50
!F B N 1725 960 L 10 50
!F B E 40 1675 L 10 50
!F B E 40 1226 L 10 50
!F B N 1236 40 L 10 50
!F B N 1725 40 L 10 50
!F B N 1236 960 L 10 50
!F B E 1000 1226 L 10 50

!F T S 1692 990 L 2 1 1 "Till"
!F T S 1628 990 L 3 2 3 "Felipe Gadea Llopis"
!F T S 1535 990 L 2 2 3 "Kilterinkaari 2 C 67"
!F T S 1480 990 L 2 2 3 ""

!F T S 1406 990 L 3 2 3 "01600"
!F T S 1406 770 L 3 2 3 "Vantaa"

!F T S 1250 990 L 4 3 3 "FI-Finland"

!F T S 1334 1020 L 2 2 1 ""
!F T S 1304 1020 L 2 2 1 ""
!F T S 1274 1020 L 2 2 1 ""
!F T S 1244 1020 L 2 2 1 ""

!F T S 1000 620 L 8 4 3 ""
!F T S 1000 320 L 8 4 3 ""
!F T S 1000 990 L 8 4 3 "ILSE"

!F T S 759 1020 L 2 1 1 "Sänd-ID:"
!F T S 759 925 L 2 1 3 "1496046443592379003"
!F T S 759 579 L 2 1 1 "Kolli:"
!F T S 759 509 L 2 1 3 "1"
!F T S 759 400 L 2 1 1 "Kollivikt:"
!F T S 759 279 L 3 2 3 "25,09"
!F T S 759 80 L 2 1 1 "kg"
!F B N 757 50 L 5 990

!Y42 0
!F C S 424 922 L 310 4 41  "1496046443592403759"
!F T S 389 952 L 2 1 4  "Kolli-ID:"
!F T S 285 960 L 2 2 5 "1496046443592403759"

//IKEA CDU

!F T S 2435 1020 L 1 1 3 "L-SEQ: "
!F T S 2395 1020 L 1 1 3 "LS:    "
!F T S 2355 1020 L 1 1 3 "OID:   384524072"
!F T S 2300 1020 L 2 2 3 "CDU: 42c5cb 89-54fd -4316"
!F T S 2250 1020 L 2 2 3 "Box Id: @BI@"
!F T S 2250 520 L 2 2 3 "LSC: 202"
!F T S 2200 1020 L 2 2 3 "TRIP: 202 1"
!F T S 2200 520 L 2 2 3 "GATE: @GAT@"
!F T S 2377 570 L 4 2 3 "ILSE  "

!Y42 0
!F C S 1970 952 L 220 5 41  "42c5cb89-54fd-4316-b3e8-dfbe12e32e33"
!F T S 1932 730 L 1 1 5  "42c5cb89-54fd-4316-b3e8-dfbe12e32e33"
!P 1

!C
!C
"""
