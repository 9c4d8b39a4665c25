"""Shared fixtures for the neo4kanjidic test suite."""

import pytest

from neo4kanjidic.parsers.kanjidic import parse_dictionary

HEADER = '＃ KANJIDIC JIS X 0208 Kanji Dictionary File / Version 2024-01'

LINES = {
    '亜': (
        '亜 3021 U4e9c N43 B1 C7 G8 S7 XJ13D21 F1509 J1 H3540 DP4354 '
        'DK2204 DL2966 L1809 DN1950 K1331 O525 DO1788 MN272 MP1.0525 '
        'E997 IN1616 DA1724 DS1823 DF1032 DT1092 DJ1818 DG35 DM1827 '
        'P4-7-1 I0a7.14 Q1010.6 DR3273 Yya4 Wa ア つ.ぐ T1 や つぎ つぐ '
        '{Asia} {rank next} {come after} {-ous}'
    ),
    '一': (
        '一 306C U4e00 B1 G1 S1 XJ1502D F2 J4 N1 V1 H3405 DP4213 DK2121 '
        'L1 DN1 K2 O1 DO1 MN1 MP1.0001 E1 IN2 DS1 DF1 DH1 DT1 DC1 DJ1 '
        'DG1 DM1 P4-1-4 I0a1.1 Q1000.0 DR3001 Yyi1 Wil イチ イツ ひと- '
        'ひと.つ T1 かず い いっ はじめ {one} {one radical (no.1)}'
    ),
    '丑': (
        '丑 3D2E U4e11 B1 C6 G9 S4 XN25 N25 V30 H3442 DK2145 L1791 '
        'DN1869 MN90 MP1.0290 E1782 IN1793 P4-4-1 I0a4.27 Q1710.5 '
        'Ychou3 Wchwu チュウ うし {sign of the ox or cow} {1-3AM}'
    ),
    '五': (
        '五 385E U4e94 B7 G1 S4 F31 J4 N165 V157 H3492 DK2155 L7 DN7 '
        'K5 O5 DO7 MN275 MP1.0530 E10 IN7 DS7 DF6 DH7 DT7 DC2 DJ7 '
        'P4-4-2 I0a4.32 Q1010.7 DR3009 Ywu3 Wo ゴ いつ いつ.つ T1 ゆき {five}'
    ),
    '犬': (
        '犬 3824 U72ac B94 G1 S4 F1326 J3 N2950 V3616 H1220 DK546 L244 '
        'DN253 K629 O1286 DO1218 MN20090 MP7.0446 E249 IN280 DS178 '
        'DF273 DH140 DT184 DC18 DJ111 DG201 DM247 P4-4-3 I4i0.1 Q4303.0 '
        'DR3002 Yquan3 Wkyen ケン いぬ いぬ- {dog}'
    ),
    '猫': (
        '猫 472D U732b B94 G8 S11 S12 XJ13F2D F1702 N2981 V3693 H949 '
        'DP1225 DK601 DL803 L1498 DN1604 K1643 O2095 DO1931 MN20819 '
        'MP7.0613 E1935 IN1999 DA2007 DS1997 DF1929 DH1919 DT1916 '
        'DJ1850 DG1773 DM1522 P1-3-8 I3g8.5 Q4426.0 DR1889 Ymao1 Wmyo '
        'ビョウ ねこ {cat}'
    ),
    '働': (
        '働 462F U50cd B9 G4 S13 F417 J3 N550 V361 H203 DK112 L2031 '
        'DN2144 K264 O1035 DO727 MN1472 MP1.0922 E394 IN232 DS484 DF456 '
        'DH588 DT618 DC214 DJ390 DG364 DM2044 P1-2-11 I2a11.10 Q2422.7 '
        'DR1035 Ydong4 Wdong ドウ リョク リキ ロク リュク はたら.く '
        '{work} {(kokuji)}'
    ),
}

DISPLAY_ORDER = ['一', '丑', '五', '犬', '亜', '猫', '働']


@pytest.fixture
def kanjidic_lines():
    """Sample KANJIDIC file content: a header line followed by data lines."""
    return [HEADER] + list(LINES.values())


@pytest.fixture
def dictionary(kanjidic_lines):
    """The sample lines parsed into a dictionary."""
    return parse_dictionary(kanjidic_lines)


@pytest.fixture
def kanjidic_file(tmp_path, kanjidic_lines):
    """The sample lines written to an EUC-JP encoded file."""
    path = tmp_path / 'kanjidic'
    path.write_text('\n'.join(kanjidic_lines) + '\n', encoding='euc-jp')
    return path
