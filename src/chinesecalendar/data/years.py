"""
Year tables.

Each row gives the civil (month, day) of the year's first day, or None
where it is derived from the following year, and the sexagenary labels
of the first days of its months. 閏 marks a leap month, 後 an extra
month after the one just named.

Years before 太初 (-103) start with 十月; the 15-month 太初元年 covers
label -104 and has no -103 row. Rows with six months or fewer are
placeholders for years not filled in yet; only their first day is used.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..engines.year_table import YearRow


def _y(label: int, first_day: Optional[Tuple[int, int]], months: str) -> YearRow:
    return YearRow(label, first_day, months)


def _z(label: int, months: str) -> YearRow:
    # winter-start year, first day derived
    return YearRow(label, None, months, first_month=10)


# Years shared by the court calendars of 魏, 蜀, 吳 and 北魏.
CE222 = _y(222, (1, 30), "丙寅 丙申 乙丑 乙未 甲子 甲午 閏 癸亥 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉")
CE223 = _y(223, (2, 18), "庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 丙戌 乙卯")
CE224 = _y(224, (2, 8), "乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉")
CE225 = _y(225, (1, 27), "己卯 戊申 戊寅 閏 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉")
CE226 = _y(226, (2, 15), "癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 庚午 己亥 己巳 戊戌 戊辰")
CE227 = _y(227, (2, 4), "丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 癸巳 壬戌 閏 壬辰")
CE228 = _y(228, (2, 23), "辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌")
CE229 = _y(229, (2, 11), "乙卯 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰")
CE230 = _y(230, (2, 1), "庚戌 己卯 己酉 戊寅 戊申 戊寅 丁未 丁丑 丙午 閏 丙子 乙巳 乙亥 甲辰")
CE231 = _y(231, (2, 20), "甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 庚子 己巳 己亥")
CE232 = _y(232, (2, 9), "戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳")
CE233 = _y(233, (1, 28), "壬戌 壬辰 壬戌 辛卯 辛酉 閏 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳")
CE234 = _y(234, (2, 16), "丙戌 丙辰 乙酉 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥")
CE235 = _y(235, (2, 6), "辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丁未 丙子 丙午")
CE236 = _y(236, (1, 26), "乙亥 閏 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 庚午")
CE240 = _y(240, (2, 10), "辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子")
CE247 = _y(247, (2, 22), "庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 丙申 乙丑")
CE248 = _y(248, (2, 12), "乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未")
CE261 = _y(261, (2, 17), "己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌")
CE265 = _y(265, (2, 3), "丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 閏 辛巳 庚戌")
CE269 = _y(269, (2, 19), "癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子 丁巳")
CE273 = _y(273, (2, 5), "庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子")
CE275 = _y(275, (2, 13), "戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 乙酉 甲寅 甲申 癸丑 癸未")
CE277 = _y(277, (2, 20), "丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑")
CE278 = _y(278, (2, 9), "庚午 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未")
CE279 = _y(279, (1, 30), "乙丑 甲午 甲子 癸巳 癸亥 壬辰 閏 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未")
CE280 = _y(280, (2, 18), "己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 甲寅")
CE440 = _y(440, (2, 19), "庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 丙辰 乙酉 乙卯")
CE441 = _y(441, (2, 7), "甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉")
CE442 = _y(442, (1, 27), "戊寅 戊申 戊寅 丁未 丁丑 閏 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉")
CE443 = _y(443, (2, 15), "壬寅 壬申 辛丑 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯")
CE444 = _y(444, (2, 5), "丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 癸亥 壬辰 壬戌")
CE446 = _y(446, (2, 12), "乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰")
CE449 = _y(449, (2, 9), "戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰")
CE451 = _y(451, (2, 17), "丙戌 乙卯 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥")
CE452 = _y(452, (2, 6), "庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丁丑 丙午 丙子 乙巳")
CE453 = _y(453, (1, 26), "乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 閏 壬申 辛丑 辛未 庚子 庚午 己亥 己巳")
CE454 = _y(454, (2, 14), "己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥")
CE457 = _y(457, (2, 10), "辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子")
CE458 = _y(458, (1, 31), "丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 閏 庚子")
CE459 = _y(459, (2, 18), "己巳 己亥 戊辰 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午")
CE460 = _y(460, (2, 8), "甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 辛卯 庚申 庚寅 己未 己丑")
CE461 = _y(461, (1, 27), "戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 閏 甲申 癸丑 癸未 癸丑")
CE462 = _y(462, (2, 15), "壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未")
CE463 = _y(463, (2, 4), "丙子 丙午 乙亥 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑")
CE465 = _y(465, (2, 12), "乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 庚申")
CE466 = _y(466, (2, 1), "己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅")
CE467 = _y(467, (1, 21), "癸未 閏 癸丑 壬午 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅")
CE468 = _y(468, (2, 9), "丁未 丁丑 丙午 丙子 乙巳 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申")
CE470 = _y(470, (2, 17), "丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅")
CE471 = _y(471, (2, 6), "庚申 己丑 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉")
CE473 = _y(473, (2, 13), "戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 甲戌 癸卯")
CE474 = _y(474, (2, 3), "癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉")
CE475 = _y(475, (1, 23), "丁卯 丙申 丙寅 閏 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉")
CE476 = _y(476, (2, 11), "辛卯 庚申 庚寅 己未 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰")
CE478 = _y(478, (2, 18), "己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌")
CE479 = _y(479, (2, 7), "癸卯 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰")
CE480 = _y(480, (1, 28), "戊戌 丁卯 丁酉 丙寅 丙申 丙寅 乙未 乙丑 甲午 閏 甲子 癸巳 癸亥 壬辰")
CE481 = _y(481, (2, 15), "壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 戊子 丁巳 丁亥")
CE482 = _y(482, (2, 4), "丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳")
CE484 = _y(484, (2, 12), "甲戌 甲辰 癸酉 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥")
CE485 = _y(485, (2, 1), "己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 乙未 甲子 甲午")
CE486 = _y(486, (1, 21), "癸亥 閏 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子 丁巳")
CE487 = _y(487, (2, 9), "丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子")
CE489 = _y(489, (2, 16), "乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 壬寅 辛未 辛丑 庚午")
CE490 = _y(490, (2, 6), "庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子")
CE491 = _y(491, (1, 26), "甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 閏 辛酉 庚寅 庚申 己丑 己未 戊子")
CE492 = _y(492, (2, 14), "戊午 丁亥 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未")
CE493 = _y(493, (2, 2), "壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 己酉 戊寅 戊申 丁丑")
CE494 = _y(494, (1, 23), "丁未 丙子 丙午 乙亥 閏 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑")
CE495 = _y(495, (2, 11), "辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未")
CE497 = _y(497, (2, 18), "己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 丙辰 乙酉 乙卯 甲申 甲寅")
CE498 = _y(498, (2, 7), "癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申")
CE499 = _y(499, (1, 28), "戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 閏 甲戌 癸卯 癸酉 壬寅 壬申")
CE500 = _y(500, (2, 15), "辛丑 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅")
CE501 = _y(501, (2, 4), "丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉")
CE502 = _y(502, (1, 24), "庚寅 庚申 己丑 己未 閏 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 乙酉")


BCE_YEARS: Tuple[YearRow, ...] = (
    _z(-250, "壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丁卯"),
    _z(-249, "丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉"),
    _z(-248, "庚寅 庚申 己丑 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 後 乙酉"),
    _z(-247, "甲寅 甲申 癸丑 癸未 壬子 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯"),
    _z(-246, "己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 甲戌 後 癸卯"),
    _z(-245, "癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉"),
    _z(-244, "丁卯 丙申 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰"),
    _z(-243, "辛酉 辛卯 庚申 庚寅 己未 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 後 丙辰"),
    _z(-242, "乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 辛巳 庚戌"),
    _z(-241, "庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰"),
    _z(-240, "甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 後 戊辰"),
    _z(-239, "戊戌 丁卯 丁酉 丙寅 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥"),
    _z(-238, "壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 戊子 丁巳 後 丁亥"),
    _z(-237, "丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳"),
    _z(-236, "辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥"),
    _z(-235, "乙巳 甲戌 甲辰 癸酉 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 後 己亥"),
    _z(-234, "己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 丙申 乙丑 乙未 甲子 甲午"),
    _z(-233, "癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子"),
    _z(-232, "戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 後 壬子"),
    _z(-231, "辛巳 辛亥 庚辰 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午"),
    _z(-230, "丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 癸卯 壬申 壬寅 辛未 辛丑"),
    _z(-229, "庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 後 乙丑"),
    _z(-228, "甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未"),
    _z(-227, "戊子 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 後 癸未"),
    _z(-226, "壬子 壬午 辛亥 辛巳 庚戌 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑"),
    _z(-225, "丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 壬申"),
    _z(-224, "辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 後 乙未"),
    _z(-223, "乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅"),
    _z(-222, "己未 己丑 戊午 戊子 丁巳 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申"),
    _z(-221, "甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 庚辰 己酉 己卯 後 戊申"),
    _z(-220, "戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅"),
    _z(-219, "壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉"),
    _z(-218, "丙寅 丙申 乙丑 乙未 甲子 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 後 辛酉"),
    _z(-217, "庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丁亥 丙辰 丙戌 乙卯"),
    _z(-216, "乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 後 庚辰"),
    _z(-215, "己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌"),
    _z(-214, "癸卯 癸酉 壬寅 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰"),
    _z(-213, "戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 乙丑 甲午 甲子 癸巳 癸亥 後 壬辰"),
    _z(-212, "壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌"),
    _z(-211, "丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳"),
    _z(-210, "庚戌 庚辰 己酉 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 後 乙巳"),
    _z(-209, "甲戌 甲辰 癸酉 癸卯 壬申 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥"),
    _z(-208, "己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 甲午 後 癸亥"),
    _z(-207, "癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子 丁巳"),
    _z(-206, "丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子"),
    _z(-205, "辛巳 辛亥 庚辰 庚戌 己卯 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 後 丙子"),
    _z(-204, "乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 辛丑 庚午"),
    _z(-203, "庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子"),
    _z(-202, "甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 後 戊子"),
    _z(-201, "戊午 丁亥 丁巳 丙戌 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未"),
    _z(-200, "壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 己酉 戊寅 戊申 丁丑"),
    _z(-199, "丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 後 辛丑"),
    _z(-198, "辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未"),
    _z(-197, "乙丑 甲午 甲子 癸巳 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 後 己未"),
    _z(-196, "己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 丙辰 乙酉 乙卯 甲申 甲寅"),
    _z(-195, "癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申"),
    _z(-194, "戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 後 壬申"),
    _z(-193, "辛丑 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅"),
    _z(-192, "丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉"),
    _z(-191, "庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 後 乙酉"),
    _z(-190, "甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯"),
    _z(-189, "戊申 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 後 癸卯"),
    _z(-188, "壬申 壬寅 辛未 辛丑 庚午 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉"),
    _z(-187, "丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 癸巳 壬戌 壬辰"),
    _z(-186, "辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 後 乙卯"),
    _z(-185, "乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌"),
    _z(-184, "己卯 己酉 戊寅 戊申 丁丑 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰"),
    _z(-183, "甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 庚子 己巳 己亥 後 戊辰"),
    _z(-182, "戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌"),
    _z(-181, "壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳"),
    _z(-180, "丙戌 丙辰 乙酉 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 後 辛巳"),
    _z(-179, "庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丁未 丙子 丙午 乙亥"),
    _z(-178, "乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 後 己亥"),
    _z(-177, "己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳"),
    _z(-176, "癸亥 壬辰 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子"),
    _z(-175, "丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 甲寅 癸未 癸丑 壬午 後 壬子"),
    _z(-174, "辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午"),
    _z(-173, "丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子"),
    _z(-172, "庚午 己亥 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 後 甲子"),
    _z(-171, "甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 辛酉 庚寅 庚申 己丑 己未"),
    _z(-170, "戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 甲申 癸丑 後 癸未"),
    _z(-169, "壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑"),
    _z(-168, "丙午 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未"),
    _z(-167, "辛丑 庚午 庚子 己巳 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 後 乙未"),
    _z(-166, "乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 辛卯 庚申 庚寅"),
    _z(-165, "己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申"),
    _z(-164, "癸丑 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 後 戊申"),
    _z(-163, "丁丑 丁未 丙子 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅"),
    _z(-162, "壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 後 丙寅"),
    _z(-161, "丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 辛酉"),
    _z(-160, "庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯"),
    _z(-159, "甲申 甲寅 癸未 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 後 己卯"),
    _z(-158, "戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 乙巳 甲戌 甲辰 癸酉"),
    _z(-157, "癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 戊辰"),
    _z(-156, "丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 後 辛卯"),
    _z(-155, "辛酉 庚寅 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌"),
    _z(-154, "乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 壬子 辛巳 辛亥 庚辰"),
    _z(-153, "庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 乙亥 後 甲辰"),
    _z(-152, "甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌"),
    _z(-151, "戊辰 丁酉 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 後 壬戌"),
    _z(-150, "壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 己未 戊子 戊午 丁亥 丁巳"),
    _z(-149, "丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 壬午 辛亥"),
    _z(-148, "辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 後 乙亥"),
    _z(-147, "甲辰 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳"),
    _z(-146, "己亥 戊辰 戊戌 丁卯 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子"),
    _z(-145, "癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 己丑 戊午 後 戊子"),
    _z(-144, "丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午"),
    _z(-143, "辛亥 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子"),
    _z(-142, "丙午 乙亥 乙巳 甲戌 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 後 庚子"),
    _z(-141, "庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 丙申 乙丑 乙未"),
    _z(-140, "甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 後 己未"),
    _z(-139, "戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑"),
    _z(-138, "壬午 壬子 辛巳 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未"),
    _z(-137, "丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 後 辛未"),
    _z(-136, "辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 丙寅"),
    _z(-135, "乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申"),
    _z(-134, "己丑 己未 戊子 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 後 甲申"),
    _z(-133, "癸丑 癸未 壬子 壬午 辛亥 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅"),
    _z(-132, "戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 癸酉 後 壬寅"),
    _z(-131, "壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申"),
    _z(-130, "丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯"),
    _z(-129, "庚申 庚寅 己未 己丑 戊午 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 後 乙卯"),
    _z(-128, "甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 庚辰 己酉"),
    _z(-127, "己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯"),
    _z(-126, "癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 後 丁卯"),
    _z(-125, "丁酉 丙寅 丙申 乙丑 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌"),
    _z(-124, "辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 戊子 丁巳 丁亥 丙辰 後 丙戌"),
    _z(-123, "乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰"),
    _z(-122, "庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌"),
    _z(-121, "甲辰 癸酉 癸卯 壬申 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳 後 戊戌"),
    _z(-120, "戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 乙未 甲子 甲午 癸亥 癸巳"),
    _z(-119, "壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥"),
    _z(-118, "丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 後 辛亥"),
    _z(-117, "庚辰 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳"),
    _z(-116, "乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 壬寅 辛未 辛丑 庚午 庚子"),
    _z(-115, "己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 後 甲子"),
    _z(-114, "癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午"),
    _z(-113, "丁亥 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 後 壬午"),
    _z(-112, "辛亥 辛巳 庚戌 庚辰 己酉 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子"),
    _z(-111, "丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 壬申 辛丑 辛未"),
    _z(-110, "庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 後 甲午"),
    _z(-109, "甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑"),
    _z(-108, "戊午 戊子 丁巳 丁亥 丙辰 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未"),
    _z(-107, "癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 己卯 戊申 戊寅 後 丁未"),
    _z(-106, "丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑"),
    _z(-105, "辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 後 乙丑"),
    _z(-104, "乙未 甲子 甲午 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 後後 戊子 後後 戊午 後後 丁亥"),
    _y(-102, None, "丁巳 丙戌 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午"),
    _y(-101, None, "辛亥 辛巳 庚戌 庚辰 己酉 己卯 閏 戊申 戊寅 戊申 丁丑 丁未 丙子 丙午"),
    _y(-100, None, "乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 辛未 庚子"),
    _y(-99, None, "庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午"),
    _y(-98, None, "甲子 癸巳 癸亥 閏 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午"),
    _y(-97, None, "戊子 丁巳 丁亥 丙辰 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑"),
    _y(-96, None, "壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 戊寅 丁未 閏 丁丑"),
    _y(-95, None, "丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未"),
    _y(-94, None, "庚子 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑"),
    _y(-93, None, "乙未 甲子 甲午 癸亥 癸巳 癸亥 壬辰 壬戌 辛卯 閏 辛酉 庚寅 庚申 己丑"),
    _y(-92, None, "己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 乙酉 甲寅 甲申"),
    _y(-91, None, "癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅"),
    _y(-90, None, "戊申 丁丑 丁未 丙子 丙午 閏 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅"),
    _y(-89, None, "辛未 辛丑 庚午 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申"),
    _y(-88, None, "丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 壬辰 辛酉 辛卯"),
    _y(-87, None, "庚申 閏 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 乙卯"),
    _y(-86, None, "甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉"),
    _y(-85, None, "戊寅 戊申 丁丑 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 閏 甲戌 癸卯 癸酉"),
    _y(-84, None, "壬寅 壬申 辛丑 辛未 庚子 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯"),
    _y(-83, None, "丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 壬戌"),
    _y(-82, None, "辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 閏 戊午 丁亥 丁巳 丙戌 丙辰 乙酉"),
    _y(-81, None, "乙卯 甲申 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰"),
    _y(-80, None, "己酉 己卯 戊申 戊寅 丁未 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌"),
    _y(-79, None, "甲辰 癸酉 癸卯 閏 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 己巳 戊戌"),
    _y(-78, None, "戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰"),
    _y(-77, None, "壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 閏 丁亥 丙辰"),
    _y(-76, None, "丙戌 乙卯 乙酉 甲寅 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥"),
    _y(-75, None, "庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 丙子 乙巳"),
    _y(-74, None, "乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 閏 辛未 庚子 庚午 己亥 己巳"),
    _y(-73, None, "己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥"),
    _y(-72, None, "癸巳 壬戌 壬辰 辛酉 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午"),
    _y(-71, None, "丁亥 丁巳 丙戌 丙辰 乙酉 閏 乙卯 甲申 甲寅 甲申 癸丑 癸未 壬子 壬午"),
    _y(-70, None, "辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子"),
    _y(-69, None, "丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午"),
    _y(-68, None, "庚子 閏 己巳 己亥 戊辰 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午"),
    _y(-67, None, "甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 辛卯 庚申 庚寅 己未 己丑"),
    _y(-66, None, "戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 閏 甲申 癸丑 癸未 癸丑"),
    _y(-65, None, "壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未"),
    _y(-64, None, "丙子 丙午 乙亥 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑"),
    _y(-63, None, "辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 閏 戊戌 丁卯 丁酉 丙寅 丙申 乙丑"),
    _y(-62, None, "乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 庚申"),
    _y(-61, None, "己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅"),
    _y(-60, None, "癸未 癸丑 癸未 壬子 閏 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅"),
    _y(-59, None, "丁未 丁丑 丙午 丙子 乙巳 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申"),
    _y(-58, None, "壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 戊辰 丁酉 丁卯 閏 丙申"),
    _y(-57, None, "丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅"),
    _y(-56, None, "庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉"),
    _y(-55, None, "甲寅 甲申 癸丑 癸未 壬子 壬午 壬子 辛巳 閏 辛亥 庚辰 庚戌 己卯 己酉"),
    _y(-54, None, "戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 乙亥 甲辰 甲戌 癸卯"),
    _y(-53, None, "癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉"),
    _y(-52, None, "丁卯 丁酉 丙寅 丙申 乙丑 閏 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉"),
    _y(-51, None, "辛卯 庚申 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰"),
    _y(-50, None, "乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 壬午 辛亥 辛巳 庚戌"),
    _y(-49, None, "庚辰 己酉 閏 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌"),
    _y(-48, None, "甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰"),
    _y(-47, None, "戊戌 丁卯 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 閏 癸巳 癸亥 壬辰"),
    _y(-46, None, "壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 己丑 戊午 戊子 丁巳 丁亥"),
    _y(-45, None, "丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 壬子 辛巳"),
    _y(-44, None, "辛亥 庚辰 庚戌 己卯 己酉 戊寅 閏 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳"),
    _y(-43, None, "甲戌 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥"),
    _y(-42, None, "己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 丙申 乙丑 乙未 甲子 甲午"),
    _y(-41, None, "癸亥 癸巳 壬戌 閏 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 己未 戊子 戊午"),
    _y(-40, None, "丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子"),
    _y(-39, None, "辛巳 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 閏 丙子"),
    _y(-38, None, "乙巳 乙亥 甲辰 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午"),
    _y(-37, None, "庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 丙寅 乙未 乙丑"),
    _y(-36, None, "甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 閏 庚寅 庚申 己丑 己未 戊子"),
    _y(-35, None, "戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未"),
    _y(-34, None, "壬子 壬午 辛亥 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑"),
    _y(-33, None, "丁未 丙子 丙午 乙亥 閏 乙巳 甲戌 甲辰 癸酉 癸卯 癸酉 壬寅 壬申 辛丑"),
    _y(-32, None, "辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 丙申"),
    _y(-31, None, "乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅"),
    _y(-30, None, "己未 閏 己丑 戊午 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅"),
    _y(-29, None, "癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 庚辰 己酉 己卯 戊申"),
    _y(-28, None, "戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 閏 癸酉 癸卯 壬申"),
    _y(-27, None, "壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅"),
    _y(-26, None, "丙申 乙丑 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉"),
    _y(-25, None, "庚寅 庚申 己丑 己未 戊子 戊午 閏 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉"),
    _y(-24, None, "甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 庚戌 己卯"),
    _y(-23, None, "己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉"),
    _y(-22, None, "癸卯 壬申 壬寅 閏 壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉"),
    _y(-21, None, "丁卯 丙申 丙寅 乙未 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰"),
    _y(-20, None, "辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丁巳 丙戌 閏 丙辰"),
    _y(-19, None, "乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌"),
    _y(-18, None, "庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰"),
    _y(-17, None, "甲戌 癸卯 癸酉 壬寅 壬申 壬寅 辛未 辛丑 庚午 閏 庚子 己巳 己亥 戊辰"),
    _y(-16, None, "戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 甲子 癸巳 癸亥"),
    _y(-15, None, "壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳"),
    _y(-14, None, "丁亥 丙辰 丙戌 乙卯 乙酉 閏 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳"),
    _y(-13, None, "庚戌 庚辰 己酉 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥"),
    _y(-12, None, "乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 壬申 辛丑 辛未 庚子 庚午"),
    _y(-11, None, "己亥 閏 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 甲午"),
    _y(-10, None, "癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子"),
    _y(-9, None, "丁巳 丁亥 丙辰 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 閏 癸丑 壬午 壬子"),
    _y(-8, None, "辛巳 辛亥 庚辰 庚戌 己卯 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午"),
    _y(-7, None, "丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 辛丑"),
    _y(-6, None, "庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 閏 丁酉 丙寅 丙申 乙丑 乙未 甲子"),
    _y(-5, None, "甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未"),
    _y(-4, None, "戊子 戊午 丁亥 丁巳 丙戌 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑"),
    _y(-3, None, "癸未 壬子 壬午 閏 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 戊申 丁丑"),
    _y(-2, None, "丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未"),
    _y(-1, None, "辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 閏 丙寅 乙未"),
    _y(0, None, "乙丑 甲午 甲子 癸巳 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅"),
)

CE_YEARS: Tuple[YearRow, ...] = (
    _y(1, (2, 12), "己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 丙辰 乙酉 乙卯 甲申"),
    _y(2, (2, 2), "甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 閏 庚戌 己卯 己酉 戊寅 戊申"),
    _y(3, (2, 21), "戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅"),
    _y(4, (2, 10), "壬申 辛丑 辛未 庚子 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉"),
    _y(5, (1, 29), "丙寅 丙申 乙丑 乙未 甲子 閏 甲午 癸亥 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉"),
    _y(6, (2, 17), "庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯"),
    _y(7, (2, 7), "乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉"),
    _y(8, (1, 27), "己卯 閏 戊申 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉"),
    _y(9, (2, 14), "癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 庚午 己亥 己巳 戊戌 戊辰"),
    _y(10, (2, 3), "丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 閏 癸亥 壬辰 壬戌 壬辰"),
    _y(11, (2, 22), "辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌"),
    _y(12, (2, 11), "乙卯 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰"),
    _y(13, (1, 31), "庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 閏 丁丑 丙午 丙子 乙巳 乙亥 甲辰"),
    _y(14, (2, 19), "甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 庚子 己巳 己亥"),
    _y(15, (2, 8), "戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳"),
    _y(16, (1, 28), "壬戌 壬辰 壬戌 辛卯 閏 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳"),
    _y(17, (2, 15), "丙戌 丙辰 乙酉 乙卯 甲申 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥"),
    _y(18, (2, 5), "辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丁未 丙子 丙午 閏 乙亥"),
    _y(19, (2, 24), "乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳"),
    _y(20, (2, 13), "己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子"),
    _y(21, (2, 1), "癸巳 癸亥 壬辰 壬戌 壬辰 辛酉 辛卯 庚申 閏 庚寅 己未 己丑 戊午 戊子"),
    _y(22, (2, 20), "丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 甲寅 癸未 癸丑 壬午"),
    _y(23, (2, 10), "壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子"),
    _y(24, (1, 30), "丙午 丙子 乙巳 乙亥 甲辰 閏 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子"),
    _y(25, (2, 17), "庚午 己亥 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未"),
    _y(26, (2, 6), "甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 辛酉 庚寅 庚申 己丑"),
    _y(27, (1, 27), "己未 戊子 閏 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 甲申 癸丑"),
    _y(28, (2, 15), "癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未"),
    _y(29, (2, 3), "丁丑 丙午 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 閏 癸卯 壬申 壬寅 辛未"),
    _y(30, (2, 22), "辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 戊辰 丁酉 丁卯 丙申 丙寅"),
    _y(31, (2, 11), "乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 辛卯 庚申"),
    _y(32, (2, 1), "庚寅 己未 己丑 戊午 戊子 丁巳 閏 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申"),
    _y(33, (2, 18), "癸丑 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅"),
    _y(34, (2, 8), "戊申 丁丑 丁未 丙子 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉"),
    _y(35, (1, 28), "壬寅 壬申 辛丑 閏 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 戊戌 丁卯 丁酉"),
    _y(36, (2, 16), "丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯"),
    _y(37, (2, 4), "庚申 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 閏 乙卯"),
    _y(38, (2, 23), "甲申 甲寅 癸未 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉"),
    _y(39, (2, 13), "己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 乙巳 甲戌 甲辰"),
    _y(40, (2, 2), "癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 閏 己巳 己亥 戊辰 戊戌 戊辰"),
    _y(41, (2, 20), "丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌"),
    _y(42, (2, 9), "辛卯 辛酉 庚寅 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰"),
    _y(43, (1, 30), "丙戌 乙卯 乙酉 甲寅 閏 甲申 癸丑 癸未 壬子 壬午 壬子 辛巳 辛亥 庚辰"),
    _y(44, (2, 18), "庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 乙亥"),
    _y(45, (2, 6), "甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳"),
    _y(46, (1, 26), "戊戌 閏 戊辰 丁酉 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳"),
    _y(47, (2, 14), "壬戌 壬辰 辛酉 辛卯 庚申 庚寅 庚申 己丑 己未 戊子 戊午 丁亥"),
    _y(48, (2, 4), "丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 閏 壬子 壬午 辛亥"),
    _y(49, (2, 22), "辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳"),
    _y(50, (2, 11), "乙亥 甲辰 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子"),
    _y(51, (1, 31), "己巳 己亥 戊辰 戊戌 丁卯 丁酉 閏 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子"),
    _y(52, (2, 19), "癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 己丑 戊午"),
    _y(53, (2, 8), "戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子"),
    _y(54, (1, 28), "壬午 壬子 辛巳 閏 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子"),
    _y(55, (2, 16), "丙午 乙亥 乙巳 甲戌 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未"),
    _y(56, (2, 5), "庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 丙申 乙丑 閏 乙未"),
    _y(57, (2, 23), "甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑"),
    _y(58, (2, 13), "己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未"),
    _y(59, (2, 2), "癸丑 壬午 壬子 辛巳 辛亥 辛巳 庚戌 庚辰 己酉 閏 己卯 戊申 戊寅 丁未"),
    _y(60, (2, 21), "丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 甲辰 癸酉 癸卯 壬申 壬寅"),
    _y(61, (2, 9), "辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申"),
    _y(62, (1, 30), "丙寅 乙未 乙丑 甲午 甲子 閏 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申"),
    _y(63, (2, 17), "己丑 己未 戊子 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅"),
    _y(64, (2, 7), "甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 辛亥 庚辰 庚戌 己卯 己酉"),
    _y(65, (1, 26), "戊寅 閏 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 癸酉"),
    _y(66, (2, 14), "壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯"),
    _y(67, (2, 3), "丙申 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 閏 壬辰 辛酉 辛卯"),
    _y(68, (2, 22), "庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉"),
    _y(69, (2, 11), "乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 庚辰"),
    _y(70, (1, 31), "己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 閏 丙子 乙巳 乙亥 甲辰 甲戌 癸卯"),
    _y(71, (2, 19), "癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌"),
    _y(72, (2, 8), "丁卯 丁酉 丙寅 丙申 乙丑 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰"),
    _y(73, (1, 28), "壬戌 辛卯 辛酉 閏 庚寅 庚申 己丑 己未 戊子 戊午 戊子 丁巳 丁亥 丙辰"),
    _y(74, (2, 16), "丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌"),
    _y(75, (2, 5), "庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 閏 乙巳 甲戌"),
    _y(76, (2, 24), "甲辰 癸酉 癸卯 壬申 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳"),
    _y(77, (2, 12), "戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 乙未 甲子 甲午 癸亥"),
    _y(78, (2, 2), "癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 閏 己丑 戊午 戊子 丁巳 丁亥"),
    _y(79, (2, 21), "丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳"),
    _y(80, (2, 10), "辛亥 庚辰 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子"),
    _y(81, (1, 29), "乙巳 乙亥 甲辰 甲戌 癸卯 閏 癸酉 壬寅 壬申 壬寅 辛未 辛丑 庚午 庚子"),
    _y(82, (2, 17), "己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午"),
    _y(83, (2, 7), "甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子"),
    _y(84, (1, 27), "戊午 閏 丁亥 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子"),
    _y(85, (2, 13), "辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午"),
    _y(86, (2, 2), "乙亥 乙巳 甲戌 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 閏 辛未 庚子 庚午"),
    _y(87, (2, 21), "己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 丙申 乙丑 乙未 甲子"),
    _y(88, (2, 11), "甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 己未"),
    _y(89, (1, 30), "戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 閏 乙卯 甲申 甲寅 癸未 癸丑 壬午"),
    _y(90, (2, 18), "壬子 辛巳 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑"),
    _y(91, (2, 7), "丙午 丙子 乙巳 乙亥 甲辰 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未"),
    _y(92, (1, 28), "辛丑 庚午 庚子 閏 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 丙寅 乙未"),
    _y(93, (2, 15), "乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑"),
    _y(94, (2, 4), "己未 戊子 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 閏 甲申 癸丑"),
    _y(95, (2, 23), "癸未 壬子 壬午 辛亥 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申"),
    _y(96, (2, 12), "丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 癸酉 壬寅"),
    _y(97, (2, 1), "壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 閏 戊辰 丁酉 丁卯 丙申 丙寅"),
    _y(98, (2, 20), "丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申"),
    _y(99, (2, 9), "庚寅 己未 己丑 戊午 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯"),
    _y(100, (1, 29), "甲申 甲寅 癸未 癸丑 壬午 閏 壬子 辛巳 辛亥 庚辰 庚戌 庚辰 己酉 己卯"),
    _y(101, (2, 16), "戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉"),
    _y(102, (2, 6), "癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯"),
    _y(103, (1, 26), "丁酉 閏 丙寅 丙申 乙丑 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯"),
    _y(104, (2, 14), "辛酉 庚寅 庚申 己丑 己未 戊子 戊午 戊子 丁巳 丁亥 丙辰 丙戌"),
    _y(105, (2, 2), "乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 閏 辛巳 庚戌 庚辰 庚戌"),
    _y(106, (2, 21), "己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰"),
    _y(107, (2, 10), "癸酉 癸卯 壬申 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌"),
    _y(108, (1, 31), "戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 閏 乙未 甲子 甲午 癸亥 癸巳 壬戌"),
    _y(109, (2, 18), "壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丁巳"),
    _y(110, (2, 7), "丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥"),
    _y(111, (1, 27), "庚辰 庚戌 庚辰 己酉 閏 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥"),
    _y(112, (2, 15), "甲辰 甲戌 癸卯 癸酉 壬寅 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳"),
    _y(113, (2, 4), "己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 甲子 閏 癸巳"),
    _y(114, (2, 23), "癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 丁亥"),
    _y(115, (2, 12), "丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午"),
    _y(116, (2, 1), "辛亥 辛巳 庚戌 庚辰 己酉 己卯 己酉 戊寅 閏 戊申 丁丑 丁未 丙子 丙午"),
    _y(117, (2, 19), "乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 壬申 辛丑 辛未 庚子"),
    _y(118, (2, 9), "庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午"),
    _y(119, (1, 29), "甲子 甲午 癸亥 癸巳 壬戌 閏 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午"),
    _y(120, (2, 17), "戊子 丁巳 丁亥 丙辰 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑"),
    _y(121, (2, 5), "壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 己卯 戊申 戊寅 丁未"),
    _y(122, (1, 26), "丁丑 丙午 閏 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未"),
    _y(123, (2, 14), "辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑"),
    _y(124, (2, 3), "乙未 甲子 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 閏 庚寅 庚申 己丑"),
    _y(125, (2, 21), "己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 丙戌 乙卯 乙酉 甲寅 甲申"),
    _y(126, (2, 10), "癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅"),
    _y(127, (1, 31), "戊申 丁丑 丁未 丙子 丙午 乙亥 閏 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅"),
    _y(128, (2, 18), "辛未 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申"),
    _y(129, (2, 7), "丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯"),
    _y(130, (1, 27), "庚申 庚寅 己未 閏 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 丙辰 乙酉 乙卯"),
    _y(131, (2, 15), "甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉"),
    _y(132, (2, 4), "戊寅 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 閏 癸酉"),
    _y(133, (2, 22), "壬寅 壬申 辛丑 辛未 庚子 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯"),
    _y(134, (2, 12), "丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 癸亥 壬辰 壬戌"),
    _y(135, (2, 1), "辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 閏 丁亥 丁巳 丙戌 丙辰 乙酉"),
    _y(136, (2, 20), "乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰"),
    _y(137, (2, 8), "己酉 己卯 戊申 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌"),
    _y(138, (1, 29), "甲辰 癸酉 癸卯 壬申 閏 壬寅 辛未 辛丑 庚午 庚子 庚午 己亥 己巳 戊戌"),
    _y(139, (2, 17), "戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰"),
    _y(140, (2, 6), "壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥"),
    _y(141, (1, 25), "丙辰 閏 丙戌 乙卯 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥"),
    _y(142, (2, 13), "庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丁丑 丙午 丙子 乙巳"),
    _y(143, (2, 3), "乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 閏 庚午 庚子 己巳"),
    _y(144, (2, 22), "己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥"),
    _y(145, (2, 10), "癸巳 壬戌 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午"),
    _y(146, (1, 30), "丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 閏 甲申 甲寅 甲申 癸丑 癸未 壬子 壬午"),
    _y(147, (2, 18), "辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丁未 丙子"),
    _y(148, (2, 8), "丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午"),
    _y(149, (1, 27), "庚子 己巳 己亥 閏 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午"),
    _y(150, (2, 15), "甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 辛卯 庚申 庚寅 己未 己丑"),
    _y(151, (2, 4), "戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 甲寅 癸未 閏 癸丑"),
    _y(152, (2, 23), "壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未"),
    _y(153, (2, 11), "丙子 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑"),
    _y(154, (2, 1), "辛未 庚子 庚午 己亥 己巳 己亥 戊辰 戊戌 丁卯 閏 丁酉 丙寅 丙申 乙丑"),
    _y(155, (2, 20), "乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 辛酉 庚寅 庚申"),
    _y(156, (2, 9), "己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅"),
    _y(157, (1, 28), "癸未 癸丑 癸未 壬子 壬午 閏 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅"),
    _y(158, (2, 16), "丁未 丁丑 丙午 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申"),
    _y(159, (2, 6), "壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 戊辰 丁酉 丁卯"),
    _y(160, (1, 26), "丙申 閏 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 辛卯"),
    _y(161, (2, 13), "庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉"),
    _y(162, (2, 2), "甲寅 甲申 癸丑 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 閏 庚戌 己卯 己酉"),
    _y(163, (2, 21), "戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 乙亥 甲辰 甲戌 癸卯"),
    _y(164, (2, 11), "癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 戊戌"),
    _y(165, (1, 30), "丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 閏 甲午 癸亥 癸巳 壬戌 壬辰 辛酉"),
    _y(166, (2, 18), "辛卯 庚申 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰"),
    _y(167, (2, 7), "乙酉 乙卯 甲申 甲寅 癸未 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌"),
    _y(168, (1, 28), "庚辰 己酉 己卯 閏 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 乙巳 甲戌"),
    _y(169, (2, 15), "甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰"),
    _y(170, (2, 4), "戊戌 丁卯 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 閏 癸亥 壬辰"),
    _y(171, (2, 23), "壬戌 辛卯 辛酉 庚寅 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥"),
    _y(172, (2, 12), "丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 壬子 辛巳"),
    _y(173, (2, 1), "辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 閏 丁未 丙子 丙午 乙亥 乙巳"),
    _y(174, (2, 20), "乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥"),
    _y(175, (2, 9), "己巳 戊戌 戊辰 丁酉 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午"),
    _y(176, (1, 29), "癸亥 癸巳 壬戌 壬辰 辛酉 閏 辛卯 庚申 庚寅 己未 己丑 己未 戊子 戊午"),
    _y(177, (2, 16), "丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子"),
    _y(178, (2, 6), "壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午"),
    _y(179, (1, 26), "丙子 閏 乙巳 乙亥 甲辰 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午"),
    _y(180, (2, 14), "庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丁卯 丙申 丙寅 乙未 乙丑"),
    _y(181, (2, 2), "甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 閏 庚申 己丑 己未 己丑"),
    _y(182, (2, 21), "戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未"),
    _y(183, (2, 10), "壬子 壬午 辛亥 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑"),
    _y(184, (1, 31), "丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 閏 甲戌 癸卯 癸酉 壬寅 壬申 辛丑"),
    _y(185, (2, 18), "辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 丙申"),
    _y(186, (2, 7), "乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅"),
    _y(187, (1, 27), "己未 己丑 己未 戊子 閏 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅"),
    _y(188, (2, 15), "癸未 癸丑 壬午 壬子 辛巳 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申"),
    _y(189, (2, 4), "戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 癸卯 閏 壬申"),
    _y(190, (2, 23), "壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅"),
    _y(191, (2, 12), "丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉"),
    _y(192, (2, 1), "庚寅 庚申 己丑 己未 戊子 戊午 戊子 丁巳 閏 丁亥 丙辰 丙戌 乙卯 乙酉"),
    _y(193, (2, 19), "甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 辛亥 庚辰 庚戌 己卯"),
    _y(194, (2, 9), "己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉"),
    _y(195, (1, 29), "癸卯 癸酉 壬寅 壬申 辛丑 閏 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉"),
    _y(196, (2, 17), "丁卯 丙申 丙寅 乙未 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰"),
    _y(197, (2, 5), "辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子 戊午 丁亥 丁巳 丙戌"),
    _y(198, (1, 26), "丙辰 乙酉 閏 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌"),
    _y(199, (2, 14), "庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰"),
    _y(200, (2, 3), "甲戌 癸卯 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 閏 己巳 己亥 戊辰"),
    _y(201, (2, 21), "戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 乙丑 甲午 甲子 癸巳 癸亥"),
    _y(202, (2, 10), "壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳"),
    _y(203, (1, 31), "丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 閏 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳"),
    _y(204, (2, 18), "庚戌 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥"),
    _y(205, (2, 7), "乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 壬申 辛丑 辛未 庚子 庚午"),
    _y(206, (1, 27), "己亥 己巳 戊戌 閏 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 乙未 甲子 甲午"),
    _y(207, (2, 15), "癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子"),
    _y(208, (2, 4), "丁巳 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 閏 壬子"),
    _y(209, (2, 22), "辛巳 辛亥 庚辰 庚戌 己卯 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午"),
    _y(210, (2, 12), "丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 壬寅 辛未 辛丑"),
    _y(211, (2, 1), "庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 閏 丙寅 丙申 乙丑 乙未 甲子"),
    _y(212, (2, 20), "甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未"),
    _y(213, (2, 8), "戊子 戊午 丁亥 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑"),
    _y(214, (1, 29), "癸未 壬子 壬午 辛亥 閏 辛巳 庚戌 庚辰 己酉 己卯 己酉 戊寅 戊申 丁丑"),
    _y(215, (2, 17), "丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未"),
    _y(216, (2, 6), "辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅"),
    _y(217, (1, 25), "乙未 閏 乙丑 甲午 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅"),
    _y(218, (2, 13), "己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 丙辰 乙酉 乙卯 甲申"),
    _y(219, (2, 3), "甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 閏 己酉 己卯 戊申"),
    _y(220, (2, 22), "戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅"),
    _y(221, (2, 10), "壬申 辛丑 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉"),
    CE222, CE223, CE224, CE225, CE226, CE227, CE228, CE229, CE230, CE231, CE232,
    CE233, CE234, CE235, CE236,
    _y(237, (2, 13), "己亥 己巳 進 戊戌 戊辰 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午"),
    _y(238, (1, 3), "癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 庚申 己丑 己未 閏 戊子 戊午"),
    _y(239, (1, 22), "丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 後 壬午"),
    CE240,
    _y(241, (1, 29), "乙巳 乙亥 甲辰 甲戌 甲辰 癸酉 閏 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子"),
    _y(242, (2, 17), "己巳 己亥 戊辰 戊戌 丁卯 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午"),
    _y(243, (2, 7), "甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 己丑"),
    _y(244, (1, 27), "戊午 戊子 丁巳 閏 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子"),
    _y(245, (2, 14), "壬午 辛亥 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未"),
    _y(246, (2, 3), "丙子 丙午 乙亥 乙巳 甲戌 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 閏 辛未"),
    CE247, CE248,
    _y(249, (1, 31), "己丑 戊午 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 閏 乙卯 甲申 甲寅 癸未"),
    _y(250, (2, 19), "癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 庚辰 己酉 己卯 戊申 戊寅"),
    _y(251, (2, 8), "丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 癸卯 壬申"),
    _y(252, (1, 29), "壬寅 辛未 辛丑 庚午 庚子 閏 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申"),
    _y(253, (2, 15), "乙丑 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅"),
    _y(254, (2, 5), "庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉"),
    _y(255, (1, 25), "甲寅 閏 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 庚戌 己卯 己酉"),
    _y(256, (2, 13), "戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯"),
    _y(257, (2, 1), "壬申 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 閏 戊辰 丁酉 丁卯"),
    _y(258, (2, 20), "丙申 丙寅 乙未 乙丑 甲午 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉"),
    _y(259, (2, 10), "辛卯 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丁巳 丙戌 丙辰"),
    _y(260, (1, 30), "乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 閏 壬子 辛巳 辛亥 庚辰 庚戌 己卯"),
    CE261,
    _y(262, (2, 6), "癸卯 癸酉 壬寅 壬申 辛丑 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰"),
    _y(263, (1, 27), "戊戌 丁卯 丁酉 閏 丙寅 丙申 乙丑 乙未 甲子 甲午 甲子 癸巳 癸亥 壬辰"),
    _y(264, (2, 15), "壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌"),
    CE265,
    _y(266, (2, 22), "庚辰 己酉 己卯 戊申 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳"),
    _y(267, (2, 11), "甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 辛未 庚子 庚午 己亥"),
    _y(268, (2, 1), "己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 閏 乙丑 甲午 甲子 癸巳 癸亥"),
    CE269,
    _y(270, (2, 8), "丁亥 丙辰 丙戌 乙卯 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子"),
    _y(271, (1, 28), "辛巳 辛亥 庚辰 庚戌 己卯 閏 己酉 戊寅 戊申 戊寅 丁未 丁丑 丙午 丙子"),
    _y(272, (2, 16), "乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午"),
    CE273,
    _y(274, (1, 25), "甲午 閏 癸亥 癸巳 壬戌 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子"),
    CE275,
    _y(276, (2, 2), "壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 閏 戊寅 丁未 丁丑 丁未"),
    CE277, CE278, CE279, CE280,
    _y(281, (2, 6), "癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申"),
    _y(282, (1, 26), "丁丑 丁未 丙子 丙午 閏 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申"),
    _y(283, (2, 14), "辛丑 辛未 庚子 庚午 己亥 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅"),
    _y(284, (2, 4), "丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 辛酉 閏 庚寅"),
    _y(285, (2, 22), "庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申"),
    _y(286, (2, 11), "甲寅 癸未 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯"),
    _y(287, (1, 31), "戊申 戊寅 丁未 丁丑 丙午 丙子 丙午 乙亥 閏 乙巳 甲戌 甲辰 癸酉 癸卯"),
    _y(288, (2, 19), "壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 戊辰 丁酉"),
    _y(289, (2, 8), "丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯"),
    _y(290, (1, 28), "辛酉 庚寅 庚申 庚寅 己未 閏 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯"),
    _y(291, (2, 16), "乙酉 甲寅 甲申 癸丑 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌"),
    _y(292, (2, 5), "己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 乙亥 甲辰"),
    _y(293, (1, 25), "甲戌 癸卯 閏 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰"),
    _y(294, (2, 12), "丁酉 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌"),
    _y(295, (2, 2), "壬辰 辛酉 辛卯 庚申 庚寅 庚申 己丑 己未 戊子 戊午 閏 丁亥 丁巳 丙戌"),
    _y(296, (2, 21), "丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 壬午 辛亥 辛巳"),
    _y(297, (2, 9), "庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥"),
    _y(298, (1, 29), "甲辰 甲戌 甲辰 癸酉 癸卯 壬申 閏 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥"),
    _y(299, (2, 17), "戊辰 戊戌 丁卯 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳"),
    _y(300, (2, 7), "癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 己丑 戊午 戊子"),
    _y(301, (1, 26), "丁巳 丁亥 丙辰 閏 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥"),
    _y(302, (2, 14), "辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午"),
    _y(303, (2, 3), "乙亥 乙巳 甲戌 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 閏 庚午"),
    _y(304, (2, 22), "己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 丙申 乙丑 乙未 甲子"),
    _y(305, (2, 11), "甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午"),
    _y(306, (1, 31), "戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 閏 甲申 甲寅 癸未 癸丑 壬午"),
    _y(307, (2, 19), "壬子 辛巳 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑"),
    _y(308, (2, 8), "丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 癸卯 壬申 壬寅 辛未"),
    _y(309, (1, 28), "辛丑 庚午 庚子 己巳 閏 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未"),
    _y(310, (2, 16), "乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑"),
    _y(311, (2, 5), "己未 戊子 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申"),
    _y(312, (1, 25), "癸丑 閏 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 庚戌 己卯 己酉 戊寅 戊申"),
    _y(313, (2, 12), "丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅"),
    _y(314, (2, 1), "辛未 辛丑 庚午 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 閏 丁卯 丙申 丙寅"),
    _y(315, (2, 20), "乙未 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申"),
    _y(316, (2, 10), "庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯"),
    _y(317, (1, 29), "甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 閏 辛亥 庚辰 庚戌 己卯 己酉 己卯"),
    _y(318, (2, 17), "戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉"),
    _y(319, (2, 6), "壬寅 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯"),
    _y(320, (1, 27), "丁酉 丙寅 丙申 閏 乙丑 乙未 甲子 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯"),
    _y(321, (2, 14), "辛酉 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 丙戌"),
    _y(322, (2, 3), "乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 閏 庚辰 己酉"),
    _y(323, (2, 22), "己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰"),
    _y(324, (2, 11), "癸酉 癸卯 壬申 壬寅 辛未 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌"),
    _y(325, (1, 31), "戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 閏 甲子 癸巳 癸亥 癸巳 壬戌"),
    _y(326, (2, 19), "壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰"),
    _y(327, (2, 8), "丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥"),
    _y(328, (1, 28), "庚辰 庚戌 己卯 己酉 戊寅 閏 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥"),
    _y(329, (2, 15), "甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 庚子 己巳"),
    _y(330, (2, 5), "己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥"),
    _y(331, (1, 25), "癸巳 閏 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 丁亥"),
    _y(332, (2, 13), "丁巳 丙戌 丙辰 乙酉 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午"),
    _y(333, (2, 1), "辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 閏 丁未 丙子 丙午"),
    _y(334, (2, 20), "乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子"),
    _y(335, (2, 10), "庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午"),
    _y(336, (1, 30), "甲子 癸巳 癸亥 壬辰 壬戌 壬辰 辛酉 閏 辛卯 庚申 庚寅 己未 己丑 戊午"),
    _y(337, (2, 17), "戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 甲寅 癸未 癸丑"),
    _y(338, (2, 6), "壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未"),
    _y(339, (1, 27), "丁丑 丙午 丙子 乙巳 閏 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未"),
    _y(340, (2, 14), "庚子 庚午 己亥 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑"),
    _y(341, (2, 3), "乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 閏 己丑"),
    _y(342, (2, 22), "己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 甲申"),
    _y(343, (2, 11), "癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅"),
    _y(344, (1, 31), "丁未 丁丑 丙午 丙子 丙午 乙亥 乙巳 甲戌 閏 甲辰 癸酉 癸卯 壬申 壬寅"),
    _y(345, (2, 18), "辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 戊辰 丁酉 丁卯 丙申"),
    _y(346, (2, 8), "丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 辛卯"),
    _y(347, (1, 28), "庚申 庚寅 己未 己丑 戊午 閏 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅"),
    _y(348, (2, 16), "甲申 癸丑 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉"),
    _y(349, (2, 4), "戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 乙亥 甲辰 甲戌 癸卯"),
    _y(350, (1, 25), "癸酉 壬寅 閏 壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 戊戌 丁卯"),
    _y(351, (2, 13), "丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉"),
    _y(352, (2, 2), "辛卯 庚申 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 閏 丙戌 丙辰 乙酉"),
    _y(353, (2, 20), "乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 壬午 辛亥 辛巳 庚戌 庚辰"),
    _y(354, (2, 9), "己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 乙巳 甲戌"),
    _y(355, (1, 30), "甲辰 癸酉 癸卯 壬申 壬寅 辛未 閏 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌"),
    _y(356, (2, 17), "丁卯 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰"),
    _y(357, (2, 6), "壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 己丑 戊午 戊子 丁巳 丁亥"),
    _y(358, (1, 26), "丙辰 丙戌 乙卯 閏 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 壬子 辛巳 辛亥"),
    _y(359, (2, 14), "庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳"),
    _y(360, (2, 3), "甲戌 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 閏 己巳"),
    _y(361, (2, 21), "戊戌 戊辰 丁酉 丁卯 丙申 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥"),
    _y(362, (2, 11), "癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 己未 戊子 戊午"),
    _y(363, (1, 31), "丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 閏 癸未 癸丑 壬午 壬子 辛巳"),
    _y(364, (2, 19), "辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子"),
    _y(365, (2, 7), "乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午"),
    _y(366, (1, 28), "庚子 己巳 己亥 戊辰 閏 戊戌 丁卯 丁酉 丙寅 丙申 丙寅 乙未 乙丑 甲午"),
    _y(367, (2, 16), "甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子"),
    _y(368, (2, 5), "戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未"),
    _y(369, (1, 24), "壬子 閏 壬午 辛亥 辛巳 庚戌 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未"),
    _y(370, (2, 12), "丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅 壬申 辛丑"),
    _y(371, (2, 2), "辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 閏 丙寅 乙未 乙丑"),
    _y(372, (2, 21), "乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未"),
    _y(373, (2, 9), "己丑 戊午 戊子 丁巳 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅"),
    _y(374, (1, 29), "癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 閏 庚戌 己卯 己酉 己卯 戊申 戊寅"),
    _y(375, (2, 17), "丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申"),
    _y(376, (2, 7), "壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅"),
    _y(377, (1, 26), "丙申 乙丑 乙未 閏 甲子 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅"),
    _y(378, (2, 14), "庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 丙戌 乙卯 乙酉"),
    _y(379, (2, 3), "甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 閏 己酉"),
    _y(380, (2, 22), "戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯"),
    _y(381, (2, 10), "壬申 壬寅 辛未 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉"),
    _y(382, (1, 31), "丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 閏 癸巳 壬戌 壬辰 辛酉"),
    _y(383, (2, 19), "辛卯 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 丙辰"),
    _y(384, (2, 8), "乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌"),
    _y(385, (1, 27), "己卯 己酉 戊寅 戊申 戊寅 閏 丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌"),
    _y(386, (2, 15), "癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 庚子 己巳 己亥 戊辰"),
    _y(387, (2, 5), "戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 癸亥"),
    _y(388, (1, 25), "壬辰 閏 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌"),
    _y(389, (2, 12), "丙辰 乙酉 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳"),
    _y(390, (2, 1), "庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丁未 丙子 閏 丙午 乙亥 乙巳"),
    _y(391, (2, 20), "甲戌 甲辰 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 庚午 己亥"),
    _y(392, (2, 10), "己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳"),
    _y(393, (1, 29), "癸亥 壬辰 壬戌 壬辰 辛酉 辛卯 庚申 閏 庚寅 己未 己丑 戊午 戊子 丁巳"),
    _y(394, (2, 17), "丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 甲寅 癸未 癸丑 壬午 壬子"),
    _y(395, (2, 6), "辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丁丑 丙午"),
    _y(396, (1, 27), "丙子 乙巳 乙亥 閏 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午"),
    _y(397, (2, 13), "己亥 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子"),
    _y(398, (2, 3), "甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 辛酉 庚寅 庚申 己丑 閏 己未 戊子"),
    _y(399, (2, 22), "戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 甲申 癸丑 癸未"),
    _y(400, (2, 11), "壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑"),
    _y(401, (1, 30), "丙午 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 閏 癸卯 壬申 壬寅 辛未 辛丑"),
    _y(402, (2, 18), "庚午 庚子 己巳 己亥 戊辰 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未"),
    _y(403, (2, 8), "乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 辛卯 庚申 庚寅"),
    _y(404, (1, 28), "己未 己丑 戊午 戊子 丁巳 閏 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑"),
    _y(405, (2, 15), "癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申"),
    _y(406, (2, 4), "丁丑 丁未 丙子 丙午 乙亥 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅"),
    _y(407, (1, 25), "壬申 辛丑 閏 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 戊戌 丁卯 丁酉 丙寅"),
    _y(408, (2, 13), "丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申"),
    _y(409, (2, 1), "庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 閏 乙酉 乙卯 甲申"),
    _y(410, (2, 20), "甲寅 癸未 癸丑 壬午 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯"),
    _y(411, (2, 9), "戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥 乙巳 甲戌 甲辰 癸酉"),
    _y(412, (1, 30), "癸卯 壬申 壬寅 辛未 辛丑 庚午 閏 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉"),
    _y(413, (2, 17), "丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯"),
    _y(414, (2, 6), "辛酉 庚寅 庚申 己丑 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌"),
    _y(415, (1, 26), "乙卯 乙酉 甲寅 閏 甲申 癸丑 癸未 壬子 壬午 壬子 辛巳 辛亥 庚辰 庚戌"),
    _y(416, (2, 14), "己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰"),
    _y(417, (2, 3), "甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 閏 戊辰"),
    _y(418, (2, 21), "丁酉 丁卯 丙申 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌"),
    _y(419, (2, 11), "壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 己未 戊子 戊午 丁亥 丁巳"),
    _y(420, (1, 31), "丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 閏 壬午 壬子 辛巳 辛亥 辛巳"),
    _y(421, (2, 18), "庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 乙巳 乙亥"),
    _y(422, (2, 7), "甲辰 甲戌 癸卯 癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳"),
    _y(423, (1, 28), "己亥 戊辰 戊戌 丁卯 閏 丁酉 丙寅 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳"),
    _y(424, (2, 16), "癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 戊子"),
    _y(425, (2, 4), "丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 壬子 壬午"),
    _y(426, (1, 24), "辛亥 閏 辛巳 庚戌 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午"),
    _y(427, (2, 12), "乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子"),
    _y(428, (2, 2), "庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 閏 乙丑 乙未 甲子"),
    _y(429, (2, 20), "甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午"),
    _y(430, (2, 9), "戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑"),
    _y(431, (1, 29), "壬午 壬子 辛巳 辛亥 庚辰 庚戌 閏 庚辰 己酉 己卯 戊申 戊寅 丁未 丁丑"),
    _y(432, (2, 17), "丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 壬寅 辛未"),
    _y(433, (2, 6), "辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑"),
    _y(434, (1, 26), "乙未 甲子 甲午 閏 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑"),
    _y(435, (2, 14), "己未 戊子 戊午 丁亥 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申"),
    _y(436, (2, 3), "癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 己酉 戊寅 閏 戊申"),
    _y(437, (2, 21), "丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 壬寅"),
    _y(438, (2, 10), "辛未 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申"),
    _y(439, (1, 31), "丙寅 乙未 乙丑 甲午 甲子 甲午 癸亥 癸巳 壬戌 閏 壬辰 辛酉 辛卯 庚申"),
    CE440, CE441, CE442, CE443, CE444,
    _y(445, (1, 24), "辛卯 辛酉 庚寅 庚申 己丑 閏 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉"),
    CE446,
    _y(447, (2, 1), "己酉 己卯 戊申 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌"),
    _y(448, (1, 22), "甲辰 癸酉 閏 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 庚午 己亥 己巳 戊戌"),
    CE449,
    _y(450, (1, 29), "壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 己丑 戊午 戊子 閏 丁巳 丁亥 丙辰"),
    CE451, CE452, CE453, CE454,
    _y(455, (2, 3), "癸巳 壬戌 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午"),
    _y(456, (1, 23), "丁亥 丁巳 丙戌 閏 丙辰 乙酉 乙卯 甲申 甲寅 甲申 癸丑 癸未 壬子 壬午"),
    CE457, CE458, CE459, CE460, CE461, CE462, CE463,
    _y(464, (1, 25), "辛未 庚子 庚午 己亥 己巳 閏 戊戌 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑"),
    CE465, CE466, CE467, CE468,
    _y(469, (1, 29), "壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 閏 丁卯 丙申"),
    CE470, CE471,
    _y(472, (1, 26), "甲寅 甲申 癸丑 癸未 壬子 壬午 壬子 閏 辛巳 辛亥 庚辰 庚戌 己卯 己酉"),
    CE473, CE474, CE475, CE476,
    _y(477, (1, 30), "乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 辛巳 庚戌 閏 庚辰"),
    CE478, CE479, CE480, CE481, CE482,
    _y(483, (1, 24), "庚戌 庚辰 庚戌 己卯 己酉 閏 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳"),
    CE484, CE485, CE486, CE487,
    _y(488, (1, 29), "辛巳 辛亥 庚辰 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未 閏 丁丑 丙午 丙子"),
    CE489, CE490, CE491, CE492, CE493, CE494, CE495,
    _y(496, (1, 31), "乙丑 甲午 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 閏 己未"),
    CE497, CE498, CE499, CE500, CE501, CE502,
    _y(503, (2, 12), ""),
    _y(504, (2, 1), ""),
    _y(505, (1, 21), ""),
    _y(506, (2, 9), ""),
    _y(507, (1, 29), ""),
)

SHU_YEARS: Tuple[YearRow, ...] = (
    CE223, CE224, CE225, CE226, CE227, CE228, CE229, CE230, CE231, CE232, CE233,
    CE234, CE235, CE236,
    _y(237, (2, 13), "己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子"),
    _y(238, (2, 2), "癸巳 癸亥 壬辰 壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 閏 己丑 戊午 戊子"),
    _y(239, (2, 21), "丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 甲寅 癸未 癸丑 壬午"),
    _y(240, (2, 11), "壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丁丑"),
    _y(241, (1, 30), "丙午 丙子 乙巳 乙亥 甲辰 甲戌 閏 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子"),
    _y(242, (2, 18), "庚午 己亥 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未"),
    _y(243, (2, 7), "甲子 甲午 癸亥 癸巳 壬戌 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑"),
    _y(244, (1, 28), "己未 戊子 戊午 閏 丁亥 丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 甲申 癸丑"),
    _y(245, (2, 15), "癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 丁未"),
    _y(246, (2, 4), "丁丑 丙午 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯 壬申 閏 壬寅 辛未"),
    _y(247, (2, 23), "辛丑 庚午 庚子 己巳 己亥 己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅"),
    _y(248, (2, 12), "乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 辛卯 庚申"),
    _y(249, (2, 1), "庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 閏 丙戌 乙卯 乙酉 甲寅 甲申"),
    _y(250, (2, 20), "甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅"),
    _y(251, (2, 9), "戊申 丁丑 丁未 丙子 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉"),
    _y(252, (1, 29), "壬寅 壬申 辛丑 辛未 庚子 閏 庚午 己亥 己巳 戊戌 戊辰 戊戌 丁卯 丁酉"),
    _y(253, (2, 16), "丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯"),
    _y(254, (2, 6), "辛酉 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉"),
    _y(255, (1, 26), "乙卯 閏 甲申 甲寅 癸未 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉"),
    _y(256, (2, 14), "己卯 戊申 戊寅 丁未 丁丑 丙午 丙子 丙午 乙亥 乙巳 甲戌 甲辰"),
    _y(257, (2, 2), "癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 閏 己亥 戊辰 戊戌 戊辰"),
    _y(258, (2, 21), "丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌"),
    _y(259, (2, 10), "辛卯 辛酉 庚寅 庚申 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰"),
    _y(260, (1, 31), "丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 閏 癸丑 壬午 壬子 辛巳 辛亥 庚辰"),
    _y(261, (2, 18), "庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 乙亥"),
    _y(262, (2, 7), "甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳"),
    _y(263, (1, 27), "戊戌 戊辰 戊戌 丁卯 閏 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳"),
)

WU_YEARS: Tuple[YearRow, ...] = (
    CE222,
    _y(223, (2, 18), "庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉 乙卯"),
    _y(224, (2, 7), "甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉"),
    _y(225, (1, 26), "戊寅 戊申 戊寅 丁未 閏 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉"),
    _y(226, (2, 14), "壬寅 壬申 辛丑 辛未 庚子 庚午 庚子 己巳 己亥 戊辰 戊戌 丁卯"),
    _y(227, (2, 4), "丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 壬戌 閏 辛卯"),
    _y(228, (2, 23), "辛酉 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉"),
    _y(229, (2, 11), "乙卯 甲申 甲寅 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 庚戌 庚辰"),
    _y(230, (1, 31), "己酉 己卯 戊申 戊寅 丁未 丁丑 丁未 丙子 閏 丙午 乙亥 乙巳 甲戌 甲辰"),
    _y(231, (2, 19), "癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 己巳 戊戌"),
    _y(232, (2, 9), "戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰"),
    _y(233, (1, 28), "壬戌 辛卯 辛酉 辛卯 庚申 閏 庚寅 己未 己丑 戊午 戊子 丁巳 丁亥 丙辰"),
    _y(234, (2, 16), "丙戌 乙卯 乙酉 甲寅 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥"),
    _y(235, (2, 5), "庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 丙子 乙巳"),
    _y(236, (1, 26), "乙亥 甲辰 閏 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳"),
    _y(237, (2, 12), "戊戌 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑 乙未 甲子 甲午 癸亥"),
    _y(238, (2, 2), "癸巳 壬戌 壬辰 辛酉 辛卯 辛酉 庚寅 庚申 己丑 己未 閏 戊子 戊午 丁亥"),
    _y(239, (2, 21), "丁巳 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 癸未 壬子 壬午"),
    CE240,
    _y(241, (1, 29), "乙巳 乙亥 乙巳 甲戌 甲辰 癸酉 閏 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子"),
    _y(242, (2, 17), "己巳 己亥 戊辰 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 乙丑 甲午"),
    _y(243, (2, 7), "甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 庚寅 己未 己丑"),
    _y(244, (1, 27), "戊午 戊子 丁巳 閏 丁亥 丙辰 丙戌 乙卯 乙酉 甲寅 甲申 癸丑 癸未 癸丑"),
    _y(245, (2, 14), "壬午 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉 戊寅 戊申 丁丑 丁未"),
    _y(246, (2, 3), "丙子 丙午 乙亥 乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 閏 辛未"),
    CE247, CE248,
    _y(249, (1, 31), "己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 閏 乙酉 乙卯 甲申 甲寅 癸未"),
    _y(250, (2, 19), "癸丑 壬午 壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅"),
    _y(251, (2, 8), "丁未 丁丑 丙午 丙子 乙巳 乙亥 甲辰 甲戌 甲辰 癸酉 癸卯 壬申"),
    _y(252, (1, 29), "壬寅 辛未 辛丑 庚午 閏 庚子 己巳 己亥 戊辰 戊戌 丁卯 丁酉 丙寅 丙申"),
    _y(253, (2, 16), "丙寅 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅"),
    _y(254, (2, 5), "庚申 己丑 己未 戊子 戊午 戊子 丁巳 丁亥 丙辰 丙戌 乙卯 乙酉"),
    _y(255, (1, 25), "甲寅 閏 甲申 癸丑 癸未 壬子 壬午 辛亥 辛巳 辛亥 庚辰 庚戌 己卯 己酉"),
    _y(256, (2, 13), "戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳 甲戌 甲辰 癸酉 癸卯"),
    _y(257, (2, 2), "癸酉 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥 己巳 戊戌 閏 戊辰 丁酉 丁卯"),
    _y(258, (2, 20), "丙申 丙寅 乙未 乙丑 乙未 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉"),
    _y(259, (2, 10), "辛卯 庚申 庚寅 己未 己丑 戊午 戊子 戊午 丁亥 丁巳 丙戌 丙辰"),
    _y(260, (1, 30), "乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 閏 壬子 辛巳 辛亥 庚辰 庚戌 庚辰"),
    CE261,
    _y(262, (2, 6), "癸卯 癸酉 壬寅 壬申 壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰"),
    _y(263, (1, 27), "戊戌 丁卯 丁酉 閏 丙寅 丙申 乙丑 乙未 乙丑 甲午 甲子 癸巳 癸亥 壬辰"),
    _y(264, (2, 15), "壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丁亥"),
    CE265,
    _y(266, (2, 22), "庚辰 己酉 己卯 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳"),
    _y(267, (2, 11), "甲戌 甲辰 癸酉 癸卯 壬申 壬寅 壬申 辛丑 辛未 庚子 庚午 己亥"),
    _y(268, (2, 1), "己巳 戊戌 戊辰 丁酉 丁卯 丙申 丙寅 乙未 閏 乙丑 甲午 甲子 甲午 癸亥"),
    CE269,
    _y(270, (2, 8), "丁亥 丙辰 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子"),
    _y(271, (1, 28), "辛巳 辛亥 庚辰 庚戌 己卯 閏 己酉 己卯 戊申 戊寅 丁未 丁丑 丙午 丙子"),
    _y(272, (2, 16), "乙巳 乙亥 甲辰 甲戌 癸卯 癸酉 壬寅 壬申 辛丑 辛未 辛丑 庚午"),
    CE273,
    _y(274, (1, 25), "甲午 閏 癸亥 癸巳 癸亥 壬辰 壬戌 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子"),
    CE275,
    _y(276, (2, 2), "壬子 壬午 辛亥 辛巳 庚戌 庚辰 己酉 己卯 戊申 戊寅 閏 戊申 丁丑 丁未"),
    CE277, CE278, CE279, CE280,
)

BEIWEI_YEARS: Tuple[YearRow, ...] = (
    CE440, CE441, CE442, CE443, CE444,
    _y(445, (1, 24), "辛卯 閏 辛酉 庚寅 庚申 己丑 己未 戊子 戊午 丁亥 丁巳 丙戌 丙辰 乙酉"),
    CE446,
    _y(447, (2, 1), "己酉 己卯 戊申 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 閏 乙巳 乙亥 甲辰"),
    _y(448, (2, 20), "癸酉 癸卯 壬申 壬寅 辛未 辛丑 庚午 庚子 庚午 己亥 己巳 戊戌"),
    CE449,
    _y(450, (1, 29), "壬戌 壬辰 辛酉 辛卯 庚申 庚寅 己未 閏 己丑 戊午 戊子 丁巳 丁亥 丙辰"),
    CE451, CE452, CE453, CE454,
    _y(455, (2, 3), "癸巳 壬戌 壬辰 辛酉 辛卯 辛酉 庚寅 庚申 己丑 己未 戊子 戊午"),
    _y(456, (1, 23), "丁亥 丁巳 閏 丙戌 丙辰 乙酉 乙卯 甲申 甲寅 甲申 癸丑 癸未 壬子 壬午"),
    CE457, CE458, CE459, CE460, CE461, CE462, CE463,
    _y(464, (1, 25), "辛未 庚子 庚午 己亥 閏 己巳 戊戌 戊辰 戊戌 丁卯 丁酉 丙寅 丙申 乙丑"),
    CE465, CE466, CE467, CE468,
    _y(469, (1, 29), "壬寅 辛未 辛丑 庚午 庚子 己巳 己亥 戊辰 戊戌 閏 丁卯 丁酉 丁卯 丙申"),
    CE470, CE471,
    _y(472, (1, 26), "甲寅 甲申 癸丑 癸未 壬子 壬午 閏 壬子 辛巳 辛亥 庚辰 庚戌 己卯 己酉"),
    CE473, CE474, CE475, CE476,
    _y(477, (1, 30), "乙酉 乙卯 甲申 甲寅 癸未 癸丑 壬午 壬子 辛巳 辛亥 辛巳 閏 庚戌 庚辰"),
    CE478, CE479, CE480, CE481, CE482,
    _y(483, (1, 24), "庚戌 庚辰 庚戌 己卯 閏 己酉 戊寅 戊申 丁丑 丁未 丙子 丙午 乙亥 乙巳"),
    CE484, CE485, CE486, CE487,
    _y(488, (1, 29), "辛巳 辛亥 庚辰 庚戌 庚辰 己酉 己卯 戊申 戊寅 閏 丁未 丁丑 丙午 丙子"),
    CE489, CE490, CE491, CE492, CE493, CE494, CE495,
    _y(496, (1, 31), "乙丑 甲午 甲子 甲午 癸亥 癸巳 壬戌 壬辰 辛酉 辛卯 庚申 閏 庚寅 己未"),
    CE497, CE498, CE499, CE500, CE501, CE502,
    _y(503, None, ""),
    _y(504, None, ""),
    _y(505, None, ""),
    _y(506, None, ""),
    _y(507, None, ""),
)
