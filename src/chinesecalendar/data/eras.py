"""
Era spans in registration order.

Each span names its year table and the label of the era's 元年 in that
table. Reverse lookups list concurrent eras in this order.
"""

from __future__ import annotations

from typing import Dict, Tuple

from ..engines.registry import EraDef

_e = EraDef

ERAS: Tuple[EraDef, ...] = (
    _e("秦孝文王", "bce", -250),
    _e("秦莊襄王", "bce", -249),
    _e("秦王政", "bce", -246),
    _e("秦始皇", "bce", -246, start="二十六年"),
    _e("秦二世", "bce", -209),
    _e("漢高祖", "bce", -206),
    _e("漢惠帝", "bce", -194),
    _e("漢高后", "bce", -187),
    _e("漢文帝", "bce", -179),
    _e("漢文帝後", "bce", -163),
    _e("漢景帝", "bce", -156),
    _e("漢景帝中", "bce", -149),
    _e("漢景帝後", "bce", -143),
    _e("漢武帝建元", "bce", -140),
    _e("漢武帝元光", "bce", -134),
    _e("漢武帝元朔", "bce", -128),
    _e("漢武帝元狩", "bce", -122),
    _e("漢武帝元鼎", "bce", -116),
    _e("漢武帝元封", "bce", -110),
    _e("漢武帝太初", "bce", -104),
    _e("漢武帝天漢", "bce", -99),
    _e("漢武帝太始", "bce", -95),
    _e("漢武帝征和", "bce", -91),
    _e("漢武帝後元", "bce", -87),
    _e("漢昭帝始元", "bce", -85),
    _e("漢昭帝元鳳", "bce", -79, start="八月"),
    _e("漢昭帝元平", "bce", -73),
    _e("漢宣帝本始", "bce", -72),
    _e("漢宣帝地節", "bce", -68),
    _e("漢宣帝元康", "bce", -64),
    _e("漢宣帝神爵", "bce", -60, start="三月"),
    _e("漢宣帝五鳳", "bce", -56),
    _e("漢宣帝甘露", "bce", -52),
    _e("漢宣帝黃龍", "bce", -48),
    _e("漢元帝初元", "bce", -47),
    _e("漢元帝永光", "bce", -42),
    _e("漢元帝建昭", "bce", -37),
    _e("漢元帝竟寧", "bce", -32),
    _e("漢成帝建始", "bce", -31),
    _e("漢成帝河平", "bce", -27, start="三月"),
    _e("漢成帝陽朔", "bce", -23),
    _e("漢成帝鴻嘉", "bce", -19),
    _e("漢成帝永始", "bce", -15),
    _e("漢成帝元延", "bce", -11),
    _e("漢成帝綏和", "bce", -7),
    _e("漢哀帝建平", "bce", -5),
    _e("漢哀帝太初元將", "bce", -4, start="六月"),
    _e("漢哀帝建平", "bce", -5, start="二年八月"),
    _e("漢哀帝元壽", "bce", -1),
    _e("漢平帝元始", "ce", 1, aliases=("漢平帝",)),
    _e("漢孺子嬰居攝", "ce", 6),
    _e("漢孺子嬰初始", "ce", 8, start="十一月"),
    _e("新王莽始建國", "ce", 9),
    _e("新王莽天鳳", "ce", 14),
    _e("新王莽地皇", "ce", 20, end="四年九月"),
    _e("劉玄更始", "ce", 23, start="二月", end="三年九月"),
    _e("漢光武帝建武", "ce", 25, start="六月"),
    _e("漢光武帝建武中元", "ce", 56, start="四月", aliases=("漢光武帝中元",)),
    _e("漢明帝永平", "ce", 58),
    _e("漢章帝建初", "ce", 76),
    _e("漢章帝元和", "ce", 84, start="八月"),
    _e("漢章帝章和", "ce", 87, start="七月"),
    _e("漢和帝永元", "ce", 89),
    _e("漢和帝元興", "ce", 105, start="四月"),
    _e("漢殤帝延平", "ce", 106, aliases=("漢殤帝",)),
    _e("漢安帝永初", "ce", 107),
    _e("漢安帝元初", "ce", 114),
    _e("漢安帝永寧", "ce", 120, start="四月"),
    _e("漢安帝建光", "ce", 121, start="七月"),
    _e("漢安帝延光", "ce", 122, start="三月"),
    _e("漢順帝永建", "ce", 126),
    _e("漢順帝陽嘉", "ce", 132, start="三月"),
    _e("漢順帝永和", "ce", 136),
    _e("漢順帝漢安", "ce", 142),
    _e("漢順帝建康", "ce", 144, start="四月"),
    _e("漢沖帝永憙", "ce", 145, aliases=("漢沖帝",)),
    _e("漢質帝本初", "ce", 146, aliases=("漢質帝",)),
    _e("漢桓帝建和", "ce", 147),
    _e("漢桓帝和平", "ce", 150),
    _e("漢桓帝元嘉", "ce", 151),
    _e("漢桓帝永興", "ce", 153, start="五月"),
    _e("漢桓帝永壽", "ce", 155),
    _e("漢桓帝延熹", "ce", 158, start="六月"),
    _e("漢桓帝永康", "ce", 167, start="六月"),
    _e("漢靈帝建寧", "ce", 168),
    _e("漢靈帝熹平", "ce", 172, start="五月"),
    _e("漢靈帝光和", "ce", 178, start="三月"),
    _e("漢靈帝中平", "ce", 184, start="十二月"),
    _e("漢少帝光熹", "ce", 189, start="四月"),
    _e("漢少帝昭寧", "ce", 189, start="八月"),
    _e("漢獻帝永漢", "ce", 189, start="九月"),
    _e("漢獻帝中平", "ce", 184, start="六年十二月"),
    _e("漢獻帝初平", "ce", 190),
    _e("漢獻帝興平", "ce", 194),
    _e("漢獻帝建安", "ce", 196),
    _e("漢獻帝延康", "ce", 220, start="三月"),
    _e("魏文帝黃初", "ce", 220, start="十月", aliases=("魏文帝",)),
    _e("魏明帝太和", "ce", 227),
    _e("魏明帝青龍", "ce", 233, start="二月"),
    _e("魏明帝景初", "ce", 237, start="四月"),
    _e("魏齊王芳正始", "ce", 240),
    _e("魏齊王芳嘉平", "ce", 249, start="四月"),
    _e("魏高貴鄉公正元", "ce", 254, start="十月"),
    _e("魏高貴鄉公甘露", "ce", 256, start="六月"),
    _e("魏陳留王景元", "ce", 260, start="六月"),
    _e("魏陳留王咸熙", "ce", 264, start="五月", next_era="晉武帝泰始"),
    _e("蜀昭烈帝章武", "ce", 221, start="四月", prev_era="魏文帝黃初", aliases=("蜀昭烈帝",)),
    _e("蜀後主建興", "shu", 223, start="五月"),
    _e("蜀後主延熙", "shu", 238),
    _e("蜀後主景耀", "shu", 258),
    _e("蜀後主炎興", "shu", 263, start="八月", end="十一月", next_era="魏陳留王景元"),
    _e("吳大帝黃武", "wu", 222, start="十月", prev_era="魏文帝黃初"),
    _e("吳大帝黃龍", "wu", 229, start="四月"),
    _e("吳大帝嘉禾", "wu", 232),
    _e("吳大帝赤烏", "wu", 238, start="八月"),
    _e("吳大帝太元", "wu", 251, start="五月"),
    _e("吳大帝神鳳", "wu", 252, start="二月"),
    _e("吳會稽王建興", "wu", 252, start="四月"),
    _e("吳會稽王五鳳", "wu", 254),
    _e("吳會稽王太平", "wu", 256, start="十月"),
    _e("吳景帝永安", "wu", 258, start="十月"),
    _e("吳末帝元興", "wu", 264, start="七月"),
    _e("吳末帝甘露", "wu", 265, start="四月"),
    _e("吳末帝寶鼎", "wu", 266, start="八月"),
    _e("吳末帝建衡", "wu", 269, start="十月"),
    _e("吳末帝鳳凰", "wu", 272),
    _e("吳末帝天冊", "wu", 275),
    _e("吳末帝天璽", "wu", 276, start="七月"),
    _e("吳末帝天紀", "wu", 277, end="四年三月", next_era="晉武帝太康"),
    _e("晉武帝泰始", "ce", 265, start="十二月", prev_era="魏陳留王咸熙"),
    _e("晉武帝咸寧", "ce", 275),
    _e("晉武帝太康", "ce", 280, start="四月"),
    _e("晉武帝太熙", "ce", 290),
    _e("晉惠帝永熙", "ce", 290, start="四月"),
    _e("晉惠帝永平", "ce", 291),
    _e("晉惠帝元康", "ce", 291, start="三月"),
    _e("晉惠帝永康", "ce", 300),
    _e("晉惠帝永寧", "ce", 301, start="四月"),
    _e("晉惠帝太安", "ce", 302, start="十二月"),
    _e("晉惠帝永安", "ce", 304),
    _e("晉惠帝建武", "ce", 304, start="七月"),
    _e("晉惠帝永興", "ce", 304, start="十二月"),
    _e("晉惠帝光熙", "ce", 306, start="六月"),
    _e("晉懷帝永嘉", "ce", 307, aliases=("晉懷帝",)),
    _e("晉愍帝建興", "ce", 313, start="四月", aliases=("晉愍帝",)),
    _e("晉元帝建武", "ce", 317, start="三月"),
    _e("晉元帝大興", "ce", 318, start="三月"),
    _e("晉元帝永昌", "ce", 322),
    _e("晉明帝太寧", "ce", 323, start="三月", aliases=("晉明帝",)),
    _e("晉成帝咸和", "ce", 326, start="二月"),
    _e("晉成帝咸康", "ce", 335),
    _e("晉康帝建元", "ce", 343, aliases=("晉康帝",)),
    _e("晉穆帝永和", "ce", 345),
    _e("晉穆帝昇平", "ce", 357),
    _e("晉哀帝隆和", "ce", 362),
    _e("晉哀帝興寧", "ce", 363, start="二月"),
    _e("晉廢帝太和", "ce", 366, aliases=("晉廢帝",)),
    _e("晉簡文帝咸安", "ce", 371, start="十一月"),
    _e("晉孝武帝寧康", "ce", 373),
    _e("晉孝武帝太元", "ce", 376),
    _e("晉安帝隆安", "ce", 397),
    _e("晉安帝元興", "ce", 402),
    _e("晉安帝義熙", "ce", 405),
    _e("晉恭帝元熙", "ce", 419, aliases=("晉恭帝",)),
    _e("宋武帝永初", "ce", 420, start="六月"),
    _e("宋少帝景平", "ce", 423, aliases=("宋少帝",)),
    _e("宋文帝元嘉", "ce", 424, start="八月"),
    _e("宋孝武帝孝建", "ce", 454),
    _e("宋孝武帝大明", "ce", 457),
    _e("宋前廢帝永光", "ce", 465),
    _e("宋前廢帝景和", "ce", 465, start="八月"),
    _e("宋明帝泰始", "ce", 465, start="十二月"),
    _e("宋明帝泰豫", "ce", 472),
    _e("宋後廢帝元徽", "ce", 473, aliases=("宋後廢帝",)),
    _e("宋順帝昇明", "ce", 477, start="七月", aliases=("宋順帝",)),
    _e("齊高帝建元", "ce", 479, start="四月", aliases=("齊高帝",)),
    _e("齊武帝永明", "ce", 483, aliases=("齊武帝",)),
    _e("齊鬱陵王隆昌", "ce", 494, aliases=("齊鬱陵王",)),
    _e("齊海陵王延興", "ce", 494, start="七月", aliases=("齊海陵王",)),
    _e("齊明帝建武", "ce", 494, start="十月"),
    _e("齊明帝永泰", "ce", 498, start="四月"),
    _e("齊東昏侯永元", "ce", 499, aliases=("齊東昏侯",)),
    _e("齊和帝中興", "ce", 501, start="三月", end="十二月", aliases=("齊和帝",)),
    _e("北魏道武帝登國", "ce", 386, prev_era="晉孝武帝太元"),
    _e("北魏道武帝皇始", "ce", 396, start="七月"),
    _e("北魏道武帝天興", "ce", 398, start="十二月"),
    _e("北魏道武帝天賜", "ce", 404, start="十月"),
    _e("北魏明元帝永興", "ce", 409, start="閏十月"),
    _e("北魏明元帝神瑞", "ce", 414),
    _e("北魏明元帝泰常", "ce", 416, start="四月"),
    _e("北魏太武帝始光", "ce", 424),
    _e("北魏太武帝神䴥", "ce", 428, start="二月"),
    _e("北魏太武帝延和", "ce", 432),
    _e("北魏太武帝太延", "ce", 435),
    _e("北魏太武帝太平真君", "beiwei", 440, start="六月"),
    _e("北魏太武帝正平", "beiwei", 451, start="六月"),
    _e("北魏南安王承平", "beiwei", 452, start="三月"),
    _e("北魏文成帝興安", "beiwei", 452, start="十月"),
    _e("北魏文成帝興光", "beiwei", 454, start="七月"),
    _e("北魏文成帝太安", "beiwei", 455, start="六月"),
    _e("北魏文成帝和平", "beiwei", 460),
    _e("北魏獻文帝天安", "beiwei", 466),
    _e("北魏獻文帝皇興", "beiwei", 467, start="八月"),
    _e("北魏孝文帝延興", "beiwei", 471, start="八月"),
    _e("北魏孝文帝承明", "beiwei", 476, start="六月"),
    _e("北魏孝文帝太和", "beiwei", 477),
    _e("北魏宣武帝景明", "beiwei", 500, end="八月"),
)

# 元壽 has no third year; its twelfth month is followed by 元始元年.
ROLLOVERS: Dict[Tuple[str, str], Tuple[str, str]] = {
    ("漢哀帝元壽", "三年"): ("漢平帝元始", "一年"),
}
