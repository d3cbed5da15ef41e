"""元号（和暦）定義

大化（645 年）から令和までの元号を、開始日（始期）とともに列挙する。
始期はグレゴリオ暦（先発グレゴリオ暦）の年月日で、ローカル日付の 0 時を表す。

元号に対応する年の算出など業務的な表記は utils/wareki.py に委ねる。
"""

from __future__ import annotations

import bisect
import logging
from datetime import date, datetime
from enum import Enum

from koyomi.core.date_pattern import parse_pattern
from koyomi.core.instant import is_absent, to_instant, to_millis

logger = logging.getLogger(__name__)


class JapaneseEra(Enum):
    """元号。値は (始期年, 始期月, 始期日, 名称, ローマ字表記, 読み)。

    宣言順は開始日順ではない（南北朝期は南朝の後に北朝を宣言）。
    match() は開始日順に並べ直した索引を使う。
    """

    # ── 大化〜建武 ─────────────────────────────────────────────────────────
    TAIKA = (645, 7, 17, '大化', 'Taika', 'たいか')
    HAKUCHI = (650, 3, 22, '白雉', 'Hakuchi', 'はくち')
    SHUCHO = (686, 8, 14, '朱鳥', 'Shucho', 'しゅちょう')
    TAIHO = (701, 5, 3, '大宝', 'Taiho', 'たいほう')
    KEIUN = (704, 6, 16, '慶雲', 'Keiun', 'けいうん')
    WADO = (708, 2, 7, '和銅', 'Wado', 'わどう')
    REIKI = (715, 10, 3, '霊亀', 'Reiki', 'れいき')
    YORO = (717, 12, 24, '養老', 'Yoro', 'ようろう')
    JINKI = (724, 3, 3, '神亀', 'Jinki', 'じんき')
    TEMPYO = (729, 9, 2, '天平', 'Tempyo', 'てんぴょう')
    TEMPYOKAMPO = (749, 5, 4, '天平感宝', 'Tempyokampo', 'てんぴょうかんぽう')
    TEMPYOSHOHO = (749, 8, 19, '天平勝宝', 'Tempyoshoho', 'てんぴょうしょうほう')
    TEMPYOHOJI = (757, 9, 6, '天平宝字', 'Tempyohoji', 'てんぴょうほうじ')
    TEMPYOJINGO = (765, 2, 1, '天平神護', 'Tempyojingo', 'てんぴょうじんご')
    JINGOKEIUN = (767, 9, 13, '神護景雲', 'Jingokeiun', 'じんごけいうん')
    HOKI = (770, 10, 23, '宝亀', 'Hoki', 'ほうき')
    TENO = (781, 1, 30, '天応', 'Teno', 'てんおう')
    ENRYAKU = (782, 9, 30, '延暦', 'Enryaku', 'えんりゃく')
    DAIDO = (806, 6, 8, '大同', 'Daido', 'だいどう')
    KONIN = (810, 10, 20, '弘仁', 'Konin', 'こうにん')
    TENCHO = (824, 2, 8, '天長', 'Tencho', 'てんちょう')
    JOWA_834 = (834, 2, 14, '承和', 'Jowa', 'じょうわ')
    KASHO_848 = (848, 7, 16, '嘉祥', 'Kasho', 'かしょう')
    NINJU = (851, 6, 1, '仁寿', 'Ninju', 'にんじゅ')
    SAIKO = (854, 12, 23, '斉衡', 'Saiko', 'さいこう')
    TENAN = (857, 3, 20, '天安', 'Tenan', 'てんあん')
    JOGAN = (859, 5, 20, '貞観', 'Jogan', 'じょうがん')
    GANGYO = (877, 6, 1, '元慶', 'Gangyo', 'がんぎょう')
    NINNA = (885, 3, 11, '仁和', 'Ninna', 'にんな')
    KAMPYO = (889, 5, 30, '寛平', 'Kampyo', 'かんぴょう')
    SHOTAI = (898, 5, 20, '昌泰', 'Shotai', 'しょうたい')
    ENGI = (901, 8, 31, '延喜', 'Engi', 'えんぎ')
    ENCHO = (923, 5, 29, '延長', 'Encho', 'えんちょう')
    JOHEI = (931, 5, 16, '承平', 'Johei', 'じょうへい')
    TENGYO = (938, 6, 22, '天慶', 'Tengyo', 'てんぎょう')
    TENRYAKU = (947, 5, 15, '天暦', 'Tenryaku', 'てんりゃく')
    TENTOKU = (957, 11, 21, '天徳', 'Tentoku', 'てんとく')
    OWA = (961, 3, 5, '応和', 'Owa', 'おうわ')
    KOHO = (964, 8, 19, '康保', 'Koho', 'こうほう')
    ANNA = (968, 9, 8, '安和', 'Anna', 'あんな')
    TENROKU = (970, 5, 3, '天禄', 'Tenroku', 'てんろく')
    TENEN = (974, 1, 16, '天延', 'Tenen', 'てんえん')
    JOGEN_976 = (976, 8, 11, '貞元', 'Jogen', 'じょうげん')
    TENGEN = (978, 12, 31, '天元', 'Tengen', 'てんげん')
    EIKAN = (983, 5, 29, '永観', 'Eikan', 'えいかん')
    KANNA = (985, 5, 19, '寛和', 'Kanna', 'かんな')
    EIEN = (987, 5, 5, '永延', 'Eien', 'えいえん')
    EISO = (989, 9, 10, '永祚', 'Eiso', 'えいそ')
    SHORYAKU = (990, 11, 26, '正暦', 'Shoryaku', 'しょうりゃく')
    CHOTOKU = (995, 3, 25, '長徳', 'Chotoku', 'ちょうとく')
    CHOHO = (999, 2, 1, '長保', 'Choho', 'ちょうほう')
    KANKO = (1004, 8, 8, '寛弘', 'Kanko', 'かんこう')
    CHOWA = (1013, 2, 8, '長和', 'Chowa', 'ちょうわ')
    KANNIN = (1017, 5, 21, '寛仁', 'Kannin', 'かんにん')
    JIAN = (1021, 3, 17, '治安', 'Jian', 'じあん')
    MANJU = (1024, 8, 19, '万寿', 'Manju', 'まんじゅ')
    CHOGEN = (1028, 8, 18, '長元', 'Chogen', 'ちょうげん')
    CHORYAKU = (1037, 5, 9, '長暦', 'Choryaku', 'ちょうりゃく')
    CHOKYU = (1040, 12, 16, '長久', 'Chokyu', 'ちょうきゅう')
    KANTOKU = (1044, 12, 16, '寛徳', 'Kantoku', 'かんとく')
    EISHO_1046 = (1046, 5, 22, '永承', 'Eisho', 'えいしょう')
    TENKI = (1053, 2, 2, '天喜', 'Tenki', 'てんき')
    KOHEI = (1058, 9, 19, '康平', 'Kohei', 'こうへい')
    JIRYAKU = (1065, 9, 4, '治暦', 'Jiryaku', 'じりゃく')
    ENKYU = (1069, 5, 6, '延久', 'Enkyu', 'えんきゅう')
    JOHO = (1074, 9, 16, '承保', 'Joho', 'じょうほう')
    JORYAKU = (1077, 12, 5, '承暦', 'Joryaku', 'じょうりゃく')
    EIHO = (1081, 3, 22, '永保', 'Eiho', 'えいほう')
    OTOKU = (1084, 3, 15, '応徳', 'Otoku', 'おうとく')
    KANJI = (1087, 5, 11, '寛治', 'Kanji', 'かんじ')
    KAHO = (1095, 1, 23, '嘉保', 'Kaho', 'かほう')
    EICHO = (1097, 1, 3, '永長', 'Eicho', 'えいちょう')
    JOTOKU = (1097, 12, 27, '承徳', 'Jotoku', 'じょうとく')
    KOWA_1099 = (1099, 9, 15, '康和', 'Kowa', 'こうわ')
    CHOJI = (1104, 3, 8, '長治', 'Choji', 'ちょうじ')
    KASHO = (1106, 5, 13, '嘉承', 'Kasho', 'かしょう')
    TENNIN = (1108, 9, 9, '天仁', 'Tennin', 'てんにん')
    TENEI = (1110, 7, 31, '天永', 'Tenei', 'てんえい')
    EIKYU = (1113, 8, 25, '永久', 'Eikyu', 'えいきゅう')
    GENEI = (1118, 4, 25, '元永', 'Genei', 'げんえい')
    HOAN = (1120, 5, 9, '保安', 'Hoan', 'ほうあん')
    TENJI = (1124, 5, 18, '天治', 'Tenji', 'てんじ')
    DAIJI = (1126, 2, 15, '大治', 'Daiji', 'だいじ')
    TENSHO_1131 = (1131, 2, 28, '天承', 'Tensho', 'てんしょう')
    CHOSHO = (1132, 9, 21, '長承', 'Chosho', 'ちょうしょう')
    HOEN = (1135, 6, 10, '保延', 'Hoen', 'ほうえん')
    EIJI = (1141, 8, 13, '永治', 'Eiji', 'えいじ')
    KOJI_1142 = (1142, 5, 25, '康治', 'Koji', 'こうじ')
    TENYO = (1144, 3, 28, '天養', 'Tenyo', 'てんよう')
    KYUAN = (1145, 8, 12, '久安', 'Kyuan', 'きゅうあん')
    NIMPEI = (1151, 2, 14, '仁平', 'Nimpei', 'にんぺい')
    KYUJU = (1154, 12, 4, '久寿', 'Kyuju', 'きゅうじゅ')
    HOGEN = (1156, 5, 18, '保元', 'Hogen', 'ほうげん')
    HEIJI = (1159, 5, 9, '平治', 'Heiji', 'へいじ')
    EIRYAKU = (1160, 2, 18, '永暦', 'Eiryaku', 'えいりゃく')
    OHO = (1161, 9, 24, '応保', 'Oho', 'おうほう')
    CHOKAN = (1163, 5, 4, '長寛', 'Chokan', 'ちょうかん')
    EIMAN = (1165, 7, 14, '永万', 'Eiman', 'えいまん')
    NINAN = (1166, 9, 23, '仁安', 'Ninan', 'にんあん')
    KAO = (1169, 5, 6, '嘉応', 'Kao', 'かおう')
    SHOAN_1171 = (1171, 5, 27, '承安', 'Shoan', 'しょうあん')
    ANGEN = (1175, 8, 16, '安元', 'Angen', 'あんげん')
    JISHO = (1177, 8, 29, '治承', 'Jisho', 'じしょう')
    YOWA = (1181, 8, 25, '養和', 'Yowa', 'ようわ')
    JUEI = (1182, 6, 29, '寿永', 'Juei', 'じゅえい')
    GENRYAKU = (1184, 5, 27, '元暦', 'Genryaku', 'げんりゃく')
    BUNJI = (1185, 9, 9, '文治', 'Bunji', 'ぶんじ')
    KENKYU = (1190, 5, 16, '建久', 'Kenkyu', 'けんきゅう')
    SHOJI = (1199, 5, 23, '正治', 'Shoji', 'しょうじ')
    KENNIN = (1201, 3, 19, '建仁', 'Kennin', 'けんにん')
    GENKYU = (1204, 3, 23, '元久', 'Genkyu', 'げんきゅう')
    KENEI = (1206, 6, 5, '建永', 'Kenei', 'けんえい')
    JOGEN = (1207, 11, 16, '承元', 'Jogen', 'じょうげん')
    KENRYAKU = (1211, 4, 23, '建暦', 'Kenryaku', 'けんりゃく')
    KEMPO = (1214, 1, 18, '建保', 'Kempo', 'けんぽう')
    JOKYU = (1219, 5, 27, '承久', 'Jokyu', 'じょうきゅう')
    JOO_1222 = (1222, 5, 25, '貞応', 'Joo', 'じょうおう')
    GENNIN = (1224, 12, 31, '元仁', 'Gennin', 'げんにん')
    KAROKU = (1225, 5, 28, '嘉禄', 'Karoku', 'かろく')
    ANTEI = (1228, 1, 18, '安貞', 'Antei', 'あんてい')
    KANKI = (1229, 3, 31, '寛喜', 'Kanki', 'かんき')
    JOEI = (1232, 4, 23, '貞永', 'Joei', 'じょうえい')
    TEMPUKU = (1233, 5, 25, '天福', 'Tempuku', 'てんぷく')
    BUNRYAKU = (1234, 11, 27, '文暦', 'Bunryaku', 'ぶんりゃく')
    KATEI = (1235, 11, 1, '嘉禎', 'Katei', 'かてい')
    RYAKUNIN = (1238, 12, 30, '暦仁', 'Ryakunin', 'りゃくにん')
    ENO = (1239, 3, 13, '延応', 'Eno', 'えんおう')
    NINJI = (1240, 8, 5, '仁治', 'Ninji', 'にんじ')
    KANGEN = (1243, 3, 18, '寛元', 'Kangen', 'かんげん')
    HOJI = (1247, 4, 5, '宝治', 'Hoji', 'ほうじ')
    KENCHO = (1249, 5, 2, '建長', 'Kencho', 'けんちょう')
    KOGEN = (1256, 10, 24, '康元', 'Kogen', 'こうげん')
    SHOKA = (1257, 3, 31, '正嘉', 'Shoka', 'しょうか')
    SHOGEN = (1259, 4, 20, '正元', 'Shogen', 'しょうげん')
    BUNO = (1260, 5, 24, '文応', 'Buno', 'ぶんおう')
    KOCHO = (1261, 3, 22, '弘長', 'Kocho', 'こうちょう')
    BUNEI = (1264, 3, 27, '文永', 'Bunei', 'ぶんえい')
    KENJI = (1275, 5, 22, '建治', 'Kenji', 'けんじ')
    KOAN_1278 = (1278, 3, 23, '弘安', 'Koan', 'こうあん')
    SHOO = (1288, 5, 29, '正応', 'Shoo', 'しょうおう')
    EININ = (1293, 9, 6, '永仁', 'Einin', 'えいにん')
    SHOAN = (1299, 5, 25, '正安', 'Shoan', 'しょうあん')
    KENGEN = (1302, 12, 10, '乾元', 'Kengen', 'けんげん')
    KAGEN = (1303, 9, 16, '嘉元', 'Kagen', 'かげん')
    TOKUJI = (1307, 1, 18, '徳治', 'Tokuji', 'とくじ')
    ENKYO_1308 = (1308, 11, 22, '延慶', 'Enkyo', 'えんきょう')
    OCHO = (1311, 5, 17, '応長', 'Ocho', 'おうちょう')
    SHOWA_1312 = (1312, 4, 27, '正和', 'Showa', 'しょうわ')
    BUMPO = (1317, 3, 16, '文保', 'Bumpo', 'ぶんぽう')
    GENO = (1319, 5, 18, '元応', 'Geno', 'げんおう')
    GENKO_1321 = (1321, 3, 22, '元亨', 'Genko', 'げんこう')
    SHOCHU = (1324, 12, 25, '正中', 'Shochu', 'しょうちゅう')
    KARYAKU = (1326, 5, 28, '嘉暦', 'Karyaku', 'かりゃく')
    GENTOKU = (1329, 9, 22, '元徳', 'Gentoku', 'げんとく')
    GENKO = (1331, 9, 11, '元弘', 'Genko', 'げんこう')
    SHOKYO = (1332, 5, 23, '正慶', 'Shokyo', 'しょうきょう')
    KEMMU = (1334, 3, 5, '建武', 'Kemmu', 'けんむ')

    # ── 南朝（延元〜元中） ──────────────────────────────────────────────
    ENGEN = (1336, 4, 11, '延元', 'Engen', 'えんげん')
    KOKOKU = (1340, 5, 25, '興国', 'Kokoku', 'こうこく')
    SHOHEI = (1347, 1, 20, '正平', 'Shohei', 'しょうへい')
    KENTOKU = (1370, 8, 16, '建徳', 'Kentoku', 'けんとく')
    BUNCHU = (1372, 5, 1, '文中', 'Bunchu', 'ぶんちゅう')
    TENJU = (1375, 6, 26, '天授', 'Tenju', 'てんじゅ')
    KOWA = (1381, 3, 6, '弘和', 'Kowa', 'こうわ')
    GENCHU = (1384, 5, 18, '元中', 'Genchu', 'げんちゅう')

    # ── 北朝（暦応〜明徳）: 南朝の後に宣言され、開始日順に並んでいない ────
    RYAKUO = (1338, 10, 11, '暦応', 'Ryakuo', 'りゃくおう')
    KOEI = (1342, 6, 1, '康永', 'Koei', 'こうえい')
    JOWA = (1345, 11, 15, '貞和', 'Jowa', 'じょうわ')
    KANNO = (1350, 4, 4, '観応', 'Kanno', 'かんのう')
    BUNNA = (1352, 11, 4, '文和', 'Bunna', 'ぶんな')
    EMBUN = (1356, 4, 29, '延文', 'Embun', 'えんぶん')
    KOAN = (1361, 5, 4, '康安', 'Koan', 'こうあん')
    JOJI = (1362, 10, 11, '貞治', 'Joji', 'じょうじ')
    OAN = (1368, 3, 7, '応安', 'Oan', 'おうあん')
    EIWA = (1375, 3, 29, '永和', 'Eiwa', 'えいわ')
    KORYAKU = (1379, 4, 9, '康暦', 'Koryaku', 'こうりゃく')
    EITOKU = (1381, 3, 20, '永徳', 'Eitoku', 'えいとく')
    SHITOKU = (1384, 3, 19, '至徳', 'Shitoku', 'しとく')
    KAKYO = (1387, 10, 5, '嘉慶', 'Kakyo', 'かきょう')
    KOO = (1389, 3, 7, '康応', 'Koo', 'こうおう')
    MEITOKU = (1390, 4, 12, '明徳', 'Meitoku', 'めいとく')

    # ── 応永〜慶応 ─────────────────────────────────────────────────────────
    OEI = (1394, 8, 2, '応永', 'Oei', 'おうえい')
    SHOCHO = (1428, 6, 10, '正長', 'Shocho', 'しょうちょう')
    EIKYO = (1429, 10, 3, '永享', 'Eikyo', 'えいきょう')
    KAKITSU = (1441, 3, 10, '嘉吉', 'Kakitsu', 'かきつ')
    BUNAN = (1444, 2, 23, '文安', 'Bunan', 'ぶんあん')
    HOTOKU = (1449, 8, 16, '宝徳', 'Hotoku', 'ほうとく')
    KYOTOKU = (1452, 8, 10, '享徳', 'Kyotoku', 'きょうとく')
    KOSHO = (1455, 9, 6, '康正', 'Kosho', 'こうしょう')
    CHOROKU = (1457, 10, 16, '長禄', 'Choroku', 'ちょうろく')
    KANSHO = (1461, 2, 1, '寛正', 'Kansho', 'かんしょう')
    BUNSHO = (1466, 3, 14, '文正', 'Bunsho', 'ぶんしょう')
    ONIN = (1467, 4, 9, '応仁', 'Onin', 'おうにん')
    BUMMEI = (1469, 6, 8, '文明', 'Bummei', 'ぶんめい')
    CHOKYO = (1487, 8, 9, '長享', 'Chokyo', 'ちょうきょう')
    ENTOKU = (1489, 9, 16, '延徳', 'Entoku', 'えんとく')
    MEIO = (1492, 8, 12, '明応', 'Meio', 'めいおう')
    BUNKI = (1501, 3, 18, '文亀', 'Bunki', 'ぶんき')
    EISHO = (1504, 3, 16, '永正', 'Eisho', 'えいしょう')
    DAIEI = (1521, 9, 23, '大永', 'Daiei', 'だいえい')
    KYOROKU = (1528, 9, 3, '享禄', 'Kyoroku', 'きょうろく')
    TEMBUN = (1532, 8, 29, '天文', 'Tembun', 'てんぶん')
    KOJI = (1555, 11, 7, '弘治', 'Koji', 'こうじ')
    EIROKU = (1558, 3, 18, '永禄', 'Eiroku', 'えいろく')
    GENKI = (1570, 5, 27, '元亀', 'Genki', 'げんき')
    TENSHO = (1573, 8, 25, '天正', 'Tensho', 'てんしょう')
    BUNROKU = (1593, 1, 10, '文禄', 'Bunroku', 'ぶんろく')
    KEICHO = (1596, 12, 16, '慶長', 'Keicho', 'けいちょう')
    GENNA = (1615, 9, 5, '元和', 'Genna', 'げんな')
    KANEI = (1624, 4, 17, '寛永', 'Kanei', 'かんえい')
    SHOHO = (1645, 1, 13, '正保', 'Shoho', 'しょうほう')
    KEIAN = (1648, 4, 7, '慶安', 'Keian', 'けいあん')
    JOO = (1652, 10, 20, '承応', 'Joo', 'じょうおう')
    MEIREKI = (1655, 5, 18, '明暦', 'Meireki', 'めいれき')
    MANJI = (1658, 8, 21, '万治', 'Manji', 'まんじ')
    KAMBUN = (1661, 5, 23, '寛文', 'Kambun', 'かんぶん')
    EMPO = (1673, 10, 30, '延宝', 'Empo', 'えんぽう')
    TENNA = (1681, 11, 9, '天和', 'Tenna', 'てんな')
    JOKYO = (1684, 4, 5, '貞享', 'Jokyo', 'じょうきょう')
    GENROKU = (1688, 10, 23, '元禄', 'Genroku', 'げんろく')
    HOEI = (1704, 4, 16, '宝永', 'Hoei', 'ほうえい')
    SHOTOKU = (1711, 6, 11, '正徳', 'Shotoku', 'しょうとく')
    KYOHO = (1716, 8, 9, '享保', 'Kyoho', 'きょうほう')
    GEMBUN = (1736, 6, 7, '元文', 'Gembun', 'げんぶん')
    KAMPO = (1741, 4, 12, '寛保', 'Kampo', 'かんぽう')
    ENKYO = (1744, 4, 3, '延享', 'Enkyo', 'えんきょう')
    KANEN = (1748, 8, 5, '寛延', 'Kanen', 'かんえん')
    HOREKI = (1751, 12, 14, '宝暦', 'Horeki', 'ほうれき')
    MEIWA = (1764, 6, 30, '明和', 'Meiwa', 'めいわ')
    ANEI = (1772, 12, 10, '安永', 'Anei', 'あんえい')
    TEMMEI = (1781, 4, 25, '天明', 'Temmei', 'てんめい')
    KANSEI = (1789, 2, 19, '寛政', 'Kansei', 'かんせい')
    KYOWA = (1801, 3, 19, '享和', 'Kyowa', 'きょうわ')
    BUNKA = (1804, 3, 22, '文化', 'Bunka', 'ぶんか')
    BUNSEI = (1818, 5, 26, '文政', 'Bunsei', 'ぶんせい')
    TEMPO = (1831, 1, 23, '天保', 'Tempo', 'てんぽう')
    KOKA = (1845, 1, 9, '弘化', 'Koka', 'こうか')
    KAEI = (1848, 4, 1, '嘉永', 'Kaei', 'かえい')
    ANSEI = (1855, 1, 15, '安政', 'Ansei', 'あんせい')
    MANEN = (1860, 4, 8, '万延', 'Manen', 'まんえん')
    BUNKYU = (1861, 3, 29, '文久', 'Bunkyu', 'ぶんきゅう')
    GENJI = (1864, 3, 27, '元治', 'Genji', 'げんじ')
    KEIO = (1865, 5, 1, '慶応', 'Keio', 'けいおう')

    # ── 明治以降 ───────────────────────────────────────────────────────────
    MEIJI = (1868, 1, 25, '明治', 'Meiji', 'めいじ')
    TAISHO = (1912, 7, 30, '大正', 'Taisho', 'たいしょう')
    SHOWA = (1926, 12, 25, '昭和', 'Showa', 'しょうわ')
    HEISEI = (1989, 1, 8, '平成', 'Heisei', 'へいせい')
    REIWA = (2019, 5, 1, '令和', 'Reiwa', 'れいわ')

    def __init__(
        self,
        start_year: int,
        start_month: int,
        start_day: int,
        label: str,
        roman: str,
        reading: str,
    ) -> None:
        self.start_year = start_year
        self.start_month = start_month
        self.start_day = start_day
        self.label = label
        self.roman = roman
        self.reading = reading
        self.start: datetime = parse_pattern(
            f'{start_year}/{start_month}/{start_day}', 'y/M/d',
        )

    @property
    def start_time(self) -> int:
        """始期（1970/1/1 00:00:00 UTC からの経過ミリ秒）。"""
        return to_millis(self.start)

    def year_of(self, value: date | datetime | int) -> int:
        """日付（または経過ミリ秒）のこの元号における年（始期の年 = 1）。"""
        return to_instant(value).year - self.start_year + 1

    @classmethod
    def match(cls, value: date | datetime | int | None) -> JapaneseEra | None:
        """日時（または経過ミリ秒）が属する元号を返す。

        始期が value 以前である元号のうち、始期が最も遅いもの。
        最初の元号（大化）より前、または value が None の場合は None。
        """
        if is_absent(value):
            return None
        local = to_instant(value)
        idx = bisect.bisect_right(_STARTS, local) - 1
        if idx < 0:
            logger.debug('元号の範囲外の日時です: %s', local)
            return None
        return _CHRONOLOGICAL[idx]

    @classmethod
    def from_label(cls, label: str) -> JapaneseEra | None:
        """名称（'令和' など）から元号を返す。該当なしは None。"""
        for era in reversed(_CHRONOLOGICAL):
            if era.label == label:
                return era
        return None


# 開始日順の索引（import 時に 1 度だけ構築）
_CHRONOLOGICAL: tuple[JapaneseEra, ...] = tuple(
    sorted(JapaneseEra, key=lambda era: era.start),
)
_STARTS: list[datetime] = [era.start for era in _CHRONOLOGICAL]
