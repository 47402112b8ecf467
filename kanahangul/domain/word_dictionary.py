from __future__ import annotations

"""Word dictionary: whole-word replacements applied before kana mapping.

Keys are matched longest first, so a station name such as "新宿駅" is
replaced as a unit before "新宿" (or the single kanji) gets a chance.
"""

from types import MappingProxyType
from typing import Final, Mapping

_WORDS: Final[dict[str, str]] = {
    # Sentence endings and particles
    "です！": "입니다!",
    "です。": "입니다.",
    "です": "",
    "ます！": "합니다!",
    "ます。": "합니다.",
    "ます": "",
    "の綺麗な": " 깨끗한",
    "の施設": " 시설",
    "の": " ",
    "～": "~",
    # Tokyo / Kanagawa / Chiba / Saitama areas and stations
    "代々木": "요요기",
    "代々木競技場": "요요기 경기장",
    "原宿": "하라주쿠",
    "原宿駅": "하라주쿠역",
    "渋谷": "시부야",
    "渋谷駅": "시부야역",
    "新宿": "신주쿠",
    "新宿駅": "신주쿠역",
    "池袋": "이케부쿠로",
    "池袋駅": "이케부쿠로역",
    "銀座": "긴자",
    "銀座駅": "긴자역",
    "東京": "도쿄",
    "東京駅": "도쿄역",
    "品川": "시나가와",
    "品川駅": "시나가와역",
    "目黒": "메구로",
    "目黒駅": "메구로역",
    "恵比寿": "에비스",
    "恵比寿駅": "에비스역",
    "秋葉原": "아키하바라",
    "秋葉原駅": "아키하바라역",
    "上野": "우에노",
    "上野駅": "우에노역",
    "浅草": "아사쿠사",
    "浅草駅": "아사쿠사역",
    "六本木": "롯폰기",
    "六本木駅": "롯폰기역",
    "赤坂": "아카사카",
    "赤坂駅": "아카사카역",
    "麻布": "아자부",
    "麻布十番": "아자부주반",
    "台場": "다이바",
    "お台場": "오다이바",
    "錦糸町": "킨시초",
    "蒲田": "카마타",
    "大井町": "오이마치",
    "五反田": "고탄다",
    "田町": "다마치",
    "浜松町": "하마마츠초",
    "高田馬場": "다카다노바바",
    "新大久保": "신오쿠보",
    "中野": "나카노",
    "荻窪": "오기쿠보",
    "吉祥寺": "키치조지",
    "三鷹": "미타카",
    "調布": "초후",
    "府中": "후추",
    "町田": "마치다",
    "立川": "타치카와",
    "八王子": "하치오지",
    "三軒茶屋": "산겐자야",
    "下北沢": "시모키타자와",
    "中目黒": "나카메구로",
    "自由が丘": "지유가오카",
    "二子玉川": "후타코타마가와",
    "武蔵小杉": "무사시코스기",
    "溝の口": "미조노쿠치",
    "たまプラーザ": "타마프라자",
    "日吉": "히요시",
    "菊名": "키쿠나",
    "綱島": "츠나시마",
    "大倉山": "오쿠라야마",
    "白楽": "하쿠라쿠",
    "横浜": "요코하마",
    "横浜駅": "요코하마역",
    "川崎": "카와사키",
    "川崎駅": "카와사키역",
    "鶴見": "츠루미",
    "戸塚": "토츠카",
    "藤沢": "후지사와",
    "大船": "오후나",
    "鎌倉": "카마쿠라",
    "江ノ島": "에노시마",
    "茅ヶ崎": "치가사키",
    "平塚": "히라츠카",
    "小田原": "오다와라",
    "厚木": "아츠기",
    "海老名": "에비나",
    "相模大野": "사가미오노",
    "橋本": "하시모토",
    "落合": "오치아이",
    "落合南長崎": "오치아이 미나미나가사키",
    "落合南長崎駅": "오치아이 미나미나가사키역",
    "南長崎": "미나미나가사키",
    "日本橋": "니혼바시",
    "水道橋": "스이도바시",
    "飯田橋": "이이다바시",
    "神楽坂": "카구라자카",
    "後楽園": "코라쿠엔",
    "巣鴨": "스가모",
    "駒込": "코마고메",
    "西日暮里": "니시닛포리",
    "日暮里": "닛포리",
    "北千住": "키타센주",
    "南千住": "미나미센주",
    "亀戸": "카메이도",
    "両国": "료고쿠",
    "門前仲町": "몬젠나카초",
    "豊洲": "토요스",
    "有明": "아리아케",
    "新木場": "신키바",
    "葛西": "카사이",
    "西葛西": "니시카사이",
    "船橋": "후나바시",
    "津田沼": "츠다누마",
    "千葉": "치바",
    "幕張": "마쿠하리",
    "海浜幕張": "카이힌마쿠하리",
    "柏": "카시와",
    "松戸": "마츠도",
    "取手": "토리데",
    "大宮": "오미야",
    "浦和": "우라와",
    "川口": "카와구치",
    "草加": "소카",
    "越谷": "코시가야",
    "春日部": "카스카베",
    "所沢": "토코로자와",
    "川越": "카와고에",
    # Osaka
    "大阪": "오사카",
    "大阪駅": "오사카역",
    "梅田": "우메다",
    "難波": "난바",
    "心斎橋": "신사이바시",
    "天王寺": "텐노지",
    "京橋": "쿄바시",
    "新大阪": "신오사카",
    "淀屋橋": "요도야바시",
    "本町": "혼마치",
    # Other cities
    "名古屋": "나고야",
    "京都": "교토",
    "神戸": "고베",
    "福岡": "후쿠오카",
    "札幌": "삿포로",
    "仙台": "센다이",
    "広島": "히로시마",
    "北九州": "키타큐슈",
    "那覇": "나하",
    # Venues and facilities
    "競技場": "경기장",
    "体育館": "체육관",
    "運動場": "운동장",
    "総合運動場": "종합운동장",
    "スタジアム": "스타디움",
    "アリーナ": "아레나",
    "ドーム": "돔",
    "センター": "센터",
    "パーク": "파크",
    "公園": "공원",
    "広場": "광장",
    # Access
    "駅徒歩": "역 도보",
    "徒歩": "도보",
    "分": "분",
    "秒": "초",
    "直結": "직결",
    "駅直結": "역 직결",
    "出口": "출구",
    "北口": "북쪽출구",
    "南口": "남쪽출구",
    "東口": "동쪽출구",
    "西口": "서쪽출구",
    "中央口": "중앙출구",
    # Loanwords
    "ボンフィン": "본핀",
    "フットサル": "풋살",
    "サッカー": "축구",
    "スポーツ": "스포츠",
    "コート": "코트",
    "アクセス": "접근성",
    "サービス": "서비스",
    "ステージ": "스테이지",
    "カテゴリー": "카테고리",
    "エンジョイ": "엔조이",
    "ミックス": "믹스",
    "キャンペーン": "캠페인",
    "コサル": "개인풋살",
    "アスタ": "아스타",
    "ビギナー": "비기너",
    "レベル": "레벨",
    "インドア": "인도어",
    "アウトドア": "아웃도어",
    # Set phrases
    "アクセス抜群": "접근성 최고",
    "綺麗な施設": "깨끗한 시설",
    "個人参加": "개인참가",
    "屋内コート": "실내 코트",
    "完全室内": "완전 실내",
    "初心者歓迎": "초보자 환영",
    "経験者向け": "유경험자 대상",
    "朝イチ": "아침 첫 타임",
    "個サル": "개인풋살",
    # Facility type
    "屋外": "야외",
    "屋上": "옥상",
    "室内": "실내",
    "屋内": "실내",
    # Level and participants
    "初心者": "초보자",
    "経験者": "경험자",
    "中級": "중급",
    "上級": "상급",
    "初級": "초급",
    "女性": "여성",
    "男性": "남성",
    # Status and descriptors
    "中止": "중지",
    "開催": "개최",
    "割引": "할인",
    "募集": "모집",
    "綺麗": "깨끗한",
    "抜群": "최고",
}

_PREFECTURES: Final[dict[str, str]] = {
    "北海道": "홋카이도",
    "青森県": "아오모리현", "岩手県": "이와테현", "宮城県": "미야기현",
    "秋田県": "아키타현", "山形県": "야마가타현", "福島県": "후쿠시마현",
    "茨城県": "이바라키현", "栃木県": "도치기현", "群馬県": "군마현",
    "埼玉県": "사이타마현", "千葉県": "치바현", "東京都": "도쿄도",
    "神奈川県": "가나가와현",
    "新潟県": "니이가타현", "富山県": "토야마현", "石川県": "이시카와현",
    "福井県": "후쿠이현", "山梨県": "야마나시현", "長野県": "나가노현",
    "岐阜県": "기후현", "静岡県": "시즈오카현", "愛知県": "아이치현",
    "三重県": "미에현", "滋賀県": "시가현", "京都府": "교토부",
    "大阪府": "오사카부", "兵庫県": "효고현", "奈良県": "나라현",
    "和歌山県": "와카야마현",
    "鳥取県": "돗토리현", "島根県": "시마네현", "岡山県": "오카야마현",
    "広島県": "히로시마현", "山口県": "야마구치현",
    "徳島県": "도쿠시마현", "香川県": "카가와현", "愛媛県": "에히메현",
    "高知県": "코치현",
    "福岡県": "후쿠오카현", "佐賀県": "사가현", "長崎県": "나가사키현",
    "熊本県": "구마모토현", "大分県": "오이타현", "宮崎県": "미야자키현",
    "鹿児島県": "가고시마현", "沖縄県": "오키나와현",
    # Not a prefecture, but "西" + "東京" would otherwise read as 서도쿄
    "西東京": "니시도쿄",
}

WORD_MAP: Final[Mapping[str, str]] = MappingProxyType({**_WORDS, **_PREFECTURES})

# sorted() is stable, so keys of equal length keep their table order
WORD_MAP_KEYS: Final[tuple[str, ...]] = tuple(sorted(WORD_MAP, key=len, reverse=True))


def apply_word_dictionary(text: str) -> str:
    """Replace every occurrence of each dictionary key, longest key first.

    Each key is applied to the output of the previous one, so a longer key
    always sees the text before any of its substrings have been replaced.
    """
    if not text:
        return ""

    result = text
    for key in WORD_MAP_KEYS:
        if key in result:
            result = result.replace(key, WORD_MAP[key])
    return result
