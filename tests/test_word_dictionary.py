from kanahangul.domain.word_dictionary import WORD_MAP, WORD_MAP_KEYS, apply_word_dictionary


def test_keys_sorted_longest_first():
    lengths = [len(k) for k in WORD_MAP_KEYS]
    assert lengths == sorted(lengths, reverse=True)
    assert set(WORD_MAP_KEYS) == set(WORD_MAP)


def test_prefectures_present():
    assert WORD_MAP["東京都"] == "도쿄도"
    assert WORD_MAP["神奈川県"] == "가나가와현"
    assert WORD_MAP["北海道"] == "홋카이도"
    prefectures = [k for k in WORD_MAP if k == "北海道" or k[-1] in "都府県"]
    assert len(prefectures) >= 47


def test_longer_key_wins_over_prefix():
    assert apply_word_dictionary("新宿駅") == "신주쿠역"
    assert apply_word_dictionary("落合南長崎駅") == "오치아이 미나미나가사키역"
    assert apply_word_dictionary("東京都") == "도쿄도"


def test_all_occurrences_replaced():
    assert apply_word_dictionary("新宿と新宿") == "신주쿠と신주쿠"


def test_particles():
    assert apply_word_dictionary("池袋の施設") == "이케부쿠로 시설"
    assert apply_word_dictionary("開催です！") == "개최입니다!"


def test_unmatched_text_left_alone():
    assert apply_word_dictionary("") == ""
    assert apply_word_dictionary("hello 123") == "hello 123"


def test_shiga_reading_uses_corrected_value():
    assert WORD_MAP["滋賀県"] == "시가현"
    assert apply_word_dictionary("滋賀県大津市") == "시가현大津市"
