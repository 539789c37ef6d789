from korvocab.input.tokenizer import clean_word, strip_particle, tokenize


def test_clean_word_keeps_only_hangul():
    assert clean_word("가방!") == "가방"
    assert clean_word("(학교)") == "학교"
    assert clean_word("abc123") == ""


def test_clean_word_keeps_jamo_blocks():
    # Compatibility jamo and conjoining jamo are Hangul too
    assert clean_word("ㅋㅋ-") == "ㅋㅋ"
    assert clean_word("가") == "가"


def test_tokenize_strips_particle():
    assert tokenize("사람이") == ["사람"]


def test_tokenize_keeps_word_without_particle():
    assert tokenize("사람") == ["사람"]


def test_tokenize_drops_single_character():
    assert tokenize("가") == []


def test_tokenize_empty_and_non_korean():
    assert tokenize("") == []
    assert tokenize("Hello, world! 123") == []


def test_tokenize_keeps_order_and_duplicates():
    text = "학교에 가요. 학교를 좋아해요. Bag 가방"
    assert tokenize(text) == ["학교", "가요", "학교", "좋아해요", "가방"]


def test_strip_particle_first_match_wins():
    # 로 comes before 으로 in the particle list
    assert strip_particle("학교으로") == ["학교으"]
    assert strip_particle("집으로") == ["집으"]


def test_strip_particle_short_stem_yields_nothing():
    # 나가 ends with 가 but the stem 나 is too short
    assert strip_particle("나가") == []


def test_strip_particle_word_equal_to_particle_is_kept():
    assert strip_particle("에서") == ["에서"]


def test_strip_particle_single_character():
    assert strip_particle("집") == []
