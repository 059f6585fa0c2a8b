from src.services.transliterator import RomajiTransliterator

to_kana = RomajiTransliterator.to_phonetic_form


def test_basic_syllables():
    assert to_kana("tanaka") == "たなか"
    assert to_kana("yamada") == "やまだ"
    assert to_kana("satou") == "さとう"
    assert to_kana("tanakatarou") == "たなかたろう"
    assert to_kana("yamadahanako") == "やまだはなこ"


def test_hepburn_and_kunrei_spellings():
    assert to_kana("shi") == to_kana("si") == "し"
    assert to_kana("chi") == to_kana("ti") == "ち"
    assert to_kana("tsu") == to_kana("tu") == "つ"
    assert to_kana("fu") == to_kana("hu") == "ふ"
    assert to_kana("ji") == to_kana("zi") == "じ"


def test_sokuon():
    assert to_kana("kitte") == "きって"
    assert to_kana("motto") == "もっと"
    assert to_kana("matcha") == "まっちゃ"
    assert to_kana("gakkou") == "がっこう"


def test_syllabic_n():
    assert to_kana("kantan") == "かんたん"
    assert to_kana("shinnichi") == "しんにち"
    assert to_kana("kon'ya") == "こんや"
    assert to_kana("kantann") == "かんたん"
    assert to_kana("hon") == "ほん"
    assert to_kana("shimbun") == "しんぶん"


def test_youon():
    assert to_kana("sha") == "しゃ"
    assert to_kana("kyo") == "きょ"
    assert to_kana("ryokan") == "りょかん"
    assert to_kana("jo") == "じょ"


def test_long_vowels_are_spelled_out():
    assert to_kana("toukyou") == "とうきょう"
    assert to_kana("oosaka") == "おおさか"
    assert to_kana("tōkyō") == "とうきょう"
    assert to_kana("Ōsaka") == "おおさか"
    assert to_kana("ōta") == "おおた"


def test_folds_katakana_width_and_case():
    assert to_kana("タナカ") == "たなか"
    assert to_kana("コーヒー") == "こおひい"
    assert to_kana("TANAKA") == "たなか"
    assert to_kana("ｔａｎａｋａ") == "たなか"


def test_passthrough():
    # 1. Kanji and kana are kept
    assert to_kana("田中") == "田中"
    assert to_kana("株式会社") == "株式会社"
    assert to_kana("たなか") == "たなか"

    # 2. Digits, spaces and punctuation are kept
    assert to_kana("") == ""
    assert to_kana(" ") == " "
    assert to_kana("123") == "123"
    assert to_kana("!@#$%") == "!@#$%"

    # 3. Latin that does not parse is copied letter by letter
    assert to_kana("xyz") == "xyz"
    assert to_kana("smith") == "sみth"


def test_mixed_script_input():
    assert to_kana("田中tanaka") == "田中たなか"
    assert to_kana("tanaka 太郎") == "たなか 太郎"


def test_hyphen_after_syllable_is_long_vowel_mark():
    # 1. Resolved the same way as a typed ー
    assert to_kana("su-pa-") == "すうぱあ"
    assert to_kana("ko-hi-") == to_kana("コーヒー") == "こおひい"
    assert to_kana("ra--men") == "らああめん"

    # 2. Not after a syllable, the hyphen is kept
    assert to_kana("123-4") == "123-4"
    assert to_kana("-a") == "-あ"
    assert to_kana("hon-") == "ほん-"
