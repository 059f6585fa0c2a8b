import pytest

from src.services.query_normalizer import CharacterNormalizer

normalize = CharacterNormalizer.normalize


def test_katakana_folds_to_hiragana():
    assert normalize("タナカ") == "たなか"
    assert normalize("ヤマダ") == "やまだ"
    assert normalize("タナカたろう") == "たなかたろう"

    # Small kana fold the same way
    assert normalize("ッ") == "っ"
    assert normalize("ャ") == "ゃ"
    assert normalize("ョ") == "ょ"


def test_width_and_case_folding():
    assert normalize("ＡＢＣ") == normalize("abc") == "abc"
    assert normalize("ａｂｃ") == "abc"
    assert normalize("０１２３４５６７８９") == "0123456789"
    assert normalize("Ａbc１23") == "abc123"
    assert normalize("HeLLo") == "hello"


def test_full_width_punctuation_is_not_folded():
    assert normalize("！") == "！"
    assert normalize("!@#$%") == "!@#$%"


def test_spaces():
    # 1. Full-width space becomes an ASCII space
    assert normalize("田中　太郎") == "田中 太郎"

    # 2. Trimming covers both kinds of space
    assert normalize("  test  ") == "test"
    assert normalize("　test　") == "test"

    # 3. Empty / whitespace-only collapse
    assert normalize("") == ""
    assert normalize("   ") == ""
    assert normalize("　　　") == ""


def test_long_vowel_mark_resolves_to_vowel():
    assert normalize("コーヒー") == "こおひい"
    assert normalize("スマート") == "すまあと"
    assert normalize("すまーと") == "すまあと"
    assert normalize("らーめん") == "らあめん"
    assert normalize("すまーとえいちあーる") == "すまあとえいちあある"

    # Small youon kana continue their own vowel
    assert normalize("ジョー") == "じょお"
    assert normalize("キュー") == "きゅう"

    # e continues as e, o as o
    assert normalize("ケーキ") == "けえき"
    assert normalize("ソース") == "そおす"

    # A run of marks keeps extending the vowel
    assert normalize("こーー") == "こおお"


def test_long_vowel_mark_without_vowel_passes_through():
    assert normalize("ー") == "ー"
    assert normalize("ーあ") == "ーあ"
    assert normalize("abー") == "abー"
    assert normalize("田ー") == "田ー"
    assert normalize("ンー") == "んー"


def test_other_characters_pass_through():
    assert normalize("田中") == "田中"
    assert normalize("株式会社ＡＢＣ") == "株式会社abc"
    assert normalize("Hello 👋 World 🌍") == "hello 👋 world 🌍"
    assert normalize("　タナカ　ＴＡＲＯタロウ　") == "たなか taroたろう"


@pytest.mark.parametrize("text", [
    "スマート",
    "　ヤマダ　タロウ　",
    "ＡＢＣ株式会社",
    "ーー",
    "コーヒーー",
    "Test123テスト",
])
def test_normalization_is_idempotent(text):
    once = normalize(text)
    assert normalize(once) == once


def test_fold_does_not_trim():
    assert CharacterNormalizer.fold(" タナカ ") == " たなか "
    assert CharacterNormalizer.fold("") == ""


def test_accented_latin_is_lowercased():
    assert normalize("MÜLLER") == "müller"
    assert normalize("ÉCOLE") == normalize("école") == "école"
    assert normalize("ＭÜＬＬＥＲ") == "müller"
