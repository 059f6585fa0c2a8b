# src/services/transliterator.py
# Responsibility: Renders romaji typed on a Latin keyboard as hiragana so it can reach kana-stored readings.

import re
from typing import Dict, List, Optional

from src.services.query_normalizer import LONG_VOWEL_MARK, CharacterNormalizer

# Romaji syllable -> hiragana.
# Hepburn, Kunrei and the usual IME spellings are all accepted.
ROMAJI_TO_KANA: Dict[str, str] = {
    # vowels
    "a": "あ", "i": "い", "u": "う", "e": "え", "o": "お",
    # k / g
    "ka": "か", "ki": "き", "ku": "く", "ke": "け", "ko": "こ",
    "kya": "きゃ", "kyi": "きぃ", "kyu": "きゅ", "kye": "きぇ", "kyo": "きょ",
    "ga": "が", "gi": "ぎ", "gu": "ぐ", "ge": "げ", "go": "ご",
    "gya": "ぎゃ", "gyi": "ぎぃ", "gyu": "ぎゅ", "gye": "ぎぇ", "gyo": "ぎょ",
    # s / z / j
    "sa": "さ", "si": "し", "shi": "し", "su": "す", "se": "せ", "so": "そ",
    "sha": "しゃ", "shu": "しゅ", "she": "しぇ", "sho": "しょ",
    "sya": "しゃ", "syu": "しゅ", "sye": "しぇ", "syo": "しょ",
    "za": "ざ", "zi": "じ", "zu": "ず", "ze": "ぜ", "zo": "ぞ",
    "zya": "じゃ", "zyu": "じゅ", "zye": "じぇ", "zyo": "じょ",
    "ja": "じゃ", "ji": "じ", "ju": "じゅ", "je": "じぇ", "jo": "じょ",
    "jya": "じゃ", "jyu": "じゅ", "jye": "じぇ", "jyo": "じょ",
    # t / ch / ts / d
    "ta": "た", "ti": "ち", "chi": "ち", "tu": "つ", "tsu": "つ", "te": "て", "to": "と",
    "tya": "ちゃ", "tyu": "ちゅ", "tye": "ちぇ", "tyo": "ちょ",
    "cha": "ちゃ", "chu": "ちゅ", "che": "ちぇ", "cho": "ちょ",
    "cya": "ちゃ", "cyu": "ちゅ", "cye": "ちぇ", "cyo": "ちょ",
    "tsa": "つぁ", "tsi": "つぃ", "tse": "つぇ", "tso": "つぉ",
    "thi": "てぃ", "thu": "てゅ", "twu": "とぅ",
    "da": "だ", "di": "ぢ", "du": "づ", "de": "で", "do": "ど",
    "dya": "ぢゃ", "dyu": "ぢゅ", "dye": "ぢぇ", "dyo": "ぢょ",
    "dhi": "でぃ", "dhu": "でゅ", "dwu": "どぅ",
    # n
    "na": "な", "ni": "に", "nu": "ぬ", "ne": "ね", "no": "の",
    "nya": "にゃ", "nyi": "にぃ", "nyu": "にゅ", "nye": "にぇ", "nyo": "にょ",
    # h / f / b / p
    "ha": "は", "hi": "ひ", "hu": "ふ", "fu": "ふ", "he": "へ", "ho": "ほ",
    "hya": "ひゃ", "hyi": "ひぃ", "hyu": "ひゅ", "hye": "ひぇ", "hyo": "ひょ",
    "fa": "ふぁ", "fi": "ふぃ", "fe": "ふぇ", "fo": "ふぉ",
    "fya": "ふゃ", "fyu": "ふゅ", "fyo": "ふょ",
    "ba": "ば", "bi": "び", "bu": "ぶ", "be": "べ", "bo": "ぼ",
    "bya": "びゃ", "byi": "びぃ", "byu": "びゅ", "bye": "びぇ", "byo": "びょ",
    "pa": "ぱ", "pi": "ぴ", "pu": "ぷ", "pe": "ぺ", "po": "ぽ",
    "pya": "ぴゃ", "pyi": "ぴぃ", "pyu": "ぴゅ", "pye": "ぴぇ", "pyo": "ぴょ",
    # m
    "ma": "ま", "mi": "み", "mu": "む", "me": "め", "mo": "も",
    "mya": "みゃ", "myi": "みぃ", "myu": "みゅ", "mye": "みぇ", "myo": "みょ",
    # y / r / w / v
    "ya": "や", "yu": "ゆ", "ye": "いぇ", "yo": "よ",
    "ra": "ら", "ri": "り", "ru": "る", "re": "れ", "ro": "ろ",
    "rya": "りゃ", "ryi": "りぃ", "ryu": "りゅ", "rye": "りぇ", "ryo": "りょ",
    "wa": "わ", "wi": "うぃ", "we": "うぇ", "wo": "を",
    "va": "ゔぁ", "vi": "ゔぃ", "vu": "ゔ", "ve": "ゔぇ", "vo": "ゔぉ",
    # explicit small kana
    "xa": "ぁ", "xi": "ぃ", "xu": "ぅ", "xe": "ぇ", "xo": "ぉ",
    "la": "ぁ", "li": "ぃ", "lu": "ぅ", "le": "ぇ", "lo": "ぉ",
    "xya": "ゃ", "xyu": "ゅ", "xyo": "ょ",
    "lya": "ゃ", "lyu": "ゅ", "lyo": "ょ",
    "xtu": "っ", "xtsu": "っ", "ltu": "っ", "ltsu": "っ",
    "xwa": "ゎ", "lwa": "ゎ", "xka": "ゕ", "xke": "ゖ",
}

_MAX_SYLLABLE_LENGTH = max(len(key) for key in ROMAJI_TO_KANA)

SYLLABIC_N = "ん"
SOKUON = "っ"

_VOWELS = frozenset("aeiou")
_LATIN = frozenset("abcdefghijklmnopqrstuvwxyz")

# Macron / circumflex vowels spell a long vowel. Input is lowercased by fold() first.
# Inside a word ō is read as おう (Tōkyō); at the start of a word as おお (Ōsaka, Ōta).
_WORD_INITIAL_LONG_O = re.compile(r"(?<![a-z])[ōô]")
_LONG_VOWEL_SPELLINGS = str.maketrans({
    "ā": "aa", "ī": "ii", "ū": "uu", "ē": "ee", "ō": "ou",
    "â": "aa", "î": "ii", "û": "uu", "ê": "ee", "ô": "ou",
})

# IME-style long-vowel input: "su-pa-" -> スーパー
ROMAJI_LONG_VOWEL = "-"


class RomajiTransliterator:
    """
    Converts romanized Japanese into hiragana for comparison against kana readings.

    Parsing is a greedy longest-match over ROMAJI_TO_KANA. Anything that does not
    parse (kanji, digits, punctuation, stray consonants) is copied through unchanged,
    so the function never fails and never drops input.
    """

    @staticmethod
    def to_phonetic_form(text: str) -> str:
        """
        Transliterates the romaji parts of `text` into hiragana.

        Katakana, full-width and upper-case Latin are folded first with
        CharacterNormalizer.fold, so already-Japanese input is safe to pass in.

        Examples:
            "tanaka"  -> "たなか"
            "kitte"   -> "きって"
            "toukyou" -> "とうきょう"
            "Ōsaka"   -> "おおさか"
            "su-pa-"  -> "すうぱあ"
            "タナカ"  -> "たなか"
            "田中"    -> "田中"

        Args:
            text (str): Raw or normalized text.

        Returns:
            str: Text with every parseable romaji syllable replaced by hiragana.
        """
        if not text:
            return ""

        folded = CharacterNormalizer.fold(text)
        source = _WORD_INITIAL_LONG_O.sub("oo", folded).translate(_LONG_VOWEL_SPELLINGS)

        out: List[str] = []
        pos = 0
        length = len(source)
        # True while the last output was a romaji syllable (or a mark extending one)
        extends_vowel = False

        while pos < length:
            ch = source[pos]

            if ch == ROMAJI_LONG_VOWEL and extends_vowel:
                out.append(LONG_VOWEL_MARK)
                pos += 1
                continue

            extends_vowel = False

            if ch not in _LATIN:
                out.append(ch)
                pos += 1
                continue

            # Geminate consonant: "kitte" -> きって, "matcha" -> まっちゃ
            if RomajiTransliterator._is_sokuon(source, pos):
                out.append(SOKUON)
                pos += 1
                continue

            syllable = RomajiTransliterator._match_syllable(source, pos)
            if syllable is not None:
                out.append(ROMAJI_TO_KANA[syllable])
                pos += len(syllable)
                extends_vowel = True
                continue

            if ch == "n":
                out.append(SYLLABIC_N)
                pos += RomajiTransliterator._syllabic_n_width(source, pos)
                continue

            # Hepburn writes ん as "m" before b/p: "shimbun" -> しんぶん
            if ch == "m" and source[pos + 1:pos + 2] in ("b", "p"):
                out.append(SYLLABIC_N)
                pos += 1
                continue

            out.append(ch)
            pos += 1

        # Marks typed as "-" resolve against the kana just produced
        return CharacterNormalizer.resolve_long_vowels("".join(out))

    @staticmethod
    def _match_syllable(source: str, pos: int) -> Optional[str]:
        """Returns the longest romaji syllable starting at `pos`, if any."""
        for size in range(_MAX_SYLLABLE_LENGTH, 0, -1):
            candidate = source[pos:pos + size]
            if len(candidate) == size and candidate in ROMAJI_TO_KANA:
                return candidate
        return None

    @staticmethod
    def _is_sokuon(source: str, pos: int) -> bool:
        ch = source[pos]
        if ch in _VOWELS or ch == "n":
            return False
        nxt = source[pos + 1:pos + 2]
        if nxt != ch and not (ch == "t" and nxt == "c"):
            return False
        # Only a real syllable after the doubled letter makes it a geminate
        return RomajiTransliterator._match_syllable(source, pos + 1) is not None

    @staticmethod
    def _syllabic_n_width(source: str, pos: int) -> int:
        """
        Number of characters consumed by a syllabic ん at `pos`.

        "n'" and "nn" (before a consonant or at the end) are a single ん.
        In "nn" + vowel only the first n is consumed so that "shinnichi" -> しんにち.
        """
        nxt = source[pos + 1:pos + 2]
        if nxt == "'":
            return 2
        if nxt == "n":
            after = source[pos + 2:pos + 3]
            if after in _VOWELS or after == "y":
                return 1
            return 2
        return 1
