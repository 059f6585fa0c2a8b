# src/services/query_normalizer.py
# Responsibility: Folds width, case and kana script so that the same name typed in different scripts compares equal.

from typing import Dict, List

import jaconv

# Full-width digits/letters -> ASCII, ideographic space -> space.
# Full-width punctuation is intentionally left alone.
_WIDTH_TABLE = str.maketrans(
    "０１２３４５６７８９"
    "ＡＢＣＤＥＦＧＨＩＪＫＬＭＮＯＰＱＲＳＴＵＶＷＸＹＺ"
    "ａｂｃｄｅｆｇｈｉｊｋｌｍｎｏｐｑｒｓｔｕｖｗｘｙｚ"
    "　",
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    " ",
)

LONG_VOWEL_MARK = "ー"

# Kana grouped by the vowel a following long-vowel mark continues.
# ん and っ carry no vowel, so a mark after them is left as is.
_VOWEL_ROWS = {
    "あ": "ぁあかがさざただなはばぱまゃやらゎわゕヷ",
    "い": "ぃいきぎしじちぢにひびぴみりゐヸ",
    "う": "ぅうくぐすずつづぬふぶぷむゅゆるゔ",
    "え": "ぇえけげせぜてでねへべぺめれゑゖヹ",
    "お": "ぉおこごそぞとどのほぼぽもょよろをヺ",
}


def _build_vowel_table(rows: Dict[str, str]) -> Dict[str, str]:
    table = {}
    for vowel, kana in rows.items():
        for ch in kana:
            table[ch] = vowel
    return table


_VOWEL_OF = _build_vowel_table(_VOWEL_ROWS)


class CharacterNormalizer:
    """
    Responsible for reducing a string to its canonical search form.

    Full-width and half-width Latin, upper and lower case, katakana and hiragana
    all collapse onto one representation. Kanji and everything else is kept as-is,
    since no reliable reading can be derived from it.
    """

    @staticmethod
    def normalize(text: str) -> str:
        """
        Normalizes a query or a field value for comparison.

        Steps:
        1. Full-width space -> ASCII space, then trim.
        2. Full-width letters/digits -> ASCII.
        3. Lowercasing of Latin letters.
        4. Katakana -> hiragana, with the long-vowel mark resolved to its vowel.

        Args:
            text (str): Raw text.

        Returns:
            str: Normalized text ("" for empty or whitespace-only input).
        """
        if not text:
            return ""

        # 1. Trim (full-width space is folded first so it trims too)
        trimmed = text.replace("　", " ").strip()
        if not trimmed:
            return ""

        # 2-4. Width, case and kana folding
        return CharacterNormalizer.fold(trimmed)

    @staticmethod
    def fold(text: str) -> str:
        """
        Applies the width, case and kana folding without trimming.

        Args:
            text (str): Raw text.

        Returns:
            str: Folded text.
        """
        if not text:
            return ""

        # str.lower() covers accented Latin (Ü, É) as well as ASCII
        folded = jaconv.kata2hira(text.translate(_WIDTH_TABLE).lower())
        return CharacterNormalizer.resolve_long_vowels(folded)

    @staticmethod
    def resolve_long_vowels(text: str) -> str:
        """
        Replaces each long-vowel mark with the vowel of the mora before it.

        e.g. "すまーと" -> "すまあと", "こーひー" -> "こおひい".
        A mark with no kana vowel before it (start of text, after Latin or kanji,
        after ん/っ) is kept unchanged.
        """
        if LONG_VOWEL_MARK not in text:
            return text

        out: List[str] = []
        for ch in text:
            if ch == LONG_VOWEL_MARK and out:
                # Resolution looks at the output so a run of marks keeps extending
                out.append(_VOWEL_OF.get(out[-1], ch))
            else:
                out.append(ch)
        return "".join(out)
