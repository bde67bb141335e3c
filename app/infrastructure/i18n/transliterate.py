"""Default transliteration: fold accented Latin characters to ASCII."""

import unicodedata

# Letters that do not decompose into a base letter plus combining marks.
_SPECIAL_LATIN = {
    "ß": "ss",
    "ẞ": "SS",
    "Æ": "AE",
    "æ": "ae",
    "Œ": "OE",
    "œ": "oe",
    "Ø": "O",
    "ø": "o",
    "Đ": "D",
    "đ": "d",
    "Ð": "D",
    "ð": "d",
    "Ł": "L",
    "ł": "l",
    "Þ": "TH",
    "þ": "th",
    "Ħ": "H",
    "ħ": "h",
    "ı": "i",
}


def utf8_latin_to_ascii(string: str) -> str:
    """Replace accented Latin characters with their ASCII equivalents.

    Characters outside the Latin script are kept as they are.
    """
    folded = []
    for char in string:
        if char in _SPECIAL_LATIN:
            folded.append(_SPECIAL_LATIN[char])
            continue

        if ord(char) < 128:
            folded.append(char)
            continue

        decomposed = unicodedata.normalize("NFKD", char)
        base = "".join(c for c in decomposed if not unicodedata.combining(c))
        if base and all(ord(c) < 128 for c in base):
            folded.append(base)
        else:
            folded.append(char)

    return "".join(folded)


def default_transliterate(string: str) -> str:
    """Fold to ASCII, then lowercase."""
    return utf8_latin_to_ascii(string).lower()
