import collections
import re

MIN_VALUE = 0
MAX_VALUE = 1_000_000

_ONES = {
    0: "zero",
    1: "one",
    2: "two",
    3: "three",
    4: "four",
    5: "five",
    6: "six",
    7: "seven",
    8: "eight",
    9: "nine",
    10: "ten",
    11: "eleven",
    12: "twelve",
    13: "thirteen",
    14: "fourteen",
    15: "fifteen",
    16: "sixteen",
    17: "seventeen",
    18: "eighteen",
    19: "nineteen",
}
_TENS = {
    20: "twenty",
    30: "thirty",
    40: "forty",
    50: "fifty",
    60: "sixty",
    70: "seventy",
    80: "eighty",
    90: "ninety",
}
_WORD_VALUES = {word: value for value, word in _ONES.items()}
_WORD_VALUES.update({word: value for value, word in _TENS.items()})


class NumberRangeError(ValueError):
    pass


StyleOptions = collections.namedtuple(
    "StyleOptions", ["british_and", "strict_hyphen"], defaults=[False, False]
)

DEFAULT_STYLE = StyleOptions()


def _words_0_to_99(value, options):
    if value < 20:
        return _ONES[value]
    tens = (value // 10) * 10
    ones = value % 10
    if ones == 0:
        return _TENS[tens]
    joiner = "-" if options.strict_hyphen else " "
    return f"{_TENS[tens]}{joiner}{_ONES[ones]}"


def _words_0_to_999(value, options):
    if value < 100:
        return _words_0_to_99(value, options)
    hundreds = value // 100
    remainder = value % 100
    if remainder == 0:
        return f"{_ONES[hundreds]} hundred"
    separator = " and " if options.british_and else " "
    return f"{_ONES[hundreds]} hundred{separator}{_words_0_to_99(remainder, options)}"


def _words_below_million(value, options):
    if value < 1000:
        return _words_0_to_999(value, options)
    thousands = value // 1000
    remainder = value % 1000
    if remainder == 0:
        return f"{_words_0_to_999(thousands, options)} thousand"
    # The remainder never gets an "and" of its own after "thousand".
    return (
        f"{_words_0_to_999(thousands, options)} thousand "
        f"{_words_0_to_999(remainder, options)}"
    )


def check_value(value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {type(value).__name__}.")
    if value < MIN_VALUE or value > MAX_VALUE:
        raise NumberRangeError(
            f"{value} is outside the supported range {MIN_VALUE}..{MAX_VALUE:,}."
        )
    return value


def number_to_words(value, options=DEFAULT_STYLE):
    check_value(value)
    if value == MAX_VALUE:
        return "one million"
    return _words_below_million(value, options)


def words_to_number(text):
    """Parse a spelled-out number in the 0..1,000,000 range.

    Hyphens, punctuation, letter case and the word "and" are ignored, so every
    style produced by number_to_words parses back to the same value. Words
    out of order ("one two", "hundred hundred", "thousand thousand") raise
    ValueError rather than being summed.
    """
    cleaned = re.sub(r"[^a-z\s-]", "", (text or "").lower())
    words = [word for word in re.split(r"[\s-]+", cleaned) if word and word != "and"]
    if not words:
        raise ValueError(f"No number words found in {text!r}.")
    if "zero" in words and words != ["zero"]:
        raise ValueError(f"'zero' must stand alone in {text!r}.")
    if "million" in words and words[:2] != ["one", "million"]:
        raise ValueError(f"Only 'one million' is supported, got {text!r}.")
    total = 0
    current = 0
    last = None
    seen_thousand = False
    for word in words:
        if word in _TENS.values():
            if last in ("ones", "tens"):
                raise ValueError(f"Unexpected {word!r} in {text!r}.")
            current += _WORD_VALUES[word]
            last = "tens"
        elif word in _WORD_VALUES:
            value = _WORD_VALUES[word]
            if last == "ones" or (last == "tens" and not 1 <= value <= 9):
                raise ValueError(f"Unexpected {word!r} in {text!r}.")
            current += value
            last = "ones"
        elif word == "hundred":
            if last != "ones" or not 1 <= current <= 9:
                raise ValueError(f"'hundred' must follow a single digit in {text!r}.")
            current *= 100
            last = "hundred"
        elif word == "thousand":
            if seen_thousand or current == 0:
                raise ValueError(f"Unexpected 'thousand' in {text!r}.")
            total += current * 1000
            current = 0
            seen_thousand = True
            last = "thousand"
        elif word == "million":
            if last != "ones" or current != 1 or total:
                raise ValueError(f"Unexpected 'million' in {text!r}.")
            total = 1_000_000
            current = 0
            last = "million"
        else:
            raise ValueError(f"Unrecognized number word {word!r} in {text!r}.")
    return check_value(total + current)
