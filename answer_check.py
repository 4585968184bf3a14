import re

from number_words import DEFAULT_STYLE

_PUNCTUATION = re.compile(r"[^\w\s-]|_")
_WHITESPACE = re.compile(r"\s+")
_AND_WORD = re.compile(r"\band\b")
_SEPARATORS = re.compile(r"[-\s]")
_DIGIT_SEPARATORS = re.compile(r"[,_\s]")
_LEADING_ZEROS = re.compile(r"^0+(?=\d)")


def strip_punctuation(text):
    return _PUNCTUATION.sub("", text.lower())


def collapse_whitespace(text):
    return _WHITESPACE.sub(" ", text).strip()


def strip_and(text, options):
    # Only a British-style session forgives "and"; otherwise it must match.
    if not options.british_and:
        return text
    return collapse_whitespace(_AND_WORD.sub("", text))


def fold_separators(text, options):
    if options.strict_hyphen:
        return text
    return _SEPARATORS.sub(" ", text)


def normalize_words(text, options=DEFAULT_STYLE):
    """Run a free-text answer through the normalization steps, in order.

    strip_punctuation -> collapse_whitespace -> strip_and -> fold_separators
    """
    text = strip_punctuation(text or "")
    text = collapse_whitespace(text)
    text = strip_and(text, options)
    return fold_separators(text, options)


def words_equivalent(user_text, expected_words, options=DEFAULT_STYLE):
    return normalize_words(user_text, options) == normalize_words(
        expected_words, options
    )


def normalize_digits(text):
    text = _DIGIT_SEPARATORS.sub("", text or "")
    return _LEADING_ZEROS.sub("", text)


def digits_equivalent(user_text, expected_numeral):
    return normalize_digits(user_text) == expected_numeral
