import unittest

from number_words import (
    NumberRangeError,
    StyleOptions,
    number_to_words,
    words_to_number,
)

AMERICAN = StyleOptions(british_and=False, strict_hyphen=False)
BRITISH_STRICT = StyleOptions(british_and=True, strict_hyphen=True)
ALL_STYLES = [
    StyleOptions(british_and, strict_hyphen)
    for british_and in (False, True)
    for strict_hyphen in (False, True)
]


class TestNumberToWords(unittest.TestCase):
    def test_examples(self):
        cases = {
            0: "zero",
            10: "ten",
            19: "nineteen",
            40: "forty",
            99: "ninety nine",
            100: "one hundred",
            101: "one hundred one",
            1000: "one thousand",
            1001: "one thousand one",
            10123: "ten thousand one hundred twenty three",
            999999: "nine hundred ninety nine thousand nine hundred ninety nine",
            1_000_000: "one million",
        }
        for value, expected in cases.items():
            with self.subTest(value=value):
                words = number_to_words(value, AMERICAN)
                self.assertEqual(words, expected)

    def test_default_style_is_american_with_spaces(self):
        self.assertEqual(number_to_words(121), "one hundred twenty one")

    def test_hyphen_policy(self):
        self.assertEqual(
            number_to_words(21, StyleOptions(strict_hyphen=True)), "twenty-one"
        )
        self.assertEqual(
            number_to_words(21, StyleOptions(strict_hyphen=False)), "twenty one"
        )
        self.assertEqual(number_to_words(30, StyleOptions(strict_hyphen=True)), "thirty")

    def test_british_and(self):
        self.assertEqual(
            number_to_words(101, StyleOptions(british_and=True)), "one hundred and one"
        )
        self.assertEqual(
            number_to_words(101, StyleOptions(british_and=False)), "one hundred one"
        )
        self.assertEqual(number_to_words(500, StyleOptions(british_and=True)), "five hundred")

    def test_and_never_follows_thousand(self):
        cases = {
            1234: "one thousand two hundred and thirty-four",
            1001: "one thousand one",
            20_000: "twenty thousand",
            100_005: "one hundred thousand five",
            345_678: "three hundred and forty-five thousand six hundred and seventy-eight",
        }
        for value, expected in cases.items():
            with self.subTest(value=value):
                words = number_to_words(value, BRITISH_STRICT)
                self.assertEqual(words, expected)
                self.assertNotIn("thousand and", words)

    def test_million_ignores_style(self):
        for options in ALL_STYLES:
            with self.subTest(options=options):
                self.assertEqual(number_to_words(1_000_000, options), "one million")

    def test_out_of_range(self):
        for value in (-1, 1_000_001, 10**9):
            with self.subTest(value=value):
                with self.assertRaises(NumberRangeError):
                    number_to_words(value)

    def test_range_error_is_value_error(self):
        with self.assertRaises(ValueError):
            number_to_words(-5)

    def test_rejects_non_integers(self):
        for value in (1.5, 2.0, "12", True, None):
            with self.subTest(value=value):
                with self.assertRaises(TypeError):
                    number_to_words(value)

    def test_output_is_lowercase_single_spaced(self):
        for value in (7, 77, 707, 7007, 70707, 777777):
            for options in ALL_STYLES:
                words = number_to_words(value, options)
                self.assertEqual(words, words.lower())
                self.assertNotIn("  ", words)
                self.assertEqual(words, words.strip())


class TestWordsToNumber(unittest.TestCase):
    def test_examples(self):
        cases = {
            "zero": 0,
            "Twenty-One": 21,
            "one hundred and one": 101,
            "one thousand two hundred and thirty-four": 1234,
            "nine hundred ninety nine thousand nine hundred ninety nine": 999999,
            "one million": 1_000_000,
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertEqual(words_to_number(text), expected)

    def test_inverts_every_style(self):
        for value in (0, 13, 58, 100, 411, 1000, 6090, 80_808, 512_999, 1_000_000):
            for options in ALL_STYLES:
                with self.subTest(value=value, options=options):
                    self.assertEqual(
                        words_to_number(number_to_words(value, options)), value
                    )

    def test_unknown_word(self):
        with self.assertRaises(ValueError):
            words_to_number("twenty bananas")

    def test_malformed_sequences(self):
        for text in (
            "one two",
            "five zero",
            "twelve three",
            "twenty twenty",
            "twenty eleven",
            "twenty zero",
            "hundred",
            "hundred hundred",
            "one hundred hundred",
            "twenty hundred",
            "eleven hundred",
            "thousand",
            "thousand thousand",
            "one thousand two thousand",
            "one hundred zero",
            "two million",
            "one million million",
            "one thousand million",
            "million",
        ):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    words_to_number(text)

    def test_empty(self):
        for text in ("", "   ", "and", None):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    words_to_number(text)

    def test_out_of_range(self):
        with self.assertRaises(NumberRangeError):
            words_to_number("one million one")


if __name__ == "__main__":
    unittest.main()
