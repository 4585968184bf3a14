import collections
import csv
import json
import os
import random
import time
from datetime import datetime, timezone

from answer_check import digits_equivalent, words_equivalent
from number_words import (
    MAX_VALUE,
    MIN_VALUE,
    StyleOptions,
    number_to_words,
    words_to_number,
)

MODES = ("to-words", "to-digits", "review")
MAX_MISTAKES = 200

DEFAULT_SETTINGS = {
    "mode": "to-words",
    "range": "0-100",
    "min": 0,
    "max": 100,
    "british_and": False,
    "strict_hyphen": False,
}


def default_state():
    return {
        "settings": dict(DEFAULT_SETTINGS),
        "stats": {"total": 0, "correct": 0, "streak": 0},
        "mistakes": [],
    }


def style_from_settings(settings):
    return StyleOptions(
        british_and=bool(settings.get("british_and", False)),
        strict_hyphen=bool(settings.get("strict_hyphen", False)),
    )


def _clamp(value):
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Malformed range bound {value!r}; expected an integer.")
    return max(MIN_VALUE, min(MAX_VALUE, number))


def parse_range(settings):
    range_name = settings.get("range", DEFAULT_SETTINGS["range"])
    if range_name == "custom":
        low = settings.get("min", DEFAULT_SETTINGS["min"])
        high = settings.get("max", DEFAULT_SETTINGS["max"])
    else:
        try:
            low, high = range_name.split("-")
        except (AttributeError, ValueError):
            raise ValueError(f"Malformed range {range_name!r}; expected 'min-max'.")
    low, high = _clamp(low), _clamp(high)
    if high < low:
        low, high = high, low
    return low, high


def accuracy(stats):
    total = stats["total"]
    if not total:
        return 0
    return round(stats["correct"] * 100 / total)


Question = collections.namedtuple(
    "Question", ["answer_type", "display", "expected", "q"]
)
Grade = collections.namedtuple("Grade", ["correct", "expected", "user"])


class DrillSession:
    def __init__(self, state=None, seed=None):
        self.state = state if state is not None else default_state()
        self.rng = random.Random(seed)
        self.current = None
        self.answered = False

    @property
    def settings(self):
        return self.state["settings"]

    @property
    def stats(self):
        return self.state["stats"]

    @property
    def mistakes(self):
        return self.state["mistakes"]

    def _style(self):
        return style_from_settings(self.settings)

    def _question_from_mistake(self):
        item = self.mistakes[self.rng.randint(0, len(self.mistakes) - 1)]
        q = item["q"]
        if isinstance(q, str):
            try:
                value = words_to_number(q)
            except ValueError:
                return Question("digits", q, str(item["expected"]), q)
            words = number_to_words(value, self._style())
            return Question("digits", words, str(value), q)
        return Question("words", q, number_to_words(q, self._style()), q)

    def _question_from_range(self):
        low, high = parse_range(self.settings)
        value = self.rng.randint(low, high)
        words = number_to_words(value, self._style())
        if self.settings["mode"] == "to-digits":
            return Question("digits", words, str(value), words)
        return Question("words", value, words, value)

    def new_question(self, from_mistakes=False):
        if self.settings["mode"] == "review" or from_mistakes:
            if not self.mistakes:
                self.current = None
                return None
            question = self._question_from_mistake()
        else:
            question = self._question_from_range()
        self.current = question
        self.answered = False
        return question

    def _record(self, correct):
        self.stats["total"] += 1
        if correct:
            self.stats["correct"] += 1
            self.stats["streak"] += 1
        else:
            self.stats["streak"] = 0

    def _add_mistake(self, q, expected, user):
        self.mistakes.append(
            {"q": q, "expected": expected, "user": user, "ts": time.time()}
        )
        del self.mistakes[:-MAX_MISTAKES]

    def submit(self, user_text):
        if self.current is None:
            return None
        user = (user_text or "").strip()
        if not user:
            return None
        question = self.current
        if question.answer_type == "words":
            correct = words_equivalent(user, question.expected, self._style())
        else:
            correct = digits_equivalent(user, question.expected)
        if not correct:
            self._add_mistake(question.q, question.expected, user)
        self._record(correct)
        self.answered = True
        return Grade(correct, question.expected, user)

    def reveal(self):
        if self.current is None:
            return None
        if not self.answered:
            self._record(False)
            self.answered = True
        return self.current.expected

    def skip(self, from_mistakes=False):
        if self.current is not None and not self.answered:
            self._record(False)
        return self.new_question(from_mistakes=from_mistakes)

    def reset_progress(self):
        self.state["stats"] = {"total": 0, "correct": 0, "streak": 0}
        self.state["mistakes"] = []


class DrillStore:
    def __init__(self, path="numbers_practice.json"):
        self.path = path

    def load(self):
        state = default_state()
        if not os.path.isfile(self.path):
            return state
        try:
            with open(self.path, encoding="utf-8") as handle:
                saved = json.load(handle)
        except (OSError, ValueError) as exc:
            print(f"ERROR: Failed to read state file {self.path}: {exc}")
            return state
        if not isinstance(saved, dict):
            print(f"ERROR: Ignoring malformed state file {self.path}.")
            return state
        for key in ("stats", "mistakes"):
            if key in saved:
                state[key] = saved[key]
        state["settings"].update(saved.get("settings") or {})
        try:
            parse_range(state["settings"])
        except ValueError as exc:
            print(f"ERROR: {exc} Using the default range {DEFAULT_SETTINGS['range']}.")
            for key in ("range", "min", "max"):
                state["settings"][key] = DEFAULT_SETTINGS[key]
        return state

    def save(self, state):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as handle:
            json.dump(state, handle, indent=2, sort_keys=True)


def export_mistakes_csv(mistakes, path):
    rows = [("when", "question", "expected", "user")]
    for mistake in mistakes:
        when = datetime.fromtimestamp(mistake["ts"], tz=timezone.utc).isoformat()
        rows.append(
            (when, str(mistake["q"]), str(mistake["expected"]), str(mistake["user"]))
        )
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, quoting=csv.QUOTE_ALL)
        writer.writerows(rows)
    return len(rows) - 1
