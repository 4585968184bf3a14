import argparse
import os

from answer_check import digits_equivalent, words_equivalent
from drill import (
    MODES,
    DrillSession,
    DrillStore,
    accuracy,
    export_mistakes_csv,
    parse_range,
    style_from_settings,
)
from number_words import StyleOptions, number_to_words, words_to_number

COMMANDS = (":reveal", ":next", ":review", ":stats", ":quit")


def format_stats(stats):
    return (
        f"total: {stats['total']}, correct: {stats['correct']}, "
        f"streak: {stats['streak']}, accuracy: {accuracy(stats)}%"
    )


def format_prompt(question):
    if question.answer_type == "words":
        return f"Write the words: {question.display}"
    return f"Write the digits: “{question.display}”"


def _ask(session, output, from_mistakes=False, skip=False):
    if skip:
        question = session.skip(from_mistakes=from_mistakes)
    else:
        question = session.new_question(from_mistakes=from_mistakes)
    if question is None:
        output("No mistakes to review!")
    else:
        output(format_prompt(question))
    return question


def run_drill(session, store, input_fn=input, output=print):
    output(f"Commands: {' '.join(COMMANDS)}")
    _ask(session, output)
    while True:
        try:
            line = input_fn("> ")
        except EOFError:
            break
        command = line.strip()
        if command == ":quit":
            break
        if command == ":stats":
            output(format_stats(session.stats))
            continue
        if command == ":reveal":
            expected = session.reveal()
            if expected is not None:
                output(f"Answer: {expected}")
                store.save(session.state)
            continue
        if command in (":next", ":review"):
            _ask(session, output, from_mistakes=command == ":review", skip=True)
            store.save(session.state)
            continue
        if session.current is None:
            output("No question to answer. Use :next or :review.")
            continue
        if session.answered:
            output("Already answered. Use :next for a new question.")
            continue
        grade = session.submit(line)
        if grade is None:
            continue
        if grade.correct:
            output("Correct!")
        else:
            output(f"Not quite. Correct: {grade.expected}")
        store.save(session.state)
    store.save(session.state)
    output(format_stats(session.stats))


def apply_setting_args(settings, args):
    changed = False
    for key, value in (
        ("mode", args.mode),
        ("range", args.range),
        ("min", args.min),
        ("max", args.max),
        ("british_and", args.british_and),
        ("strict_hyphen", args.strict_hyphen),
    ):
        if value is not None and settings.get(key) != value:
            settings[key] = value
            changed = True
    if (args.min is not None or args.max is not None) and args.range is None:
        if settings.get("range") != "custom":
            settings["range"] = "custom"
            changed = True
    return changed


def main():
    parser = cmdline_parser()
    args = parser.parse_args()

    store = DrillStore(args.state_file)
    state = store.load()
    if apply_setting_args(state["settings"], args):
        try:
            parse_range(state["settings"])
        except ValueError as exc:
            parser.error(str(exc))
        store.save(state)
    options = style_from_settings(state["settings"])

    if args.mistake_probe:
        try:
            from tests.mistake_probes import run_mistake_probes
        except ImportError as exc:
            print(f"ERROR: Mistake probes run from a source checkout only: {exc}")
            return

        run_mistake_probes(args.state_file)
        return

    if args.spell is not None:
        value = args.spell
        try:
            words = number_to_words(value, options)
        except ValueError as exc:
            parser.error(str(exc))
        print(f"Number: {value}")
        print(f"Words: {words}")
        for british_and in (False, True):
            for strict_hyphen in (False, True):
                style = StyleOptions(british_and, strict_hyphen)
                print(
                    f"british_and={british_and!s:<5} strict_hyphen={strict_hyphen!s:<5} "
                    f"{number_to_words(value, style)}"
                )
        return

    if args.parse is not None:
        try:
            value = words_to_number(args.parse)
        except ValueError as exc:
            print(f"ERROR: {exc}")
            return
        print(f"Words: {args.parse}")
        print(f"Number: {value}")
        print(f"Canonical: {number_to_words(value, options)}")
        return

    if args.check_words is not None:
        answer, expected = args.check_words
        correct = words_equivalent(answer, expected, options)
        print("Correct" if correct else "Wrong")
        return

    if args.check_digits is not None:
        answer, expected = args.check_digits
        correct = digits_equivalent(answer, expected)
        print("Correct" if correct else "Wrong")
        return

    if args.stats:
        print(format_stats(state["stats"]))
        print(f"Logged mistakes: {len(state['mistakes'])}")
        for key in sorted(state["settings"].keys()):
            print(f"{key}: {state['settings'][key]}")
        return

    if args.reset:
        session = DrillSession(state)
        session.reset_progress()
        store.save(state)
        print("Progress reset.")
        return

    if args.export_mistakes:
        if not state["mistakes"]:
            print("No mistakes to export.")
            return
        count = export_mistakes_csv(state["mistakes"], args.export_mistakes)
        print(f"Wrote {os.path.basename(args.export_mistakes)} with {count} rows.")
        return

    if args.drill:
        session = DrillSession(state, seed=args.seed)
        run_drill(session, store)
        return

    parser.print_help()


def cmdline_parser():
    epilog = (
        "Legal options:\n"
        f"  --mode: {' | '.join(MODES)}\n"
        "  --range: <min>-<max> (e.g. 0-100, 0-1000000) | custom\n"
        f"Drill commands: {' '.join(COMMANDS)}\n"
    )
    parser = argparse.ArgumentParser(
        description="Practice spelling numbers as English words and back.",
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--drill",
        action="store_true",
        help="Start an interactive drill in the terminal.",
    )
    group.add_argument(
        "--spell",
        type=int,
        help="Print the spelled-out form of an integer in every style.",
    )
    group.add_argument(
        "--parse",
        type=str,
        help="Convert spelled-out words back to an integer.",
    )
    group.add_argument(
        "--check-words",
        nargs=2,
        metavar=("ANSWER", "EXPECTED"),
        help="Check a words answer against the expected words.",
    )
    group.add_argument(
        "--check-digits",
        nargs=2,
        metavar=("ANSWER", "EXPECTED"),
        help="Check a digits answer against the expected numeral.",
    )
    group.add_argument(
        "--stats",
        action="store_true",
        help="Print progress stats and saved settings.",
    )
    group.add_argument(
        "--reset",
        action="store_true",
        help="Reset progress and the mistake log.",
    )
    group.add_argument(
        "--export-mistakes",
        type=str,
        metavar="PATH",
        help="Write the mistake log to a CSV file.",
    )
    group.add_argument(
        "--mistake-probe",
        action="store_true",
        help="Generate mistake probes and open the report (run from a source checkout).",
    )
    parser.add_argument(
        "--state-file",
        default="numbers_practice.json",
        help="JSON file holding settings, stats and mistakes.",
    )
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=None,
        help="Question direction: to-words, to-digits, or review of past mistakes.",
    )
    parser.add_argument(
        "--range",
        default=None,
        help="Range to draw numbers from, as min-max, or 'custom' to use --min/--max.",
    )
    parser.add_argument(
        "--min",
        type=int,
        default=None,
        help="Lower bound for the custom range (clamped to 0..1000000).",
    )
    parser.add_argument(
        "--max",
        type=int,
        default=None,
        help="Upper bound for the custom range (clamped to 0..1000000).",
    )
    parser.add_argument(
        "--british-and",
        action="store_true",
        default=None,
        help="Spell 101 as 'one hundred and one'.",
    )
    parser.add_argument(
        "--no-british-and",
        action="store_false",
        dest="british_and",
        help="Spell 101 as 'one hundred one'.",
    )
    parser.add_argument(
        "--strict-hyphen",
        action="store_true",
        default=None,
        help="Require hyphens between tens and units ('twenty-one').",
    )
    parser.add_argument(
        "--no-strict-hyphen",
        action="store_false",
        dest="strict_hyphen",
        help="Accept spaces or hyphens between tens and units.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for question sampling.",
    )

    return parser


if __name__ == "__main__":
    main()
