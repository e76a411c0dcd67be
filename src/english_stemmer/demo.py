# src/english_stemmer/demo.py
import argparse
import json
import logging
import sys
from pathlib import Path


def _load_pairs(source: str):
    """Load a vocabulary given either a file path (read as is) or a name inside the data dir."""
    from .evaluation import load_vocabulary, parse_vocabulary

    path = Path(source).expanduser()
    if path.is_file():
        with path.open(encoding="utf-8") as fh:
            return parse_vocabulary(fh, source=path.name)
    return load_vocabulary(source)


def main(argv=None):
    """CLI demo: stem words, show R1/R2, score a reference vocabulary, or diff against NLTK."""
    from .evaluation import compare_with_reference, format_report, score_accuracy
    from .stemming import get_r1_r2, stem

    parser = argparse.ArgumentParser(
        prog="stem-demo",
        description="Stem English words with the Porter2 (Snowball English) algorithm.",
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Lowercase words to stem (e.g. generously caresses agreed)",
    )
    parser.add_argument("--debug", action="store_true", help="Trace every step that changes a word")
    parser.add_argument("--regions", action="store_true", help="Also print R1/R2 for each word")
    parser.add_argument(
        "--vocab",
        metavar="NAME_OR_PATH",
        help="Score accuracy against a 'word stem' file (path, or name inside the data dir)",
    )
    parser.add_argument(
        "--min-accuracy",
        type=float,
        default=100.0,
        dest="min_accuracy",
        help="Exit with status 1 when vocabulary accuracy is below this percentage",
    )
    parser.add_argument(
        "--compare-reference",
        action="store_true",
        dest="compare_reference",
        help="List words whose stem differs from NLTK's Snowball English stemmer",
    )

    args = parser.parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    words = args.words or ["generously", "caresses", "plastered"]

    try:
        if args.vocab:
            pairs = _load_pairs(args.vocab)
            report = score_accuracy(pairs)
            print(format_report(report))
            if args.compare_reference:
                _print_diffs(compare_with_reference(w for w, _ in pairs))
            return 0 if report["accuracy"] >= args.min_accuracy else 1

        if args.regions:
            result = {}
            for w in words:
                r1, r2 = get_r1_r2(w)
                result[w] = {"stem": stem(w, debug=args.debug), "r1": r1, "r2": r2}
        else:
            result = {w: stem(w, debug=args.debug) for w in words}
        print(json.dumps(result, indent=2, ensure_ascii=False))
        if args.compare_reference:
            _print_diffs(compare_with_reference(words))
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _print_diffs(diffs):
    if not diffs:
        print("No differences from the reference stemmer.")
        return
    print(f"{len(diffs)} difference(s) from the reference stemmer:")
    for word, ours, theirs in diffs:
        print(f"  {word}: {ours} (reference {theirs})")


if __name__ == "__main__":
    sys.exit(main())
