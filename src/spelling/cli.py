import argparse
import sys

from src.data.subject import resolve_subject_text
from src.data.wordlist import load_dictionary

from .config import BRIEF_DESCRIPTION, get_language, get_words_path
from .errors import InvalidArguments, SpellcheckError
from .spellcheck import SpellChecker


def build_parser():
    parser = argparse.ArgumentParser(
        prog="spellcheck",
        description="Echo text with unknown words wrapped in braces.",
        epilog="The subject is read as a file when it names an existing file, "
               "otherwise it is checked as literal text.",
    )
    parser.add_argument(
        "subject",
        nargs="?",
        help="Either text or a file path.",
    )
    parser.add_argument(
        "--brief-description",
        action="store_true",
        help="Print a one-line description of the tool and exit.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--words",
        default=None,
        help="Dictionary file, one word per line (default: $SPELLCHECK_WORDS or /usr/share/dict/words).",
    )
    source.add_argument(
        "--language",
        default=None,
        help="Use the word list bundled with pyspellchecker for this language instead of a file.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Report dictionary loading on stderr.",
    )
    return parser


def run(args, out=None, err=None):
    """Run a spellcheck for parsed `args`; returns the process exit code."""
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr

    if args.brief_description:
        print(BRIEF_DESCRIPTION, file=out)
        return 0

    try:
        if args.subject is None:
            raise InvalidArguments("no subject supplied")
        text = resolve_subject_text(args.subject)

        language = args.language or (None if args.words else get_language())
        if args.verbose:
            source = f"pyspellchecker:{language}" if language else get_words_path(args.words)
            print(f"Loading dictionary from {source}...", file=err)
        dictionary = load_dictionary(args.words, language=language)
        if args.verbose:
            print(f"Loaded {len(dictionary)} words", file=err)

        rendered = SpellChecker(dictionary).render(text)
    except InvalidArguments as e:
        build_parser().print_usage(err)
        print(f"error: {e}", file=err)
        return e.exit_code
    except SpellcheckError as e:
        print(f"error: {e}", file=err)
        return e.exit_code

    out.write(rendered)
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
