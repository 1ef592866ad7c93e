"""Command line entry point: ``culebra`` / ``python -m culebra``."""

import argparse
import sys

from culebra import __version__, convert, convert_tree, parse
from culebra.config import ConvertConfig
from culebra.errors import CulebraError
from culebra.serialization import from_json, to_json
from culebra.utils.logger import configure_logging


def parse_args(argv: list[str] | None = None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    ap = argparse.ArgumentParser(
        prog="culebra",
        description="convert JavaScript to Python",
    )

    ap.add_argument("input", help="the input JavaScript file (stdin if omitted or -)", nargs="?")
    ap.add_argument("-o", "--output", help="the output Python file (stdout if omitted or -)")
    ap.add_argument("--indent", type=int, default=2, help="spaces per indentation level")
    ap.add_argument("--module", action="store_true", default=False, help="parse the input as an ES module")
    ap.add_argument("--strict", action="store_true", default=False, help="reject literals and operators without an identical Python spelling")
    ap.add_argument("--tree", action="store_true", default=False, help="the input is an ESTree JSON document instead of JavaScript")
    ap.add_argument("--dump-ast", action="store_true", default=False, help="print the parsed tree as JSON instead of converting it")
    ap.add_argument("--debug", action="store_true", default=False, help="log conversion details to stderr")
    ap.add_argument("-v", "--version", action="store_true", default=False, help="print current version and exit")

    return ap, ap.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    ap, args = parse_args(argv)

    if args.version:
        print(f"{ap.prog} {__version__}")
        return 0

    configure_logging(debug=args.debug)

    if args.indent < 1:
        ap.error("--indent must be at least 1")

    source_file = None if args.input in (None, "-") else args.input
    config = ConvertConfig(
        indent_unit=" " * args.indent,
        source_type="module" if args.module else "script",
        strict=args.strict,
        source_file=source_file,
    )

    try:
        if source_file is None:
            text = sys.stdin.read()
        else:
            with open(source_file, encoding="utf-8") as f:
                text = f.read()

        if args.dump_ast:
            tree = from_json(text, source_file=source_file) if args.tree else parse(text, config=config)
            result = to_json(tree, indent=2)
        elif args.tree:
            result = convert_tree(text, config=config)
        else:
            result = convert(text, config=config)

        if args.output in (None, "-"):
            sys.stdout.write(result + "\n")
        else:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result + "\n")
    except (CulebraError, OSError) as e:
        print(f"culebra: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
