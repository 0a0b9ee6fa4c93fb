import sys
import logging
import argparse
from . import run, format_memory, TinypasError


def main(argv=None):
    argparser = argparse.ArgumentParser(prog="tinypas", description="tiny pascal interpreter")
    argparser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log symbol table and memory activity")
    argparser.add_argument("FILE", help="pascal source file")
    args = argparser.parse_args(argv)

    logging.basicConfig(
        format="{levelname}:{name}: {message}",
        style="{",
        level=logging.DEBUG if args.verbose else logging.WARNING)

    with open(args.FILE, "r", encoding="utf-8") as f:
        text = f.read()

    try:
        memory = run(text, args.FILE)
    except TinypasError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    print(format_memory(memory))
    return 0


if __name__ == '__main__':
    sys.exit(main())
