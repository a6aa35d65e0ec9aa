import sys
import argparse

from ascii_printer import AsciiPrinter, DEFAULT_CHARS, DEFAULT_SCALE, strip_whitespace
from errors import ERRORS, AsciiArtError, ConfigurationError, UnknownError
from stdin_source import resolve_source

def build_parser():
    parser = argparse.ArgumentParser(prog='asciiart', description="Converts an image to ascii art")
    parser.add_argument(
        "-c", "--chars", default=DEFAULT_CHARS,
        help="list of chars from least to most intense, separated by whitespace (default: %(default)s)"
    )
    parser.add_argument(
        "-s", "--scale", type=int, default=DEFAULT_SCALE,
        help="scale factor as a positive integer (default: %(default)s)"
    )
    parser.add_argument("-p", "--progress", action="store_true", help="show a progress bar on stderr")
    parser.add_argument("src", nargs='?', default=None, help="image path, read from stdin if omitted")
    return parser

def convert(args):
    if args.scale < 1:
        raise ConfigurationError(ERRORS["bad_scale"] % args.scale)

    path = resolve_source(args.src)
    print("selected img %s" % path)
    sys.stdout.flush()

    AsciiPrinter() \
        .load_image(path) \
        .set_chars(strip_whitespace(args.chars)) \
        .set_scale(args.scale) \
        .render(progress=args.progress)

def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        convert(args)
    except AsciiArtError:
        raise
    except Exception as e:
        raise UnknownError(str(e)) from e
    return 0

def run():
    try:
        sys.exit(main())
    except AsciiArtError as e:
        sys.exit(str(e))

if __name__ == '__main__':
    run()
