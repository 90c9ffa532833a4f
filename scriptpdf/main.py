"""
scriptpdf - command line interface

Render a plain-text screenplay as a paginated PDF.

Usage:
    scriptpdf script.txt [-t TITLE] [-a AUTHOR] [-o OUTPUT] [--conf FILE]
"""
import argparse
import logging
import os.path
import sys

import scriptpdf.config as config
import scriptpdf.error as error
import scriptpdf.misc as misc
import scriptpdf.screenplay as screenplay
import scriptpdf.util as util

log = logging.getLogger(__name__)


def makeParser():
    parser = argparse.ArgumentParser(
        prog=misc.progName,
        description="Render a plain-text screenplay as a paginated PDF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    scriptpdf script.txt                        # writes script.pdf
    scriptpdf script.txt -t "Coffee Shop"       # writes Coffee_Shop.pdf
    cat script.txt | scriptpdf - -o out.pdf     # read from stdin
    scriptpdf --dump-conf > my.conf             # write default settings
        """
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Input text file, or - for standard input"
    )
    parser.add_argument(
        "-t", "--title",
        help="Screenplay title (default: input file name)"
    )
    parser.add_argument(
        "-a", "--author",
        help="Author shown on the title page (default: from config)"
    )
    parser.add_argument(
        "-o", "--output",
        help="Output PDF file (default: <title>.pdf)"
    )
    parser.add_argument(
        "--conf",
        help="Settings file to use"
    )
    parser.add_argument(
        "--dump-conf",
        action="store_true",
        help="Print the settings in effect and exit"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug output"
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s " + misc.version
    )

    return parser


# figure out the title to use: given one, input file name, or the
# default for standard input.
def getTitle(args):
    if args.title:
        return args.title

    if args.input and args.input != "-":
        return os.path.splitext(os.path.basename(args.input))[0]

    return misc.defaultTitle


def run(args):
    if args.conf:
        cfg = config.loadFile(args.conf)
    else:
        cfg = config.Config()

    if args.dump_conf:
        sys.stdout.write(cfg.save())

        return

    if args.input == "-":
        body = sys.stdin.read()
    else:
        body = util.loadFile(args.input)

    title = getTitle(args)
    output = args.output or util.title2filename(title)

    data = screenplay.generatePDF(title, body, cfg, args.author)

    util.writeToFile(output, data)

    log.info("wrote %s (%d bytes)", output, len(data))


def main(argv=None):
    parser = makeParser()
    args = parser.parse_args(argv)

    if not args.input and not args.dump_conf:
        parser.error("an input file is required")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        run(args)
    except error.ScriptPdfError as e:
        print("Error: %s" % e, file=sys.stderr)

        return 1
    except OSError as e:
        print("Error: %s: %s" % (e.filename or "", e.strerror or e),
              file=sys.stderr)

        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
