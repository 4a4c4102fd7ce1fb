"""Command line interface of skosifier."""

import argparse
import logging
import sys
import textwrap
from pathlib import Path

from skosifier import __version__, config, setup_logging
from skosifier.checks import InputError, OutputError, SkosifierError
from skosifier.convert import convert
from skosifier.emit import RDF_FORMATS

logger = logging.getLogger(__name__)

# Exit codes; value 2 is used by argparse for invalid args.
EXIT_ERROR = 1
EXIT_UNEXPECTED = 3
EXIT_INPUT_ERROR = 4
EXIT_OUTPUT_ERROR = 5


def process_common_options(args, raw_args):
    # set up logging
    loglevel = logging.INFO + (args.quieter - args.verboser) * 10
    logfile = args.logfile
    if logfile is None:
        setup_logging(loglevel)
    else:
        logfile.parents[0].mkdir(exist_ok=True, parents=True)
        setup_logging(loglevel, logfile)

    logger.info("Executing cmd: skosifier %s", " ".join(raw_args))
    logger.debug("Processing common options.")

    # load config
    if args.config is not None:
        if args.config.exists():
            config.load_config(config_file=Path(args.config))
        else:
            msg = "Config file not found at: %s"
            logger.error(msg, args.config)
            raise SkosifierError(msg % args.config)

    if not args.INPUT.exists():
        msg = "File not found: %s"
        logger.error(msg, args.INPUT)
        raise InputError(msg % args.INPUT)

    if args.OUTDIR.is_file():
        msg = "Outdir must be a directory but it is a file."
        logger.error(msg)
        raise OutputError(msg)


class DecentFormatter(argparse.HelpFormatter):
    """
    An argparse formatter that preserves newlines & keeps indentation.
    """

    def _fill_text(self, text, width, indent):
        """
        Reformat text while keeping newlines for lines shorter than width.
        """
        lines = []
        for line in textwrap.indent(textwrap.dedent(text), indent).splitlines():
            lines.append(textwrap.fill(line, width, subsequent_indent=indent))
        return "\n".join(lines)


def create_parser():
    parser = argparse.ArgumentParser(
        prog="skosifier",
        description=(
            "Convert a semicolon separated table of terms to a SKOS "
            "vocabulary.\n"
            "Columns: ID; parent ID; labels per language (nl, fr, de, en); "
            "alt_<lang>, def_<lang>, scope_<lang>; start, end (DD/MM/YYYY); "
            "sameAs/exactMatch/closeMatch/broadMatch/narrowMatch links; "
            "any column named by a http(s) property IRI."
        ),
        allow_abbrev=False,
        formatter_class=DecentFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"skosifier {__version__}",
        help="The version of skosifier.",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-v",
        "--verbose",
        action="count",
        dest="verboser",
        default=0,
        help="More verbose output. Repeat to increase verbosity (-vv or -vvv).",
    )
    group.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        dest="quieter",
        help="Less verbose output. Repeat to reduce verbosity (-qq or -qqq).",
    )
    parser.add_argument(
        "--config",
        help="Path to a toml config file with a [skosifier] table.",
        type=Path,
        required=False,
    )
    parser.add_argument(
        "-l",
        "--logfile",
        help=(
            "Activate logging to a file at given path. "
            "The path will be created if it is not existing."
        ),
        type=Path,
    )
    outopt = parser.add_argument_group("Output options")
    outopt.add_argument(
        "-f",
        "--format",
        dest="formats",
        action="append",
        choices=list(RDF_FORMATS),
        help=(
            "RDF format of the whole vocabulary. Repeat for several formats. "
            "(default: nt and ttl)"
        ),
    )
    outopt.add_argument(
        "--per-concept",
        help="Also write one turtle file per concept to a subdirectory.",
        action="store_true",
    )
    outopt.add_argument(
        "--html",
        help="Also write html tables: index.html and one page per term.",
        action="store_true",
    )
    parser.add_argument("INPUT", type=Path, help="Table to convert (csv or xlsx).")
    parser.add_argument(
        "OUTDIR",
        type=Path,
        help="Directory where files are written to. It is created if required.",
    )
    parser.add_argument(
        "BASE_IRI",
        help='IRI prefix for all concepts, e.g. "http://example.org/voc/".',
    )
    parser.set_defaults(func=convert)
    return parser


def main_cli(raw_args=None):
    """Setup CLI app and run commands based on args."""
    parser = create_parser()
    # parse_args calls sys.exit(2) with a usage message if args are missing.
    args = parser.parse_args(raw_args)
    process_common_options(args, raw_args or [])
    args.func(args)


def run_cli_app(raw_args=None):
    """Entry point for running the cli app."""
    if raw_args is None:
        raw_args = sys.argv[1:]
    try:
        main_cli(raw_args)
    except InputError as e:
        logger.error("Terminating with error: %s", e)  # noqa: TRY400
        sys.exit(EXIT_INPUT_ERROR)
    except OutputError as e:
        logger.error("Terminating with error: %s", e)  # noqa: TRY400
        sys.exit(EXIT_OUTPUT_ERROR)
    except SkosifierError as e:
        logger.error("Terminating with error: %s", e)  # noqa: TRY400
        sys.exit(EXIT_ERROR)
    except Exception:  # pragma: no cover
        logger.exception("Unexpected error.")
        sys.exit(EXIT_UNEXPECTED)


if __name__ == "__main__":
    run_cli_app(sys.argv[1:])
