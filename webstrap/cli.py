#!/usr/bin/env python3
import argparse
import sys

from webstrap import __version__
from webstrap.provisioner import provision
from webstrap.servers import SERVERS
from webstrap.utils import console as out
from webstrap.utils.config import OS_RELEASE, Settings
from webstrap.utils.errors import UsageError, handle_errors, setup_logging
from webstrap.utils.osdetect import validate_distro


EPILOG = """\
If no distro is given, Debian and Red Hat families are autodetected
from /etc/os-release. Requires root, or sudo rights for the package
manager and systemctl.
"""


class RichParser(argparse.ArgumentParser):
    def error(self, message):
        out.error(message)
        self.print_usage(sys.stderr)
        sys.exit(1)


def _distro(value):
    try:
        return validate_distro(value)
    except UsageError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser():
    parser = RichParser(
        prog="webstrap",
        description="Download, install, and enable a web server on a systemd-based "
                    "Debian (apt) or RHEL (yum/dnf) system.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-d", "--distro", type=_distro, default=None, metavar="DISTRO",
        help="Set distro by ID (\"debian\" and \"redhat\" supported)",
    )
    parser.add_argument(
        "-s", "--server", choices=sorted(SERVERS), default="nginx",
        help="Web server to install (default: nginx)",
    )
    parser.add_argument(
        "-n", "--dry-run", action="store_true",
        help="Print the changing commands instead of running them",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument(
        "--os-release", default=OS_RELEASE, metavar="PATH",
        help=f"OS descriptor used for autodetection (default: {OS_RELEASE})",
    )
    parser.add_argument(
        "--probe-url", default=None, metavar="URL",
        help="After setup, GET this URL and report the answer",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")

    # first non-option token ends option parsing; the rest is ignored
    parser.add_argument("rest", nargs=argparse.REMAINDER, help=argparse.SUPPRESS)
    return parser


def check_options(parser, argv):
    """
    Walk options left to right, as a shell getopts loop would, and reject any
    `-` token that is not a known option. argparse alone lets "-", "--" and
    negative-number lookalikes through as positionals.
    """
    known = {s: a for a in parser._actions for s in a.option_strings}
    tokens = iter(argv)
    for token in tokens:
        if not token.startswith("-"):
            break
        opt, sep, _ = token.partition("=")
        action = known.get(opt)
        if action is None or (sep and action.nargs == 0):
            parser.error(f'Invalid option "{token}"')
        if not sep and action.nargs != 0:
            next(tokens, None)


def parse_args(argv=None):
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else list(argv)
    check_options(parser, argv)
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        parser.error(f'Invalid option "{unknown[0]}"')
    return args


@handle_errors
def main(argv=None):
    args = parse_args(argv)
    settings = Settings.from_args(args)
    setup_logging(settings.verbose)
    if args.rest:
        out.info(f"Ignoring trailing arguments: {' '.join(args.rest)}")
    provision(settings)


if __name__ == "__main__":
    main()
