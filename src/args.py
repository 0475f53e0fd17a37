"""Argument parsing functionality for paketresolve."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="paketresolve",
        description=(
            "paketresolve - Locate the files of paket addin and tool references"
        ),
        add_help=True,
    )

    parser.add_argument("-p", "--package",
                        dest="PACKAGE",
                        help="Package reference, i.e: paket:?package=Cake.Foo&group=build",
                        action="store", type=str,
                        required=True)
    parser.add_argument("-r", "--root",
                        dest="ROOT",
                        help=f"Install root to resolve the package under (default: {Constants.DEFAULT_INSTALL_ROOT})",
                        action="store", type=str,
                        default=Constants.DEFAULT_INSTALL_ROOT)
    parser.add_argument("-t", "--type",
                        dest="PACKAGE_TYPE",
                        help="Package type, addin or tool (default: addin)",
                        action="store",
                        type=str.lower,
                        choices=["addin", "tool"],
                        default="addin")
    parser.add_argument("--target-framework",
                        dest="TARGET_FRAMEWORK",
                        help="Target framework name reported when no addin assemblies are found",
                        action="store",
                        type=str)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to a JSON file receiving the resolved files",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'])
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    # Config file (general)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML or YML)",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
