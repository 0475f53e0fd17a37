#! /usr/bin/env python3
"""paketresolve - locate the files of paket addin and tool references.

Resolves a ``paket:`` reference below an install root and prints the
files found, one per line, or exports them as JSON.
"""

import json
import logging
import sys

from args import parse_args
from cli_config import load_config, setup_logging
from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants, ExitCodes
from paket import (
    FileSystemContentResolver,
    HostEnvironment,
    PackageReference,
    PackageType,
    PaketPackageInstaller,
    UnsupportedSchemeError,
)

logger = logging.getLogger(__name__)


def export_json(reference, files, path):
    """Exports the resolved files to a JSON file."""
    data = {
        "package": reference.package,
        "reference": str(reference),
        "files": [str(f) for f in files],
    }
    try:
        with open(path, "w", encoding="utf-8") as file:
            json.dump(data, file, indent=2)
        logging.info("JSON file has been successfully exported at: %s", path)
        return True
    except OSError as e:
        logging.error("JSON file couldn't be written to disk: %s", e)
        return False


def build_installer():
    """Create an installer wired to the local host and disk."""
    return PaketPackageInstaller(
        HostEnvironment(),
        FileSystemContentResolver(),
        logging.getLogger("paket"),
    )


def main(argv=None):
    """Main function of the program. Returns the process exit code."""
    args = parse_args(argv)
    config = load_config(args)
    setup_logging(args, config)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main",
                                target_framework=Constants.TARGET_FRAMEWORK)
        )

    try:
        reference = PackageReference.parse(args.PACKAGE)
    except ValueError as e:
        logging.error("Invalid package reference '%s': %s", args.PACKAGE, e)
        return ExitCodes.FILE_ERROR.value
    package_type = PackageType(args.PACKAGE_TYPE)

    installer = build_installer()
    try:
        if not installer.can_install(reference, package_type):
            logging.error("Scheme '%s' is not supported by this installer.", reference.scheme)
            return ExitCodes.UNSUPPORTED.value
    except UnsupportedSchemeError as e:
        logging.error("%s", e)
        return ExitCodes.UNSUPPORTED.value

    files = installer.install(reference, package_type, args.ROOT)
    logging.info("Resolved %d file(s) for %s", len(files), reference.package)

    if args.OUTPUT:
        if not export_json(reference, files, args.OUTPUT):
            return ExitCodes.FILE_ERROR.value
    else:
        for f in files:
            print(f)

    if not files:
        return ExitCodes.NO_FILES.value
    return ExitCodes.SUCCESS.value


def cli():
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
