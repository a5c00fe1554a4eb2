import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import config
from .core import PhotoRenamerApp
from .exceptions import ConfigurationError
from .organization.mover import COPY, MOVE, SYMLINK
from .reporting import ReportGenerator, format_failures


def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Sets up logging to the console and, optionally, a file."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(level=log_level, format=config.LOG_FORMAT, handlers=handlers, force=True)


def existing_dir(value: str) -> Path:
    p = Path(value)
    if not p.is_dir():
        raise argparse.ArgumentTypeError(f"Directory specified: '{value}' does not exist")
    return p


def existing_file(value: str) -> Path:
    p = Path(value)
    if not p.is_file():
        raise argparse.ArgumentTypeError(f"File specified: '{value}' does not exist")
    return p


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="photo-renamer",
        description=(
            "Rename photos/videos to unique, informative names based on camera model / "
            "time taken / shutter count / focal length / shutter speed / aperture"
        ),
    )

    op = p.add_mutually_exclusive_group()
    op.add_argument("-c", "--copy", action="store_true", help="Copy files to output rather than move")
    op.add_argument("-s", "--symlink", action="store_true", help="Symlink files to output rather than move")

    p.add_argument("-d", "--directory", type=existing_dir, default=Path("."),
                   help="Directory to find files in (default: current directory)")
    p.add_argument("-r", "--recursive", action="store_true", help="Recurse subdirectories to find files")
    p.add_argument("-n", "--dryrun", "--dry-run", dest="dry_run", action="store_true",
                   help="Print proposed changes without applying them")
    p.add_argument("-o", "--output", type=existing_dir, default=Path("."),
                   help="Directory to place renamed files in (default: current directory)")
    p.add_argument("-f", "--file", type=existing_file, default=None, help="Operate on a single file")
    p.add_argument("-p", "--preserve-tree", action="store_true",
                   help="Preserve the input directory tree under the output; requires --recursive")

    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")
    p.add_argument("--report-csv", type=Path, default=None, help="Write a CSV report of every file handled")
    p.add_argument("--version", action="version", version=f"%(prog)s {config.__version__}")
    return p


def parse_args(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.preserve_tree and not args.recursive:
        parser.error("--preserve-tree is exclusive to --recursive")
    if args.file and args.recursive:
        parser.error("--file cannot be combined with --recursive")

    return args


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    if args.copy:
        operation = COPY
    elif args.symlink:
        operation = SYMLINK
    else:
        operation = MOVE

    logging.debug(f"Source: {args.file or args.directory}")
    logging.debug(f"Output: {args.output}")

    app = PhotoRenamerApp()

    try:
        result = app.rename(
            src_root=args.directory,
            output_root=args.output,
            recursive=args.recursive,
            single_file=args.file,
            preserve_tree=args.preserve_tree,
            operation=operation,
            dry_run=args.dry_run,
        )
    except ConfigurationError as e:
        logging.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        logging.warning("Program interrupted by user.")
        sys.exit(1)
    except Exception:
        logging.exception("Fatal error during renaming.")
        sys.exit(1)

    if args.report_csv:
        ReportGenerator(result).write_csv(args.report_csv)

    failures = format_failures(result)
    if failures:
        print(failures, file=sys.stderr)
    if not result.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
