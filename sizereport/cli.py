"""CLI entrypoint for sizereport."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import CONFIG_FILE_NAME, load_config
from .errors import SizeReportError
from .logging import configure_logging, get_logger
from .measure import SizeMeasurer
from .pod_config import write_pod_config
from .report import ReportGenerator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sizereport",
        description="Measure SDK binary sizes with cocoapods-size and print a metrics payload.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--binary-size-tool-dir",
        required=True,
        type=Path,
        help="cocoapods-size checkout (https://github.com/google/cocoapods-size).",
    )
    parser.add_argument(
        "--sdk-repo-dir",
        required=True,
        type=Path,
        help="Local SDK repo the pods are built from.",
    )
    parser.add_argument(
        "--sdk",
        required=True,
        nargs="+",
        action="extend",
        dest="sdks",
        metavar="SDK",
        help="SDKs to be measured.",
    )
    parser.add_argument(
        "--log-path",
        required=True,
        help="Log reference recorded in the payload.",
    )
    parser.add_argument(
        "--measurement-type",
        default=None,
        help="Result type recorded for every SDK (defaults to the config value).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to {CONFIG_FILE_NAME} (must exist when given).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write a timestamped run log to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for sizereport."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(verbose=bool(args.verbose), log_file=args.log_file)
    except OSError as exc:
        parser.exit(1, f"sizereport failed: cannot open log file {args.log_file}: {exc}\n")
    logger = get_logger("cli")

    try:
        if args.config is None:
            config = load_config(Path(CONFIG_FILE_NAME))
        else:
            config = load_config(args.config, required=True)
        measurement_type = args.measurement_type or config.measurement_type
        config_path = write_pod_config(args.sdks, args.sdk_repo_dir, config.pod_config_file)
        measurer = SizeMeasurer(
            args.binary_size_tool_dir,
            config_path,
            settings=config.tool.to_settings(),
        )
        data = ReportGenerator(measurer).create_metrics_request_data(
            args.sdks,
            measurement_type,
            args.log_path,
        )
    except SizeReportError as exc:
        logger.debug("Run aborted", exc_info=True)
        parser.exit(1, f"sizereport failed: {exc}\nRun with --verbose for more details.\n")

    # TODO: send the payload to the metrics service once its endpoint is available.
    print(data.decode("utf-8"))


if __name__ == "__main__":
    main(sys.argv[1:])
