from __future__ import annotations

import argparse
import sys
from pathlib import Path

from crowdin_bridge import telemetry
from crowdin_bridge.application.convert import (
    canonical_to_crowdin,
    crowdin_to_canonical,
)
from crowdin_bridge.config import (
    CROWDIN_DIR,
    TRANSLATIONS_JSON,
    config_path,
    load_config,
)
from crowdin_bridge.errors import BridgeError, MissingBaseLanguageError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Convert a canonical translations.json into per-language Crowdin "
            "files (tr_<code>.json) and back."
        )
    )
    parser.add_argument(
        "-i",
        "--input",
        default=TRANSLATIONS_JSON,
        help="Input path for transforming (default: %(default)s).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=CROWDIN_DIR,
        help="Output path for saving transformation (default: %(default)s).",
    )
    parser.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Rebuild the canonical file from a directory of tr_<code>.json files.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="JSON config file (falls back to $CROWDIN_BRIDGE_CONFIG).",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=None,
        help="Export languages in parallel with N threads.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def transform_default_args(
    reverse: bool, input_path: str, output_path: str
) -> tuple[str, str]:
    """Point a bare `--reverse` at the default Crowdin directory.

    With both paths left at their defaults, reverse mode reads `crowdin/` and
    writes `crowdin/translations.json`.
    """
    if reverse and input_path == TRANSLATIONS_JSON and output_path == CROWDIN_DIR:
        return output_path, str(Path(output_path) / TRANSLATIONS_JSON)
    return input_path, output_path


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be >= 1")
    input_path, output_path = transform_default_args(
        args.reverse, args.input, args.output
    )
    telemetry.setup(verbose=args.verbose)
    try:
        config = load_config(config_path(args.config))
        telemetry.log_event(
            "run.start",
            reverse=args.reverse,
            input=input_path,
            output=output_path,
        )
        if args.reverse:
            stats = crowdin_to_canonical(Path(input_path), Path(output_path), config)
        else:
            stats = canonical_to_crowdin(
                Path(input_path),
                Path(output_path),
                config,
                max_workers=args.workers,
            )
    except MissingBaseLanguageError as exc:
        telemetry.log_error("run.failed", exc)
        print(f"error: {exc}", file=sys.stderr)
        print(
            f"hint: add the {exc.base_language!r} language file to the input directory",
            file=sys.stderr,
        )
        return 1
    except (BridgeError, OSError) as exc:
        telemetry.log_error("run.failed", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        telemetry.shutdown()
    print(
        f"sentences={stats.sentences} languages={len(stats.languages)} out={output_path}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
