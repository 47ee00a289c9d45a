from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .batch import BatchConverter, ConvertSettings
from .messages import MessageCatalog


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="sptconv: convert DOS-era WPS SPT monochrome bitmaps to PNG."
    )
    parser.add_argument("path", nargs="?", help="SPT file or directory to convert recursively")
    parser.add_argument("--lang", help="Message language (en, zh; default: from LANG)")
    parser.add_argument("--strict", action="store_true", help="Fail files whose 64-byte header is incomplete")
    parser.add_argument("--jobs", type=int, default=1, metavar="N", help="Convert N files in parallel")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    messages = MessageCatalog.load(args.lang)
    if not args.path:
        print(messages.format("HelpMsg"), file=sys.stderr)
        return 2
    settings = ConvertSettings(strict_header=args.strict, jobs=max(1, args.jobs))
    converter = BatchConverter(messages, settings)
    try:
        results = converter.run(args.path)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2
    failed = sum(1 for result in results if not result.ok)
    print(messages.format("ExecFinished", converted=len(results) - failed, failed=failed))
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
