import argparse
import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from app.backend.process import build_archive_for_records, ensure_output_dir, write_json_output
from recibos.config import get_settings
from recibos.errors import ReceiptError
from recibos.logger import set_level
from recibos.router import parse_file


def parse_args(argv=None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Read a payroll spreadsheet or photo and write one PDF receipt per employee into a ZIP."
    )
    parser.add_argument(
        "--input",
        required=True,
        help="Spreadsheet (.xlsx, .xls, .csv) or image (.jpg, .png) path.",
    )
    parser.add_argument(
        "--start",
        type=int,
        default=settings.DEFAULT_START_RECEIPT_NUMBER,
        help="Number of the first receipt (default: %(default)s).",
    )
    parser.add_argument(
        "--output",
        default=settings.ARCHIVE_FILENAME,
        help="ZIP file to write (default: %(default)s).",
    )
    parser.add_argument(
        "--json",
        default=None,
        help="Also write the parsed headers, mapping and records to this JSON file.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log extraction and rendering details (DEBUG level).",
    )
    parser.add_argument(
        "--parse-only",
        action="store_true",
        help="Stop after parsing; do not render receipts.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)
    input_path = Path(args.input).expanduser()
    if not input_path.is_file():
        print(f"[error] input not found: {args.input}")
        return 1

    try:
        result = parse_file(str(input_path))
    except ReceiptError as e:
        print(f"[error] {e}")
        return 1

    print(f"Employees found: {len(result.data)}")
    for field, header in result.mapping.items():
        print(f"  {field}: {header or 'Não encontrado'}")

    if args.json:
        print("JSON:", write_json_output(result, args.json))
    if args.parse_only:
        return 0

    try:
        archive = build_archive_for_records(result.data, args.start)
    except ReceiptError as e:
        print(f"[error] {e}")
        return 1

    output_path = Path(args.output).expanduser()
    ensure_output_dir(str(output_path.parent))
    output_path.write_bytes(archive)
    print("ZIP:", output_path.resolve())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
