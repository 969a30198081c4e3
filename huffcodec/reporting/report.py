from __future__ import annotations

import argparse
import csv
import json
import statistics
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from huffcodec.pipeline.config import PipelineConfig
from huffcodec.pipeline.runner import compression_ratio
from huffcodec.utils.file_utils import mirror_output_path

REPORT_COLUMNS = [
    "input_path",
    "status",
    "original_size_bytes",
    "encoded_size_bytes",
    "compression_ratio",
    "decoded_size_bytes",
    "success",
    "baseline_size_bytes",
    "baseline_ratio",
]


def _baseline_size(data: bytes) -> int:
    # Lazy import: dahuffman is only needed when a baseline is requested.
    from dahuffman import HuffmanCodec

    return len(HuffmanCodec.from_data(data).encode(data))


def _iter_files(root: Path) -> Iterable[Path]:
    return sorted(p for p in root.rglob("*") if p.is_file())


def _format_csv_value(value: object) -> object:
    if value is None:
        return ""
    return value


def generate_report(
    input_root: Path,
    output_root: Path,
    report_dir: Path,
    formats: Sequence[str] = ("csv", "json"),
    baseline: bool = False,
    cfg: Optional[PipelineConfig] = None,
) -> Dict[str, object]:
    """
    Compare pipeline outputs under `output_root` with the originals.

    Every input file gets one row; a file without a payload is reported as
    `missing_encoded`, one without a decoded copy as `missing_decoded`.
    """
    if cfg is None:
        cfg = PipelineConfig()

    input_root = input_root.resolve()
    output_root = output_root.resolve()
    report_dir = report_dir.resolve()

    rows: List[Dict[str, object]] = []
    total_original_bytes = 0
    total_encoded_bytes = 0
    success_count = 0
    ratios: List[float] = []

    for input_file in _iter_files(input_root):
        rel_path = input_file.relative_to(input_root)
        original_bytes = input_file.read_bytes()
        row: Dict[str, object] = {
            "input_path": str(rel_path),
            "status": "ok",
            "original_size_bytes": len(original_bytes),
            "success": False,
        }
        total_original_bytes += len(original_bytes)

        payload_path = mirror_output_path(
            rel_path, output_root / "out_encoded", cfg.encoded_suffix, cfg.payload_extension
        )
        decoded_path = mirror_output_path(
            rel_path, output_root / "out_decoded", cfg.decoded_suffix
        )

        if payload_path.exists():
            encoded_size = payload_path.stat().st_size
            total_encoded_bytes += encoded_size
            row["encoded_size_bytes"] = encoded_size
            if original_bytes:
                ratio = compression_ratio(len(original_bytes), encoded_size)
                row["compression_ratio"] = ratio
                ratios.append(ratio)
        else:
            row["status"] = "missing_encoded"

        if decoded_path.exists():
            decoded_bytes = decoded_path.read_bytes()
            row["decoded_size_bytes"] = len(decoded_bytes)
            row["success"] = decoded_bytes == original_bytes
            if row["success"]:
                success_count += 1
        elif row["status"] == "ok":
            row["status"] = "missing_decoded"

        if baseline and original_bytes:
            baseline_size = _baseline_size(original_bytes)
            row["baseline_size_bytes"] = baseline_size
            row["baseline_ratio"] = compression_ratio(len(original_bytes), baseline_size)

        rows.append(row)

    report_dir.mkdir(parents=True, exist_ok=True)
    formats = [fmt.lower() for fmt in formats]

    summary = {
        "total_files": len(rows),
        "success_count": success_count,
        "success_rate": (success_count / len(rows)) if rows else 0.0,
        "total_original_bytes": total_original_bytes,
        "total_encoded_bytes": total_encoded_bytes,
        "mean_compression_ratio": statistics.mean(ratios) if ratios else 0.0,
        "median_compression_ratio": statistics.median(ratios) if ratios else 0.0,
    }

    meta = {
        "input_root": str(input_root),
        "output_root": str(output_root),
        "report_dir": str(report_dir),
        "generated_at_utc": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }

    if "csv" in formats:
        csv_path = report_dir / "report.csv"
        with csv_path.open("w", newline="", encoding="utf-8") as csv_file:
            writer = csv.DictWriter(csv_file, fieldnames=REPORT_COLUMNS)
            writer.writeheader()
            for row in rows:
                writer.writerow({k: _format_csv_value(row.get(k)) for k in REPORT_COLUMNS})

    if "json" in formats:
        json_path = report_dir / "report.json"
        report_payload = {"meta": meta, "summary": summary, "files": rows}
        json_path.write_text(json.dumps(report_payload, indent=2), encoding="utf-8")

    return {"meta": meta, "summary": summary, "files": rows}


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate compression reports for Huffman pipeline outputs.",
    )
    parser.add_argument("--input-root", required=True, help="Path to original input data root.")
    parser.add_argument("--output-root", required=True, help="Path to pipeline output root.")
    parser.add_argument(
        "--report-dir",
        default="",
        help="Output directory for reports (default: <output-root>/report).",
    )
    parser.add_argument(
        "--formats",
        default="csv,json",
        help="Comma-separated list of formats: csv,json (default: csv,json).",
    )
    parser.add_argument(
        "--baseline",
        action="store_true",
        help="Also record the size produced by the dahuffman reference codec.",
    )
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    output_root = Path(args.output_root)
    report_dir = Path(args.report_dir) if args.report_dir else output_root / "report"
    formats = [fmt.strip() for fmt in args.formats.split(",") if fmt.strip()]
    generate_report(
        input_root=Path(args.input_root),
        output_root=output_root,
        report_dir=report_dir,
        formats=formats,
        baseline=args.baseline,
    )
    print(f"Report written to {report_dir}")


if __name__ == "__main__":
    main()
