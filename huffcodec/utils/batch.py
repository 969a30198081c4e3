import os
from pathlib import Path
from typing import Dict, List

from huffcodec.errors import HuffmanError
from huffcodec.pipeline.config import PipelineConfig
from huffcodec.pipeline.runner import encode_file_bytes, write_encoded
from huffcodec.utils.file_utils import mirror_output_path


def run_batch_on_folder(
    input_root: Path,
    output_root: Path,
    cfg: PipelineConfig | None = None,
) -> List[Dict[str, object]]:
    """
    Compress every file under `input_root`.

    Payloads and keys go to `<output_root>/out_encoded`, verified round-trip
    copies to `<output_root>/out_decoded`. Returns one row per file.
    """
    if cfg is None:
        cfg = PipelineConfig()

    input_root = input_root.resolve()
    output_root = output_root.resolve()

    out_encoded_root = output_root / "out_encoded"
    out_decoded_root = output_root / "out_decoded"

    rows: List[Dict[str, object]] = []
    for root, _, files in os.walk(input_root):
        root_path = Path(root)
        for filename in sorted(files):
            in_path = root_path / filename
            print("Processing:", in_path)
            rows.append(
                process_file(
                    in_path=in_path,
                    rel_path=in_path.relative_to(input_root),
                    out_encoded_root=out_encoded_root,
                    out_decoded_root=out_decoded_root,
                    cfg=cfg,
                )
            )
    return rows


def process_file(
    in_path: Path,
    rel_path: Path,
    out_encoded_root: Path,
    out_decoded_root: Path,
    cfg: PipelineConfig,
) -> Dict[str, object]:
    data = in_path.read_bytes()
    row: Dict[str, object] = {
        "input_path": str(rel_path),
        "original_size_bytes": len(data),
    }

    if not data and cfg.skip_empty_files:
        print("Skipping empty file:", in_path)
        row["status"] = "skipped_empty"
        return row

    try:
        result = encode_file_bytes(data, cfg)
    except HuffmanError as exc:
        print(f"Encoding failed for {in_path}: {exc}")
        row["status"] = "error"
        row["error"] = str(exc)
        return row

    payload_path = mirror_output_path(
        rel_path, out_encoded_root, cfg.encoded_suffix, cfg.payload_extension
    )
    key_path = mirror_output_path(
        rel_path, out_encoded_root, cfg.encoded_suffix, cfg.payload_extension + cfg.key_extension
    )
    write_encoded(result, payload_path, key_path)
    print(
        f"Size reduction: {result.original_size} => {result.encoded_size} "
        f"({result.ratio:.2f}%)"
    )

    if result.decoded is not None:
        decoded_path = mirror_output_path(rel_path, out_decoded_root, cfg.decoded_suffix)
        decoded_path.parent.mkdir(parents=True, exist_ok=True)
        decoded_path.write_bytes(result.decoded)

    row.update(
        {
            "status": "ok",
            "encoded_size_bytes": result.encoded_size,
            "bit_length": result.encoded.bit_length,
            "compression_ratio": result.ratio,
        }
    )
    return row
