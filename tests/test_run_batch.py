import csv
import json
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from huffcodec.errors import EmptyInputError
from huffcodec.pipeline import PipelineConfig, compression_ratio, encode_file_bytes, run_batch_on_folder
from huffcodec.pipeline import runner
from huffcodec.reporting.report import generate_report
from huffcodec.utils.file_utils import add_suffix_to_top_level, mirror_output_path


def _make_inputs(root: Path) -> None:
    (root / "logs").mkdir(parents=True)
    (root / "logs" / "app.log").write_bytes(b"INFO started\nINFO ready\nWARN slow\n" * 20)
    (root / "notes.txt").write_bytes(b"huffman notes")
    (root / "empty.txt").write_bytes(b"")


def test_compression_ratio():
    assert compression_ratio(200, 50) == 25.0
    with pytest.raises(ValueError):
        compression_ratio(0, 1)


def test_encode_file_bytes_verifies_roundtrip():
    data = b"round and round"
    result = encode_file_bytes(data, PipelineConfig())

    assert result.decoded == data
    assert result.original_size == len(data)
    assert result.encoded_size == len(result.encoded.data)


def test_encode_file_bytes_without_verification():
    result = encode_file_bytes(b"no check", PipelineConfig(verify_roundtrip=False))

    assert result.decoded is None


def test_encode_file_bytes_detects_mismatch(monkeypatch):
    monkeypatch.setattr(runner, "huffman_decode", lambda tree, data: [0])

    with pytest.raises(RuntimeError):
        encode_file_bytes(b"mismatch", PipelineConfig())


def test_encode_file_bytes_empty_input():
    with pytest.raises(EmptyInputError):
        encode_file_bytes(b"")


def test_write_and_read_encoded(tmp_path):
    data = b"persist the key next to the payload"
    result = encode_file_bytes(data)
    payload_path = tmp_path / "out" / "data.huff"
    key_path = tmp_path / "out" / "data.huff.key.json"

    runner.write_encoded(result, payload_path, key_path)
    tree, payload, meta = runner.read_encoded(payload_path, key_path)

    assert payload == result.encoded.data
    assert meta == {"original_size": len(data), "bit_length": result.encoded.bit_length}
    assert runner.decode_file_bytes(tree, payload) == data


def test_mirror_output_path():
    out = Path("/out")

    assert add_suffix_to_top_level(Path("."), "_x") == Path(".")
    assert mirror_output_path(Path("logs/app/server.log"), out, "_encoded", ".huff") == Path(
        "/out/logs_encoded/app/server_encoded.log.huff"
    )
    assert mirror_output_path(Path("README"), out, "_decoded") == Path("/out/README_decoded")


def test_run_batch_on_folder(tmp_path, capsys):
    input_root = tmp_path / "input"
    output_root = tmp_path / "output"
    _make_inputs(input_root)

    rows = run_batch_on_folder(input_root, output_root, PipelineConfig())
    by_path = {row["input_path"]: row for row in rows}

    assert by_path["empty.txt"]["status"] == "skipped_empty"
    assert by_path["notes.txt"]["status"] == "ok"
    assert by_path[str(Path("logs/app.log"))]["compression_ratio"] < 100.0

    encoded_dir = output_root / "out_encoded" / "logs_encoded"
    assert (encoded_dir / "app_encoded.log.huff").exists()
    assert (encoded_dir / "app_encoded.log.huff.key.json").exists()
    decoded = output_root / "out_decoded" / "logs_decoded" / "app_decoded.log"
    assert decoded.read_bytes() == (input_root / "logs" / "app.log").read_bytes()

    out = capsys.readouterr().out
    assert "Processing:" in out
    assert "Size reduction:" in out


def test_run_batch_records_empty_file_error_and_continues(tmp_path):
    input_root = tmp_path / "input"
    output_root = tmp_path / "output"
    _make_inputs(input_root)

    rows = run_batch_on_folder(input_root, output_root, PipelineConfig(skip_empty_files=False))
    by_path = {row["input_path"]: row for row in rows}

    assert len(rows) == 3
    assert by_path["empty.txt"]["status"] == "error"
    assert "empty input" in by_path["empty.txt"]["error"]
    assert by_path["notes.txt"]["status"] == "ok"
    assert by_path[str(Path("logs/app.log"))]["status"] == "ok"
    assert (output_root / "out_decoded" / "logs_decoded" / "app_decoded.log").exists()


def test_generate_report(tmp_path):
    input_root = tmp_path / "input"
    output_root = tmp_path / "output"
    report_dir = tmp_path / "report"
    _make_inputs(input_root)
    run_batch_on_folder(input_root, output_root)

    report = generate_report(input_root, output_root, report_dir)
    by_path = {row["input_path"]: row for row in report["files"]}

    assert report["summary"]["total_files"] == 3
    assert report["summary"]["success_count"] == 2
    assert by_path["empty.txt"]["status"] == "missing_encoded"
    assert by_path["notes.txt"]["success"] is True

    with (report_dir / "report.csv").open(newline="", encoding="utf-8") as fh:
        assert len(list(csv.DictReader(fh))) == 3
    payload = json.loads((report_dir / "report.json").read_text(encoding="utf-8"))
    assert payload["summary"]["total_original_bytes"] == report["summary"]["total_original_bytes"]


def test_generate_report_with_baseline(tmp_path):
    pytest.importorskip("dahuffman")
    input_root = tmp_path / "input"
    output_root = tmp_path / "output"
    _make_inputs(input_root)
    run_batch_on_folder(input_root, output_root)

    report = generate_report(input_root, output_root, tmp_path / "report", formats=["json"], baseline=True)
    row = next(r for r in report["files"] if r["input_path"] == "notes.txt")

    assert row["baseline_size_bytes"] > 0
    assert not (tmp_path / "report" / "report.csv").exists()


def test_decode_encoded_file_checks_recorded_size(tmp_path):
    data = b"size is recorded in the key"
    payload_path = tmp_path / "data.huff"
    key_path = tmp_path / "data.huff.key.json"
    runner.write_encoded(encode_file_bytes(data), payload_path, key_path)

    assert runner.decode_encoded_file(payload_path, key_path) == data

    meta = json.loads(key_path.read_text(encoding="utf-8"))
    meta["original_size"] = len(data) + 1
    key_path.write_text(json.dumps(meta), encoding="utf-8")
    with pytest.raises(RuntimeError):
        runner.decode_encoded_file(payload_path, key_path)
