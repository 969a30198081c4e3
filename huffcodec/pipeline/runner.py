from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from huffcodec.coding.codec import HuffmanEncoded, huffman_decode, huffman_encode
from huffcodec.coding.tree import CodingTree
from huffcodec.pipeline.config import PipelineConfig
from huffcodec.serialization.key_format import dump_key, load_key


@dataclass
class FileCodingResult:
    """
    Outcome of compressing one file.

    - decoded: bytes recovered during round-trip verification, or None when
      verification is disabled
    """
    encoded: HuffmanEncoded
    original_size: int
    decoded: Optional[bytes] = None

    @property
    def encoded_size(self) -> int:
        return len(self.encoded.data)

    @property
    def ratio(self) -> float:
        return compression_ratio(self.original_size, self.encoded_size)


def compression_ratio(original_size: int, encoded_size: int) -> float:
    """Encoded size as a percentage of the original size."""
    if original_size <= 0:
        raise ValueError("original_size must be positive")
    return 100.0 * encoded_size / original_size


def encode_file_bytes(data: bytes, cfg: Optional[PipelineConfig] = None) -> FileCodingResult:
    """
    Huffman-encode raw file bytes, optionally checking that they decode back.
    """
    if cfg is None:
        cfg = PipelineConfig()

    encoded = huffman_encode(data)
    result = FileCodingResult(encoded=encoded, original_size=len(data))

    if cfg.verify_roundtrip:
        decoded = decode_file_bytes(encoded.tree, encoded.data)
        if decoded != data:
            raise RuntimeError("Round-trip verification failed: decoded bytes differ from input.")
        result.decoded = decoded

    return result


def decode_file_bytes(tree: CodingTree, payload: bytes) -> bytes:
    return bytes(huffman_decode(tree, payload))


def write_encoded(result: FileCodingResult, payload_path: Path, key_path: Path) -> None:
    payload_path.parent.mkdir(parents=True, exist_ok=True)
    key_path.parent.mkdir(parents=True, exist_ok=True)
    payload_path.write_bytes(result.encoded.data)
    key_path.write_text(
        dump_key(
            result.encoded.tree,
            original_size=result.original_size,
            bit_length=result.encoded.bit_length,
        ),
        encoding="utf-8",
    )


def read_encoded(payload_path: Path, key_path: Path) -> Tuple[CodingTree, bytes, Dict[str, Any]]:
    tree, meta = load_key(key_path.read_text(encoding="utf-8"))
    return tree, payload_path.read_bytes(), meta


def decode_encoded_file(payload_path: Path, key_path: Path) -> bytes:
    """
    Decode a payload written by `write_encoded`, checking the recovered size
    against the one recorded in its key.
    """
    tree, payload, meta = read_encoded(payload_path, key_path)
    decoded = decode_file_bytes(tree, payload)
    expected = meta.get("original_size")
    if expected is not None and len(decoded) != expected:
        raise RuntimeError(
            f"Decoded {len(decoded)} bytes but the key records {expected}; "
            "payload and key do not match."
        )
    return decoded
