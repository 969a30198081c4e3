from huffcodec.pipeline.config import PipelineConfig
from huffcodec.pipeline.runner import (
    FileCodingResult,
    compression_ratio,
    decode_file_bytes,
    encode_file_bytes,
)


def run_batch_on_folder(*args, **kwargs):
    # Lazy import so importing `huffcodec.pipeline` doesn't walk into the
    # batch driver's file-system helpers unless batch execution is requested.
    from huffcodec.utils.batch import run_batch_on_folder as _run_batch_on_folder

    return _run_batch_on_folder(*args, **kwargs)


__all__ = [
    "FileCodingResult",
    "PipelineConfig",
    "compression_ratio",
    "decode_file_bytes",
    "encode_file_bytes",
    "run_batch_on_folder",
]
