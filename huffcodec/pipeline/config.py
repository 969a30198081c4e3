from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """
    Configuration for the file compression pipeline.
    """
    verify_roundtrip: bool = True
    skip_empty_files: bool = True
    encoded_suffix: str = "_encoded"
    decoded_suffix: str = "_decoded"
    # The coding tree is written next to each payload; both are needed to decode.
    payload_extension: str = ".huff"
    key_extension: str = ".key.json"
