from pathlib import Path


def add_suffix_to_top_level(rel_dir: Path, suffix: str) -> Path:
    """
    Add a suffix to the first component of a relative directory.

    Example:
        'logs/2024' + '_encoded' -> 'logs_encoded/2024'
        '.'         + '_encoded' -> '.'
    """
    parts = list(rel_dir.parts)
    if not parts:
        return Path()
    parts[0] += suffix
    return Path(*parts)


def mirror_output_path(rel_path: Path, out_root: Path, suffix: str, extension: str = "") -> Path:
    """
    Place `rel_path` under `out_root`, tagging its top-level directory and
    its file stem with `suffix`, then appending `extension`.

    Example:
        'logs/app/server.log', '_encoded', '.huff'
        -> <out_root>/logs_encoded/app/server_encoded.log.huff
    """
    rel_dir = add_suffix_to_top_level(rel_path.parent, suffix)
    name = rel_path.stem + suffix + rel_path.suffix + extension
    return out_root / rel_dir / name
