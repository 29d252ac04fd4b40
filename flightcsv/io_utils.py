from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterable, Optional


class SetupError(RuntimeError):
    """Input/output paths are not usable; raised before any row is read."""


def resolve_input_path(raw: str) -> Path:
    """Return the absolute input path, which must be an existing regular file."""
    p = Path(raw).expanduser().resolve()
    if not p.exists():
        raise SetupError(f"Input file not found: {p}")
    if not p.is_file():
        raise SetupError(f"Input path is not a file: {p}")
    if not os.access(p, os.R_OK):
        raise SetupError(f"Input file is not readable: {p}")
    return p


def derive_error_path(output_path: Path, error_file_name: str = "errors.csv") -> Path:
    """The error file always sits next to the output file under a fixed name."""
    return (output_path.parent / error_file_name).resolve()


def prepare_output_paths(input_path: Path, raw_output: str, error_file_name: str = "errors.csv") -> tuple[Path, Path]:
    """Resolve output and error paths and check they can be written.

    - Output directory is created if missing.
    - Neither output may be the input file, and they may not coincide.
    """
    output_path = Path(raw_output).expanduser().resolve()
    error_path = derive_error_path(output_path, error_file_name)

    if output_path == input_path or error_path == input_path:
        raise SetupError(f"Refusing to overwrite the input file: {input_path}")
    if output_path == error_path:
        raise SetupError(f"Output file collides with the error file: {output_path}")

    for p in (output_path, error_path):
        if p.is_dir():
            raise SetupError(f"Output path is a directory: {p}")

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SetupError(f"Cannot create output directory {output_path.parent}: {e}") from e
    if not os.access(output_path.parent, os.W_OK):
        raise SetupError(f"Output directory is not writable: {output_path.parent}")
    for p in (output_path, error_path):
        if p.exists() and not os.access(p, os.W_OK):
            raise SetupError(f"Output file is not writable: {p}")

    return output_path, error_path


def confirm_overwrite(paths: Iterable[Path], prompt: Optional[Callable[[str], str]] = None) -> bool:
    """Ask once per existing file whether it may be replaced.

    Only 'y'/'yes' counts as consent; end of input is treated as 'no'.
    """
    ask = prompt or input
    for p in paths:
        if not p.exists():
            continue
        try:
            answer = ask(f"{p} already exists. Overwrite? [y/N]: ").strip().lower()
        except EOFError:
            answer = ""
        if answer not in {"y", "yes"}:
            return False
    return True
