import os
from typing import Optional

OUT_DIR_ENV = "MINPQ_OUT_DIR"
DEFAULT_OUT_DIR = "./out"


def get_out_path(out_dir: Optional[str] = None) -> str:
    """
    Returns the directory evaluation results are written to and creates it if needed.
    An explicit out_dir wins over the MINPQ_OUT_DIR environment variable,
    which wins over ./out.
    """
    if out_dir is None:
        out_dir = os.environ.get(OUT_DIR_ENV, DEFAULT_OUT_DIR)
    out_path = os.path.expanduser(out_dir)
    if os.path.exists(out_path) and not os.path.isdir(out_path):
        raise NotADirectoryError(
            f"The output path {out_path} exists but is not a directory!"
        )
    os.makedirs(out_path, exist_ok=True)
    return out_path
