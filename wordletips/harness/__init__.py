from .core import run_case, run_batch
from .io import summarize, write_csv, write_manifest, timestamp_id

__all__ = ["run_case", "run_batch", "summarize", "write_csv", "write_manifest", "timestamp_id"]
