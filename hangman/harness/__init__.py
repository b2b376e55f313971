from .core import run_case, run_batch, MAX_RETRIES
from .io import write_csv, write_manifest, summarize

__all__ = ["run_case", "run_batch", "MAX_RETRIES", "write_csv", "write_manifest", "summarize"]
