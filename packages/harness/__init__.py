from .core import run_case, run_batch
from .io import write_csv, timestamp_id

__all__ = ["run_case", "run_batch", "write_csv", "timestamp_id"]
