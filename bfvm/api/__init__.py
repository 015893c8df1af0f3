from .run import RunReport, run_file, run_source

__all__ = [
    "RunReport",
    "run_file",
    "run_source",
]
