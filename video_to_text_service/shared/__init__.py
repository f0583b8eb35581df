from .artifacts import find_candidates, is_fragment, locate_artifact
from .fs__shared_util import ensure_directory, list_file_names, remove_tree, rename_into_place, which
from .logger import RequestLogger
from .process import ProcessResult, ProcessRunner, run_process

__all__ = [
    "find_candidates",
    "is_fragment",
    "locate_artifact",
    "ensure_directory",
    "list_file_names",
    "remove_tree",
    "rename_into_place",
    "which",
    "RequestLogger",
    "ProcessResult",
    "ProcessRunner",
    "run_process",
]
