from .engine import Op, build_table, edit_distance, reconstruct, transformation_list
from .exceptions import DistleError, TableInvariantError, CandidatesExhaustedError

__all__ = [
    "Op", "build_table", "edit_distance", "reconstruct", "transformation_list",
    "DistleError", "TableInvariantError", "CandidatesExhaustedError",
]
