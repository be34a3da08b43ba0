from .distance import Op, build_table, edit_distance, reconstruct, transformation_list
from .replay import replay
from .constraints import normalize_transforms, is_consistent, filter_candidates, apply_feedback

__all__ = [
    "Op", "build_table", "edit_distance", "reconstruct", "transformation_list",
    "replay", "normalize_transforms", "is_consistent", "filter_candidates", "apply_feedback",
]
