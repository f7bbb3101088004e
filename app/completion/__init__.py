"""Report completion and publish gating."""
from app.completion.evaluator import compute_completion_status, get_flagged_subsection_ids
from app.completion.publish import can_publish, publish_inspection

__all__ = [
    "compute_completion_status",
    "get_flagged_subsection_ids",
    "can_publish",
    "publish_inspection",
]
