from .feedback import verify_feedback_applied
from .gaps import detect_employment_gaps
from .headings import validate_section_headings
from .keywords import validate_tailored_content
from .metrics import validate_no_fabricated_metrics
from .phrases import validate_no_new_phrases
from .scope import detect_scope_inflation
from .suite import run_validation_suite

__all__ = [
    "detect_employment_gaps",
    "detect_scope_inflation",
    "run_validation_suite",
    "validate_no_fabricated_metrics",
    "validate_no_new_phrases",
    "validate_section_headings",
    "validate_tailored_content",
    "verify_feedback_applied",
]
