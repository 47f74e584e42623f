from .ats import compute_ats_score
from .cover_letter import AI_ISM_BLACKLIST, score_cover_letter
from .gate import ParsingGateResult, check_parsing_gate
from .title import DecomposedTitle, decompose_job_title, normalize_title

__all__ = [
    "AI_ISM_BLACKLIST",
    "DecomposedTitle",
    "ParsingGateResult",
    "check_parsing_gate",
    "compute_ats_score",
    "decompose_job_title",
    "normalize_title",
    "score_cover_letter",
]
