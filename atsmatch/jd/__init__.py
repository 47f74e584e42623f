from .metadata import extract_requirement_metadata
from .pipeline import FEW_SKILLS_WARNING, process_jd, sanitize_job_paste
from .requirements import distill_requirements
from .segmenter import segment_jd_sections
from .skills import SkillExtraction, extract_skills

__all__ = [
    "FEW_SKILLS_WARNING",
    "SkillExtraction",
    "distill_requirements",
    "extract_requirement_metadata",
    "extract_skills",
    "process_jd",
    "sanitize_job_paste",
    "segment_jd_sections",
]
