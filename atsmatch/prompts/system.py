from __future__ import annotations

from atsmatch.core.rules_cache import RulesCache
from atsmatch.scoring.title import DecomposedTitle, decompose_job_title

STRATEGY_MODES = ("keyword", "achievement", "hybrid")
DOCUMENT_TYPES = ("resume", "cv")

HEADLINE_RULE = (
    "HEADLINE RULE: Use the Exact Job Posting Title above as the resume headline verbatim. "
    "Do NOT shorten, rephrase, or reword it. If the title contains a level indicator (II, Senior, Staff, etc.), "
    'include it. If it contains a domain parenthetical (e.g., "Credit Decisioning", "Payments"), include it '
    "exactly as written. The headline must be an exact or near-exact match of the job posting title."
)

BASE_RESUME_PROMPT = (
    "You are a resume consultant focused on applicant tracking system (ATS) alignment. Rewrite the "
    "candidate's resume for the job description provided, selecting the most relevant experience and "
    "phrasing it with the posting's own terminology.\n\n"
    "FACTUAL GROUNDING:\n"
    "- Never invent experience, skills, employers, dates or qualifications.\n"
    "- Never invent metrics. Use only percentages, dollar amounts and team sizes present in the original "
    "resume; otherwise describe the observable technical outcome.\n"
    "- Only name tools, languages and frameworks that already appear in the original resume. For required "
    "skills the candidate lacks, emphasize transferable skills instead of adding the missing skill.\n\n"
    "SELECTION:\n"
    "- Keep roles with any relevance to the posting and pick the 3-4 strongest bullets per role.\n"
    "- Every experience bullet must carry at least one exact keyword from the job description.\n"
    "- Start each bullet with a concrete action verb; never use \"Responsible for\" or \"Tasked with\".\n\n"
    "KEYWORD PLACEMENT:\n"
    "- Placement weight, highest first: headline, professional summary, skills section, experience "
    "bullets, education and certifications.\n"
    "- The top overlapping hard skills should appear 2-3 times across different sections; never exceed "
    "3 mentions of one term or roughly 3% density.\n"
    "- Include both the full term and the acronym for technical abbreviations, e.g. "
    "\"Amazon Web Services (AWS)\".\n"
    "- Prioritize hard skills over soft skills roughly 4:1.\n\n"
    "FORMAT:\n"
    "- Use the exact job posting title as the headline.\n"
    "- Use standard section headings: Professional Summary, Work Experience, Skills, Education, Projects, "
    "Certifications.\n"
    "- Keep contact details (email, phone, LinkedIn URL) in the document body.\n"
    "- Write every date as \"Month YYYY\" with the full month name and keep reverse-chronological order.\n"
    "- Do not use emojis or decorative symbols."
)

STRATEGY_INSTRUCTIONS = {
    "keyword": (
        "\n\nSTRATEGY: STRICT KEYWORD MIRRORING\n"
        "- Maximize coverage of the posting's technical requirements that overlap with the candidate's "
        "actual skills, targeting 80-85% without stuffing.\n"
        "- Prefer the posting's exact phrasing over synonyms in the skills section and bullets.\n"
        "- Achieve coverage through selection: choose bullets that already support the keywords.\n"
        "- Never add a technical skill that is absent from the original resume."
    ),
    "achievement": (
        "\n\nSTRATEGY: ACHIEVEMENT QUANTIFIER\n"
        "- Select and sharpen the candidate's most compelling achievements for this posting.\n"
        "- Use the \"Accomplished [X] as measured by [Y], by doing [Z]\" pattern when a real metric exists.\n"
        "- Keyword coverage is secondary, but overlapping keywords should still appear naturally.\n"
        "- The headline must still be the exact job posting title."
    ),
    "hybrid": (
        "\n\nSTRATEGY: HYBRID (KEYWORD + ACHIEVEMENT)\n"
        "- Balance keyword alignment with achievement-oriented bullets.\n"
        "- Target 70-80% coverage of overlapping technical requirements, only through genuine overlap.\n"
        "- Place the top 5 overlapping hard skills following the placement hierarchy.\n"
        "- For missing metrics, describe technical outcomes instead of inventing numbers."
    ),
}

DOCUMENT_TYPE_INSTRUCTIONS = {
    "resume": (
        "\n\nDOCUMENT TYPE: RESUME\n"
        "- Target two pages, roughly 800-1000 words.\n"
        "- 3-4 bullets per kept role, each one or two lines long.\n"
        "- Summary of 2-3 sentences addressing the posting's top requirements.\n"
        "- Skills section limited to skills that overlap with the posting, in 2-3 subcategories."
    ),
    "cv": (
        "\n\nDOCUMENT TYPE: CV (Curriculum Vitae)\n"
        "- Page limits do not apply; keep the document comprehensive.\n"
        "- Keep all experience, publications, presentations, certifications, research, grants and "
        "affiliations from the original.\n"
        "- Do not trim or summarize roles; use the rules only for formatting and verb guidance."
    ),
}

COVER_LETTER_PROMPT = (
    "You are a cover letter consultant. Write an authentic letter that addresses the top 2-3 problems the "
    "role is being hired to solve and shows how the candidate's real experience fits them.\n\n"
    "STRUCTURE:\n"
    "1. Hook: a specific reference to the company, never \"I am writing to apply for...\".\n"
    "2. Alignment: connect the candidate's trajectory to the company's goals.\n"
    "3. Evidence: for each pain point, one concrete example taken from the resume.\n\n"
    "VOICE:\n"
    "- Sound like a thoughtful professional, vary sentence length and use contractions naturally.\n"
    "- Tell the story behind 2-3 achievements instead of repeating resume bullets.\n"
    "- Avoid stock phrases such as \"I am passionate about\", \"proven track record\", \"cutting-edge\", "
    "\"synergy\" and \"hit the ground running\".\n\n"
    "KEYWORDS:\n"
    "- Weave 3-5 of the posting's highest-priority technical keywords into the narrative, only when the "
    "candidate's resume supports them.\n\n"
    "CONSTRAINTS:\n"
    "- 3-4 paragraphs, approximately 250-400 words, prose rather than bullet points.\n"
    "- Never fabricate experiences, companies, skills or metrics.\n"
    "- Address \"Dear Hiring Team\" unless a name is provided."
)


def strategy_instructions(mode: str | None) -> str:
    return STRATEGY_INSTRUCTIONS.get((mode or "").lower(), STRATEGY_INSTRUCTIONS["hybrid"])


def document_type_instructions(document_type: str | None) -> str:
    return DOCUMENT_TYPE_INSTRUCTIONS.get((document_type or "").lower(), DOCUMENT_TYPE_INSTRUCTIONS["resume"])


def build_resume_system_prompt(
    cache: RulesCache,
    strategy_mode: str = "hybrid",
    document_type: str = "resume",
) -> str:
    """Base instructions, then rules, then strategy, then document type.

    Later blocks carry the most weight with the model, so the page and bullet
    budget of the document type comes last.
    """
    prompt = BASE_RESUME_PROMPT
    rules = cache.resume_rules()
    if rules:
        prompt += f"\n\nThe following rules MUST be followed when tailoring the resume:\n{rules}"
    prompt += strategy_instructions(strategy_mode)
    prompt += document_type_instructions(document_type)
    return prompt


def build_cover_letter_system_prompt(cache: RulesCache) -> str:
    prompt = COVER_LETTER_PROMPT
    rules = cache.cover_letter_rules()
    if rules:
        prompt += f"\n\nThe following cover letter rules MUST be followed:\n{rules}"
    return prompt


def build_headline_guidance(decomposed: DecomposedTitle | str) -> str:
    """The "[Headline Guidance]" block sent alongside the job description."""
    if isinstance(decomposed, str):
        decomposed = decompose_job_title(decomposed)
    lines = ["[Headline Guidance]", f"Exact Job Posting Title: {decomposed.raw_title}", f"Core Role: {decomposed.core_role}"]
    if decomposed.level:
        lines.append(f"Level: {decomposed.level}")
    if decomposed.qualifiers:
        lines.append(f"Qualifiers: {', '.join(decomposed.qualifiers)}")
    if decomposed.tech_stack:
        lines.append(f"Tech Stack Keywords: {', '.join(decomposed.tech_stack)}")
    lines.append(HEADLINE_RULE)
    return "\n".join(lines)
