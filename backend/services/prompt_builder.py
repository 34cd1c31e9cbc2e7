"""Prompt templates for Gemini API calls."""


def _bullet_list(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items) if items else "- (none provided)"


def build_section_quality_prompt(payload: dict) -> str:
    """Section quality analysis against the target job.

    ``payload`` carries content, requirements, ats_keywords, seniority,
    industry and job_title.
    """
    job_context = ", ".join(
        f"{label}: {payload[key]}"
        for label, key in (("Title", "job_title"), ("Seniority", "seniority"), ("Industry", "industry"))
        if payload.get(key)
    ) or "not specified"

    return f"""You are an expert ATS (Applicant Tracking System) and resume analyst.

Evaluate the quality of this resume section for the target job.

TARGET JOB: {job_context}

JOB REQUIREMENTS:
{_bullet_list(payload.get("requirements", []))}

ATS KEYWORDS:
{_bullet_list(payload.get("ats_keywords", []))}

SECTION CONTENT:
---
{payload.get("content", "")}
---

SCORING RUBRIC (follow strictly):
- overall_score: 0-100 overall quality of the section for this job
- ats_match_percentage: 0-100 share of ATS keywords naturally present
- requirements_coverage: 0-100 share of requirements the section addresses
- competitive_strength: 1-5 versus other candidates at this seniority

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "overall_score": <integer 0-100>,
  "ats_match_percentage": <integer 0-100>,
  "requirements_coverage": <integer 0-100>,
  "competitive_strength": <integer 1-5>,
  "strengths": [<2-4 specific strengths quoting the section>],
  "weaknesses": [<2-4 specific gaps referencing the requirements>],
  "keywords_matched": [<ATS keywords present in the section>],
  "keywords_missing": [<ATS keywords absent from the section>]
}}"""
