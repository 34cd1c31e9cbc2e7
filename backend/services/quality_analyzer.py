"""Default AI section-quality capability backed by Gemini."""

from services import gemini_client, prompt_builder


async def analyze_section_quality(payload: dict) -> dict:
    """Ask Gemini to grade a resume section.

    Returns the raw response dict; errors propagate as ``GeminiError``.
    """
    prompt = prompt_builder.build_section_quality_prompt(payload)
    return await gemini_client.generate_json(prompt)
