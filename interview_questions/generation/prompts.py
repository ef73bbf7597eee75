"""
Prompt Contract

The fixed system instruction and user turn sent to the generation service.
The model is asked for a bare JSON array of {question, category} objects;
the response validator does not trust it to comply.
"""

from .schemas import GenerationRequest


# ─── Generation parameters ─────────────────────────────────────────────────────

# Enough room for ~15 verbose questions wrapped in JSON
MAX_OUTPUT_TOKENS = 2500

# Favour variety over determinism
TEMPERATURE = 0.7

# Advisory quota ranges (inclusive) mirrored by check_category_quotas()
TOTAL_QUESTIONS_RANGE = (10, 15)
CATEGORY_QUOTAS = {
    ("Skills",): (3, 4),
    ("Projects", "Experience"): (4, 5),
    ("Behavioral",): (2, 3),
    ("Problem-Solving",): (1, 2),
}


# ─── Prompts ───────────────────────────────────────────────────────────────────

SYSTEM_PROMPT = """You are an expert interviewer with years of experience in technical and behavioral interviews. Analyze the candidate's resume thoroughly and generate a comprehensive, tailored set of interview questions.

Generate 10-15 diverse, high-quality interview questions covering:
- Technical Skills (3-4 questions) - Focus on specific technologies, frameworks, and tools mentioned
- Projects & Experience (4-5 questions) - Deep dive into past projects, achievements, and work experience
- Behavioral & Soft Skills (2-3 questions) - Teamwork, leadership, communication, conflict resolution
- Problem-Solving & Critical Thinking (1-2 questions) - Analytical thinking and problem-solving approaches

Guidelines:
- Make questions specific to the candidate's background and experience
- Include follow-up potential questions where appropriate
- Vary question difficulty from foundational to advanced
- Ensure questions are actionable and help assess real competency

Format your response as a JSON array where each question is an object with:
- "question": the question text (clear, concise, and specific)
- "category": one of "Skills", "Projects", "Experience", "Behavioral", "Problem-Solving"

Return ONLY valid JSON array, no additional text, no markdown code blocks."""

USER_PROMPT = """Please analyze this resume and generate tailored interview questions:

{resume}"""


def build_generation_request(resume_text: str) -> GenerationRequest:
    """Wrap the extracted resume text (verbatim) in the fixed contract."""
    return GenerationRequest(
        system_instruction=SYSTEM_PROMPT,
        user_message=USER_PROMPT.format(resume=resume_text),
        max_output_tokens=MAX_OUTPUT_TOKENS,
        temperature=TEMPERATURE,
    )
