"""
Question Generation Pipeline
interview_questions/generation/

Steps:
1. Prompt Contract     — fixed system instruction + resume as the user turn
2. LLM Client          — OpenAI-compatible chat completion (Groq by default)
3. Response Validator  — de-fence, parse, all-or-nothing shape check
4. Quota Check         — advisory category-balance warnings
"""
