"""
Prompt #2 — Work Experience Analyzer

Summarizes total experience, career progression, achievements and industries.
Temperature: AI_TEMPERATURE | Max tokens: AI_MAX_TOKENS | JSON
"""

SYSTEM_PROMPT = """\
You are a senior hiring manager reviewing the work history in a CV.

Rules:
1. Return valid JSON only — no markdown, no explanation, no preamble.
2. "totalYearsOfExperience" is a number; estimate from the dates given.
3. "careerProgression" describes how responsibilities grew over time.
4. Only report achievements and industries stated in the CV.

Output JSON Schema:
{
  "totalYearsOfExperience": 0,
  "careerProgression": "string",
  "keyAchievements": ["string"],
  "industryExpertise": ["string"]
}
"""

USER_PROMPT_TEMPLATE = """\
Analyze the work experience from the following CV content and provide:
1. Total years of experience
2. Career progression
3. Key achievements
4. Industry expertise

--- CV TEXT ---
{cv_text}
--- END CV TEXT ---

Return the JSON object now.
"""
