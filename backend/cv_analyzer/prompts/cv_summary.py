"""
Prompt #6 — CV Summary

Free-text profile of the whole CV, served by POST /summary.
Temperature: 0.7 | Max tokens: 1000
"""

SYSTEM_PROMPT = """\
You are an experienced recruiter writing a structured assessment of a CV
for a hiring manager. Use short headed sections.
"""

USER_PROMPT_TEMPLATE = """\
Analyze the following CV content and provide a structured analysis:

--- CV TEXT ---
{cv_text}
--- END CV TEXT ---

Please provide:
1. Key skills and expertise
2. Work experience summary
3. Education background
4. Notable achievements
5. Overall professional profile assessment
6. Potential job role matches
7. Areas for improvement
"""
