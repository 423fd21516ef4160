"""
Prompt #5 — Qualification Matcher

Compares the CV against caller-supplied job requirements. Plain text output.
Temperature: 0.7 | Max tokens: 800
"""

SYSTEM_PROMPT = """\
You are a recruiter matching a candidate's CV against a job's requirements.
Be specific: name the skills and qualifications you are comparing.
"""

USER_PROMPT_TEMPLATE = """\
Compare the following CV content with the job requirements and provide a matching score and detailed analysis.

--- CV TEXT ---
{cv_text}
--- END CV TEXT ---

--- JOB REQUIREMENTS ---
{job_requirements}
--- END JOB REQUIREMENTS ---

Please provide:
1. Overall match percentage
2. Matching skills
3. Missing qualifications
4. Recommendations
"""
