"""
CareerCraft - Student career guidance API.

Architecture:
- MongoDB: Users (profile, psychometric answers, cached AI results)
  plus read-only reference data (job roles, scholarships)
- OpenAI: Course analysis, portfolio and roadmap generation
"""

__version__ = "1.0.0"
