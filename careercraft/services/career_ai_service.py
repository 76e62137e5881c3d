"""
Career AI Service - analysis, portfolio and roadmap generation.

FLOW:
profile + psychometric answers -> analysis (primary domain + courses)
analysis -> portfolio, roadmap

Every result is validated against its schema, then cached on the user
document (ai.<slot>). Cached results are served until the caller asks
for a refresh; there is no time-based expiry.

Two refreshes racing for the same user and slot both call the model;
the later write wins.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Type

from pydantic import BaseModel

from careercraft.core.errors import AIConfigurationError, PrerequisiteMissing
from careercraft.schemas.schemas import AiAnalysis, AiPortfolio, AiRoadmap
from careercraft.services.openai_client import OpenAIClient
from careercraft.services.user_service import UserService, get_ai_slot, utc_now

logger = logging.getLogger(__name__)

AVOID = ["medical/legal advice", "guarantees about jobs"]


# ============================================================
# PROMPT BUILDER
# ============================================================

def build_answer_context(answers: Dict[str, str]) -> str:
    """
    Render answers as a Q/A transcript, in the mapping's order.

    {"q1": "a", "q2": "c"} -> "Q: q1\\nA: a\\n\\nQ: q2\\nA: c"
    """
    return "\n\n".join(f"Q: {q}\nA: {a}" for q, a in answers.items())


def system_prompt(*lines: str) -> str:
    return " ".join(("You are CareerCraft AI.",) + lines)


# ============================================================
# BUNDLE SLOTS
# ============================================================

@dataclass(frozen=True)
class BundleSlot:
    name: str
    schema: Type[BaseModel]
    system_prompt: str
    output_shape: dict
    constraints: dict
    temperature: float
    requires_analysis: bool = True


BUNDLE_SLOTS: Dict[str, BundleSlot] = {
    "analysis": BundleSlot(
        name="analysis",
        schema=AiAnalysis,
        system_prompt=system_prompt(
            "Analyse a student's profile and psychometric answers.",
            "Pick the single best-fitting career domain and rank suitable courses.",
            "Return ONLY valid JSON. No markdown."
        ),
        output_shape={
            "primaryDomain": "string (e.g. Engineering, Design, Commerce)",
            "recommendedCourses": [
                {"course": "string", "confidence": "number 0-100", "reason": "string"}
            ],
            "traits": {
                "logicalThinking": "number 0-100",
                "creativity": "number 0-100",
                "practicalSkills": "number 0-100",
                "communicationLeadership": "number 0-100"
            },
            "summary": "string (2-3 sentences)"
        },
        constraints={
            "recommendedCoursesCount": "3-5, best match first",
            "avoid": AVOID,
            "countryContext": "India"
        },
        temperature=0.2,
        requires_analysis=False
    ),
    "portfolio": BundleSlot(
        name="portfolio",
        schema=AiPortfolio,
        system_prompt=system_prompt(
            "Generate a student portfolio section based on profile + psychometric answers + the chosen domain.",
            "Return ONLY valid JSON. No markdown.",
            "Keep content beginner-friendly and directly renderable in a UI."
        ),
        output_shape={
            "strengthSummary": "string (short paragraph)",
            "recommendedSkills": ["string"],
            "learningFocusAreas": ["string"],
            "suggestedProjects": ["string"]
        },
        constraints={
            "recommendedSkillsCount": "5-8",
            "learningFocusAreasCount": "4-8",
            "projectsCount": "3-6",
            "avoid": AVOID,
            "countryContext": "India"
        },
        temperature=0.3
    ),
    "roadmap": BundleSlot(
        name="roadmap",
        schema=AiRoadmap,
        system_prompt=system_prompt(
            "Create a step-by-step beginner-friendly career roadmap for a student in India.",
            "Make it stage-wise/year-wise, actionable, and realistic.",
            "Return ONLY valid JSON (no markdown)."
        ),
        output_shape={
            "primaryDomain": "string",
            "stages": [{
                "stage": "string",
                "whatToStudy": ["string"],
                "skillsToLearn": ["string"],
                "certifications": ["string"],
                "projects": ["string"],
                "internships": ["string"]
            }],
            "notes": "string"
        },
        constraints={
            "stages": "4-6 stages",
            "stageStyle": "Use a mix like: '0-3 months', '3-6 months', '6-12 months', 'Year 2', etc.",
            "avoid": ["medical/legal advice", "guarantees about placements/salary"],
            "includeIndiaContext": True
        },
        temperature=0.35
    )
}


class CacheRead(str, Enum):
    """How a slot read treats an existing cached result."""

    CACHED = "cached"    # serve the cache when present, generate otherwise
    REFRESH = "refresh"  # always regenerate and overwrite

    @classmethod
    def from_query(cls, refresh: Optional[str]) -> "CacheRead":
        """?refresh=1 -> REFRESH, anything else -> CACHED."""
        if refresh is not None and refresh.strip() == "1":
            return cls.REFRESH
        return cls.CACHED


# ============================================================
# SERVICE
# ============================================================

class CareerAIService:
    """
    Generates and caches AI bundle slots for a user.
    """

    def __init__(self, users: UserService, ai_client: OpenAIClient):
        self.users = users
        self.ai_client = ai_client

    def get_slot(self, user_id: str, slot: str, mode: CacheRead = CacheRead.CACHED) -> dict:
        """
        Cached {data, createdAt, model} for slot, generating when the
        cache is empty or mode is REFRESH.
        """
        user = self.users.get_by_id(user_id)

        if mode is CacheRead.CACHED:
            cached = get_ai_slot(user, slot)
            if cached:
                logger.info("Serving cached %s for user %s", slot, user_id)
                return cached

        return self._generate(user, BUNDLE_SLOTS[slot])

    def analyze(self, user_id: str) -> dict:
        """Run (or re-run) the analysis unconditionally."""
        return self.get_slot(user_id, "analysis", CacheRead.REFRESH)

    def _check_prerequisites(self, user: dict, slot: BundleSlot) -> None:
        """Gates, in order. Each failure names the step that fixes it."""
        if not user.get("profile"):
            raise PrerequisiteMissing("Profile is missing. Save /user/profile first.")
        if not (user.get("psychometric") or {}).get("answers"):
            raise PrerequisiteMissing("Psychometric answers are missing. Save /user/psychometric first.")
        if slot.requires_analysis and not get_ai_slot(user, "analysis"):
            raise PrerequisiteMissing("AI analysis is missing. Run POST /ai/analyze first.")
        if not self.ai_client.is_configured:
            raise AIConfigurationError()

    def _build_payload(self, user: dict, slot: BundleSlot) -> dict:
        payload = {
            "profile": user["profile"],
            "psychometric": build_answer_context(user["psychometric"]["answers"])
        }
        if slot.requires_analysis:
            payload["analysis"] = get_ai_slot(user, "analysis")["data"]
        payload["outputJsonShape"] = slot.output_shape
        payload["constraints"] = slot.constraints
        return payload

    def _generate(self, user: dict, slot: BundleSlot) -> dict:
        self._check_prerequisites(user, slot)
        user_id = str(user["_id"])

        logger.info("Generating %s for user %s with %s", slot.name, user_id, self.ai_client.model)
        result = self.ai_client.complete_json(
            slot.system_prompt,
            self._build_payload(user, slot),
            slot.schema,
            temperature=slot.temperature
        )

        return self.users.update_ai_slot(
            user_id,
            slot.name,
            result.model_dump(mode="json", by_alias=True),
            self.ai_client.model,
            utc_now()
        )
