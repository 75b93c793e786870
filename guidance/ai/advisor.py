import os
import json
import logging
from typing import Dict, Any, List, Optional
import openai
from dotenv import load_dotenv

from .prompts import COUNSELLOR_SYSTEM_PROMPT
from .prompt_builder import (
    build_explainer_system_prompt,
    build_explainer_user_prompt,
    build_roadmap_system_prompt,
    build_roi_system_prompt,
    build_roi_user_prompt,
    build_dashboard_system_prompt,
    build_career_timelines_prompt,
    build_career_options_prompt,
)

# Load env vars (if not already loaded)
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_MODEL = "llama-3.3-70b-versatile"


class AIAdvisor:
    """
    Thin client for an OpenAI-compatible chat completions endpoint (Groq by default).
    Every method returns None instead of raising when the key is missing or the
    provider fails; callers decide the HTTP status.
    """

    def __init__(self, api_key: Optional[str] = None, client: Any = None):
        self.api_key = api_key or os.getenv("GROQ_API_KEY") or os.getenv("OPENAI_API_KEY")
        self.base_url = os.getenv("LLM_BASE_URL", DEFAULT_BASE_URL)
        self.model = os.getenv("LLM_MODEL", DEFAULT_MODEL)
        self.client = client
        if self.client is None and self.api_key:
            self.client = openai.OpenAI(api_key=self.api_key, base_url=self.base_url)

        self.max_tokens = 1024

        # Simple in-memory cache: request_id -> explanation
        self.cache: Dict[str, Dict[str, Any]] = {}

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    def chat(self, messages: List[Dict[str, str]], student_year: Optional[str] = None) -> Optional[Dict[str, str]]:
        """Counsellor chat turn. Returns the assistant message as {role, content}."""
        if not self._ready("chat"):
            return None

        system_prompt = COUNSELLOR_SYSTEM_PROMPT
        if student_year:
            system_prompt += f"\nThe student is currently in: {student_year}."

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "system", "content": system_prompt}, *messages],
                temperature=0.7,
                max_tokens=self.max_tokens,
            )
            message = response.choices[0].message
            return {"role": message.role or "assistant", "content": message.content or ""}
        except Exception as e:
            logger.error(f"Chat completion failed: {e}")
            return None

    def career_roadmaps(self, profile: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Fast-track / growth / mastery roadmaps for a profile."""
        if not self._ready("career roadmap"):
            return None
        return self._complete_json(
            build_roadmap_system_prompt(profile),
            "Generate career roadmaps.",
            temperature=0.7,
            max_tokens=2048,
        )

    def roi_analysis(self, target_country: str, budget: float) -> Optional[Dict[str, Any]]:
        """Cost / ROI breakdown for studying in a country on a budget."""
        if not self._ready("ROI analysis"):
            return None
        return self._complete_json(
            build_roi_system_prompt(target_country, budget),
            build_roi_user_prompt(target_country, budget),
            temperature=0.5,
        )

    def dashboard_insights(self, profile: Dict[str, Any], language: str = "en") -> Optional[Dict[str, Any]]:
        """Skill gaps, deadlines and radar data for the dashboard."""
        if not self._ready("dashboard insights"):
            return None
        return self._complete_json(
            build_dashboard_system_prompt(profile, language),
            "Generate dashboard analysis.",
            temperature=0.7,
        )

    def career_path_plan(
        self,
        user_profile: Dict[str, Any],
        selected_path: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Timeline roadmaps (fast-track, growth, mastery) for a chosen career path,
        or four suggested career options when no path is chosen yet.
        """
        if not self._ready("career path plan"):
            return None
        if selected_path:
            return self._complete_json(
                build_career_timelines_prompt(user_profile, selected_path),
                f"Generate roadmaps for {selected_path}.",
                temperature=0.7,
                max_tokens=4096,
            )
        return self._complete_json(
            build_career_options_prompt(user_profile),
            "Suggest career options.",
            temperature=0.7,
        )

    def explain_eligibility(
        self,
        request_id: str,
        student_profile: Dict[str, Any],
        results: List[Dict[str, Any]]
    ) -> Optional[Dict[str, Any]]:
        """
        Generates an explanation for the eligibility results.
        Returns None if API key is missing or error occurs.
        """
        if not self._ready("eligibility explanation"):
            return None

        if request_id in self.cache:
            return self.cache[request_id]

        parsed = self._complete_json(
            build_explainer_system_prompt(),
            build_explainer_user_prompt(student_profile, results),
            temperature=0.3,
            max_tokens=700,
        )
        if parsed is not None:
            self.cache[request_id] = parsed
        return parsed

    def _ready(self, purpose: str) -> bool:
        if self.client is None:
            logger.warning(f"LLM API key not found. Skipping {purpose}.")
            return False
        return True

    def _complete_json(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_tokens: Optional[int] = None
    ) -> Optional[Dict[str, Any]]:
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt}
                ],
                temperature=temperature,
                max_tokens=max_tokens or self.max_tokens,
                response_format={"type": "json_object"}
            )

            content = response.choices[0].message.content
            if not content:
                logger.error("No content received from LLM provider")
                return None

            return json.loads(content)

        except Exception as e:
            logger.error(f"LLM JSON completion failed: {e}")
            return None


# Singleton instance
advisor = AIAdvisor()
