"""
Service de contenu IA pour l'administration.

Chaque type de contenu / d'amélioration / de palier correspond à exactement
un prompt ; les tables ci-dessous couvrent tous les membres des enums.
"""
import json
import logging
import re
from typing import List, Optional

from app.domain.entities.ai_content import ContentType, ImprovementType, PlanType
from app.domain.services.text_generator import TextGenerator

logger = logging.getLogger(__name__)


CONTENT_SYSTEM_PROMPTS = {
    ContentType.TEXT: "You are a wellness content expert. Create clear, engaging, and helpful text content.",
    ContentType.DESCRIPTION: (
        "You are a product description expert. Create concise, compelling descriptions "
        "that highlight benefits and value."
    ),
    ContentType.FEATURES: (
        "You are a features expert. Create clear, benefit-focused feature descriptions "
        "that resonate with users."
    ),
}

IMPROVEMENT_PROMPTS = {
    ImprovementType.CLARITY: "Improve the clarity of this content while keeping it concise:\n\n{content}",
    ImprovementType.TONE: (
        "Rewrite this content to have a warmer, more human tone that aligns with "
        "wellness and wellbeing:\n\n{content}"
    ),
    ImprovementType.LENGTH: "Make this content more concise while retaining all important information:\n\n{content}",
    ImprovementType.ENGAGEMENT: "Rewrite this content to be more engaging and compelling:\n\n{content}",
}

IMPROVEMENT_SYSTEM_PROMPT = (
    "You are an expert content editor. Improve the provided content while maintaining "
    "its core message and purpose."
)

PLAN_TIER_DESCRIPTIONS = {
    PlanType.BASIC: "Basic tier - essential features for getting started",
    PlanType.PREMIUM: "Premium tier - advanced features for engaged users who want more capabilities",
    PlanType.ENTERPRISE: "Enterprise tier - comprehensive features for power users and teams",
}

FEATURES_SYSTEM_PROMPT = (
    "You are a product manager for a wellness app. Generate practical, benefit-focused "
    "feature lists for subscription tiers."
)

FEATURES_PROMPT = """Generate a feature list for a wellness app subscription plan.
Plan Name: {plan_name}
Tier: {tier_description}

Create 5-7 specific, benefit-focused features for this plan. Each feature should:
- Be a concrete capability or benefit
- Be specific to wellness/wellbeing
- Be appropriate for this tier level
- Highlight unique value

Return ONLY a JSON array of feature strings, no other text.
Example format: ["Feature 1", "Feature 2", "Feature 3"]"""

QUOTE_PROMPT = (
    "Generate a single poetic, encouraging wellness quote (2-3 sentences max) that feels warm, "
    "grounding, and aligned with holistic wellbeing. The tone should be elemental, human, and "
    "never generic or overly polished. Focus on themes like presence, rhythm, nourishment, "
    "movement, and emotional grounding."
)

_BULLET_PREFIX = re.compile(r"^[-•*]\s*")


def parse_feature_list(text: str) -> List[str]:
    """Tableau JSON de chaînes si possible, sinon une ligne non vide par élément."""
    try:
        features = json.loads(text)
        if isinstance(features, list):
            return [str(f) for f in features]
    except json.JSONDecodeError:
        pass

    logger.warning("Reponse non JSON pour la liste de fonctionnalites, decoupage par ligne")
    return [
        _BULLET_PREFIX.sub("", line.strip()).strip()
        for line in text.splitlines()
        if line.strip()
    ]


class AIContentService:

    async def generate_content(
        self,
        generator: TextGenerator,
        prompt: str,
        content_type: ContentType,
        context: Optional[str] = None,
    ) -> str:
        full_prompt = f"{context}\n\n{prompt}" if context else prompt
        text = await generator.generate(full_prompt, system=CONTENT_SYSTEM_PROMPTS[content_type])
        logger.info(f"Contenu IA genere (type={content_type.value})")
        return text

    async def improve_content(
        self, generator: TextGenerator, content: str, improvement_type: ImprovementType
    ) -> str:
        prompt = IMPROVEMENT_PROMPTS[improvement_type].format(content=content)
        text = await generator.generate(prompt, system=IMPROVEMENT_SYSTEM_PROMPT)
        logger.info(f"Contenu IA ameliore (type={improvement_type.value})")
        return text

    async def generate_features(
        self, generator: TextGenerator, plan_name: str, plan_type: PlanType
    ) -> List[str]:
        prompt = FEATURES_PROMPT.format(
            plan_name=plan_name, tier_description=PLAN_TIER_DESCRIPTIONS[plan_type]
        )
        features = parse_feature_list(await generator.generate(prompt, system=FEATURES_SYSTEM_PROMPT))
        logger.info(f"Fonctionnalites generees (palier={plan_type.value}, {len(features)} elements)")
        return features

    async def generate_quote(self, generator: TextGenerator) -> str:
        return await generator.generate(QUOTE_PROMPT)


ai_content_service = AIContentService()
