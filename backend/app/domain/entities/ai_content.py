"""
Schémas des requêtes de contenu IA (administration, camelCase).
"""
from enum import Enum
from typing import Optional, List

from .admin import CamelModel


class ContentType(str, Enum):
    TEXT = "text"
    DESCRIPTION = "description"
    FEATURES = "features"


class ImprovementType(str, Enum):
    CLARITY = "clarity"
    TONE = "tone"
    LENGTH = "length"
    ENGAGEMENT = "engagement"


class PlanType(str, Enum):
    BASIC = "basic"
    PREMIUM = "premium"
    ENTERPRISE = "enterprise"


class GenerateContentRequest(CamelModel):
    prompt: str
    content_type: ContentType = ContentType.TEXT
    context: Optional[str] = None


class GenerateContentResponse(CamelModel):
    generated_content: str


class ImproveContentRequest(CamelModel):
    content: str
    improvement_type: ImprovementType


class ImproveContentResponse(CamelModel):
    improved_content: str


class GenerateFeaturesRequest(CamelModel):
    plan_name: str
    plan_type: PlanType


class GenerateFeaturesResponse(CamelModel):
    features: List[str]
