"""
Entités d'abonnement - Domain Layer
UserSubscription : l'abonnement d'un utilisateur (une ligne par utilisateur).
SubscriptionPlan : les offres configurées depuis l'administration.
"""
from sqlmodel import SQLModel, Field, JSON, Column
from pydantic import BaseModel
from typing import Optional, List
import datetime as dt
from uuid import UUID, uuid4
from enum import Enum

from .admin import CamelModel
from .validators import non_nullable


class SubscriptionTier(str, Enum):
    FREE = "free"
    PREMIUM = "premium"
    LIFETIME = "lifetime"


# Paliers activables et durée associée (None = sans expiration)
ACTIVATION_DURATIONS = {
    SubscriptionTier.PREMIUM: dt.timedelta(days=30),
    SubscriptionTier.LIFETIME: None,
}


class UserSubscription(SQLModel, table=True):
    __tablename__ = "user_subscriptions"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    # L'identité vient du fournisseur de session externe
    user_id: str = Field(unique=True, index=True)
    subscription_tier: str = Field(default=SubscriptionTier.FREE.value)
    is_active: bool = Field(default=False)
    started_at: Optional[dt.datetime] = None
    expires_at: Optional[dt.datetime] = None
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class SubscriptionStatus(SQLModel):
    """Forme API du statut d'abonnement"""
    user_id: str
    subscription_tier: str
    is_active: bool
    started_at: Optional[dt.datetime] = None
    expires_at: Optional[dt.datetime] = None


class ActivateSubscriptionRequest(BaseModel):
    # Validé dans le service pour renvoyer un message explicite
    tier: Optional[str] = None


class SubscriptionPlan(SQLModel, table=True):
    __tablename__ = "subscription_plans"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    plan_name: str
    plan_description: Optional[str] = None
    price: str
    billing_period: str
    features: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    display_order: int = Field(default=0, index=True)
    is_active: bool = Field(default=True)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class SubscriptionPlanCreate(CamelModel):
    plan_name: str
    plan_description: Optional[str] = None
    price: str
    billing_period: str
    features: List[str] = []
    display_order: int = 0
    is_active: bool = True


class SubscriptionPlanUpdate(CamelModel):
    plan_name: Optional[str] = None
    plan_description: Optional[str] = None
    price: Optional[str] = None
    billing_period: Optional[str] = None
    features: Optional[List[str]] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None

    _required = non_nullable("plan_name", "price", "billing_period", "features", "display_order", "is_active")


class SubscriptionPlanRead(CamelModel):
    id: UUID
    plan_name: str
    plan_description: Optional[str] = None
    price: str
    billing_period: str
    features: List[str]
    display_order: int
    is_active: bool
    created_at: dt.datetime
    updated_at: dt.datetime
