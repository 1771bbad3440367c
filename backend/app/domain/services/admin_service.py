"""
Service d'administration : catégories, contenus de page et offres d'abonnement.
"""
import logging
from sqlmodel import SQLModel, Session, select
from pydantic import BaseModel
from uuid import UUID
from datetime import datetime
from typing import Optional, List, Type, TypeVar

from app.domain.entities import (
    AdminCategory, AdminCategoryCreate, AdminCategoryUpdate,
    AdminContent, AdminContentCreate, AdminContentUpdate,
    SubscriptionPlan, SubscriptionPlanCreate, SubscriptionPlanUpdate,
)

logger = logging.getLogger(__name__)

TableModel = TypeVar("TableModel", bound=SQLModel)


class AdminService:

    # ============ GENERIQUE ============

    def _create(self, session: Session, model: Type[TableModel], data: BaseModel) -> TableModel:
        row = model(**data.model_dump())
        session.add(row)
        session.commit()
        session.refresh(row)
        logger.info(f"{model.__name__} cree: {row.id}")
        return row

    def _update(
        self, session: Session, model: Type[TableModel], row_id: Optional[UUID], updates: BaseModel
    ) -> Optional[TableModel]:
        row = session.get(model, row_id) if row_id else None
        if not row:
            logger.warning(f"{model.__name__} introuvable pour mise a jour: {row_id}")
            return None

        for field, value in updates.model_dump(exclude_unset=True).items():
            setattr(row, field, value)

        row.updated_at = datetime.utcnow()
        session.add(row)
        session.commit()
        session.refresh(row)
        logger.info(f"{model.__name__} mis a jour: {row_id}")
        return row

    def _delete(self, session: Session, model: Type[TableModel], row_id: Optional[UUID]) -> bool:
        row = session.get(model, row_id) if row_id else None
        if not row:
            logger.warning(f"{model.__name__} introuvable pour suppression: {row_id}")
            return False
        session.delete(row)
        session.commit()
        logger.info(f"{model.__name__} supprime: {row_id}")
        return True

    # ============ CATEGORIES ============

    def list_categories(self, session: Session) -> List[AdminCategory]:
        return session.exec(
            select(AdminCategory).order_by(AdminCategory.display_order.desc())
        ).all()

    def create_category(self, session: Session, data: AdminCategoryCreate) -> AdminCategory:
        return self._create(session, AdminCategory, data)

    def update_category(
        self, session: Session, category_id: Optional[UUID], updates: AdminCategoryUpdate
    ) -> Optional[AdminCategory]:
        return self._update(session, AdminCategory, category_id, updates)

    def delete_category(self, session: Session, category_id: Optional[UUID]) -> bool:
        return self._delete(session, AdminCategory, category_id)

    # ============ CONTENUS ============

    def list_content(self, session: Session, page_name: Optional[str] = None) -> List[AdminContent]:
        query = select(AdminContent)
        if page_name:
            query = query.where(AdminContent.page_name == page_name)
        return session.exec(
            query.order_by(AdminContent.display_order.desc())
        ).all()

    def create_content(self, session: Session, data: AdminContentCreate) -> AdminContent:
        return self._create(session, AdminContent, data)

    def update_content(
        self, session: Session, content_id: Optional[UUID], updates: AdminContentUpdate
    ) -> Optional[AdminContent]:
        return self._update(session, AdminContent, content_id, updates)

    def delete_content(self, session: Session, content_id: Optional[UUID]) -> bool:
        return self._delete(session, AdminContent, content_id)

    # ============ OFFRES ============

    def list_plans(self, session: Session) -> List[SubscriptionPlan]:
        return session.exec(
            select(SubscriptionPlan).order_by(SubscriptionPlan.display_order.desc())
        ).all()

    def create_plan(self, session: Session, data: SubscriptionPlanCreate) -> SubscriptionPlan:
        return self._create(session, SubscriptionPlan, data)

    def update_plan(
        self, session: Session, plan_id: Optional[UUID], updates: SubscriptionPlanUpdate
    ) -> Optional[SubscriptionPlan]:
        return self._update(session, SubscriptionPlan, plan_id, updates)

    def delete_plan(self, session: Session, plan_id: Optional[UUID]) -> bool:
        return self._delete(session, SubscriptionPlan, plan_id)


admin_service = AdminService()
