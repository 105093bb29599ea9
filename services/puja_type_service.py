"""Catalog service - puja types offered for booking"""

import logging

from errors import NotFound
from models import PujaType
from repositories import PujaTypeRepository
from services.base import BaseService, utcnow

logger = logging.getLogger(__name__)


class PujaTypeService(BaseService):
    entity_label = "Puja type"

    def __init__(self, db):
        super().__init__(db)
        self.repo = PujaTypeRepository()

    def get_all(self):
        return self.repo.get_all(self.db)

    def get_active(self):
        return self.repo.get_active(self.db)

    def get(self, puja_type_id):
        puja_type = self.repo.get_by_id(self.db, puja_type_id)
        if puja_type is None:
            raise NotFound(f"Puja type with ID {puja_type_id} not found")
        return puja_type

    def create(self, dto):
        logger.info(f"Creating new puja type {dto.name!r}")
        puja_type = PujaType(created_at=utcnow())
        self._apply(puja_type, dto)
        self.repo.add(self.db, puja_type)
        self._commit()
        return puja_type

    def update(self, puja_type_id, dto):
        puja_type = self.get(puja_type_id)
        self._apply(puja_type, dto)
        self._save_changes(puja_type_id, self.repo.exists)
        return puja_type

    def delete(self, puja_type_id):
        """Hard delete; the booking FK (restrict) decides whether it is allowed."""
        puja_type = self.get(puja_type_id)
        self._delete(puja_type, puja_type_id, self.repo.exists)
        logger.info(f"Deleted puja type {puja_type_id}")

    def deactivate(self, puja_type_id):
        puja_type = self.get(puja_type_id)
        puja_type.is_active = False
        self._save_changes(puja_type_id, self.repo.exists)
        return puja_type

    @staticmethod
    def _apply(puja_type, dto):
        puja_type.name = dto.name
        puja_type.description = dto.description
        puja_type.price = dto.price
        puja_type.image_url = dto.image_url
        puja_type.benefits = dto.benefits
        puja_type.duration = dto.duration
        puja_type.required_items = dto.required_items
        puja_type.is_active = dto.is_active
