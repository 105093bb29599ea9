# models/puja_type.py
from datetime import datetime, timezone

from database import db


class PujaType(db.Model):
    """A bookable puja offered in the catalog"""

    __tablename__ = "puja_types"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(500), nullable=False)
    description = db.Column(db.Text)
    price = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    image_url = db.Column(db.String(500))
    benefits = db.Column(db.Text)  # Spiritual benefits
    duration = db.Column(db.String(100))  # e.g., "2-3 hours", "1 day"
    required_items = db.Column(db.Text)  # Samagri the family should arrange
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    version = db.Column(db.Integer, nullable=False, default=1)
    __mapper_args__ = {"version_id_col": version}

    def to_dict(self):
        return {
            "pujaTypeId": self.id,
            "pujaTypeName": self.name,
            "description": self.description,
            "price": float(self.price) if self.price is not None else 0.0,
            "imageUrl": self.image_url,
            "benefitOfPooja": self.benefits,
            "poojaDuration": self.duration,
            "requiredThings": self.required_items,
            "isActive": self.is_active,
            "createdDate": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f"<PujaType {self.name}>"
