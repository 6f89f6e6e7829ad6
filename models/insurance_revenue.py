from datetime import datetime, timezone
from models import db
from services.money import money


class InsuranceRevenue(db.Model):
    """A policy sale and the commission it pays (or is expected to pay)."""

    __tablename__ = "insurance_revenue"

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False, index=True)  # economic event date
    client_name = db.Column(db.String(200), nullable=False)
    policy_type = db.Column(db.String(50), nullable=False)  # 'T10', 'Life Insurance', ...
    carrier = db.Column(db.String(200))
    policy_number = db.Column(db.String(100))
    premium = db.Column(db.Numeric(12, 2), nullable=False)  # monthly premium
    commission_rate = db.Column(db.Numeric(5, 2))  # percentage, informational only
    commission_amount = db.Column(db.Numeric(12, 2), nullable=False)
    status = db.Column(
        db.String(20), nullable=False, default="pending"
    )  # 'planned', 'pending' or 'received'
    notes = db.Column(db.Text)
    created_at = db.Column(
        db.DateTime, default=lambda: datetime.now(timezone.utc), nullable=False
    )
    updated_at = db.Column(
        db.DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "client_name": self.client_name,
            "policy_type": self.policy_type,
            "carrier": self.carrier,
            "policy_number": self.policy_number,
            "premium": str(money(self.premium)),
            "commission_rate": (
                str(money(self.commission_rate)) if self.commission_rate is not None else None
            ),
            "commission_amount": str(money(self.commission_amount)),
            "status": self.status,
            "notes": self.notes,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
