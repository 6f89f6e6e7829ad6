from datetime import datetime, timezone
from models import db
from services.money import money


class InvestmentRevenue(db.Model):
    """A dividend received or new assets under management brought in."""

    __tablename__ = "investment_revenue"

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False, index=True)
    entry_type = db.Column(db.String(20), nullable=False)  # 'dividend' or 'new_aum'
    amount = db.Column(db.Numeric(12, 2), nullable=False)
    # Ticker for dividends, client name for AUM
    source_name = db.Column(db.String(200), nullable=False)
    account_type = db.Column(db.String(50))  # 'TFSA', 'RRSP', 'Cash', ...
    description = db.Column(db.Text)
    status = db.Column(db.String(20), nullable=False, default="pending")
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
            "entry_type": self.entry_type,
            "amount": str(money(self.amount)),
            "source_name": self.source_name,
            "account_type": self.account_type,
            "description": self.description,
            "status": self.status,
            "notes": self.notes,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
