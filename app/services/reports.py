"""
Reporting service.

Aggregate reads over the current store contents, computed on every call.
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.payment import Payment
from app.models.property import Property
from app.models.user import User
from app.schemas.report import (
    PaymentStatusCount,
    ProvinceDebt,
    ReportSummaryOut,
    RevenueMonth,
    StatsOut,
    StatusCount,
)

REVENUE_WINDOW_MONTHS = 12


def _shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def revenue_window(now: datetime) -> Tuple[datetime, datetime]:
    """
    [first day of the month 11 months ago, first day of next month), naive UTC.
    """
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc).replace(tzinfo=None)
    start_year, start_month = _shift_month(now.year, now.month, -(REVENUE_WINDOW_MONTHS - 1))
    end_year, end_month = _shift_month(now.year, now.month, 1)
    return datetime(start_year, start_month, 1), datetime(end_year, end_month, 1)


def revenue_by_month(db: Session, now: Optional[datetime] = None) -> List[RevenueMonth]:
    """Paid totals per calendar month over the last 12 months, most recent first."""
    start, end = revenue_window(now or datetime.now(timezone.utc))
    rows = (
        db.query(Payment.date, Payment.amount)
        .filter(Payment.status == "paid")
        .filter(Payment.date >= start, Payment.date < end)
        .all()
    )

    totals: Dict[str, float] = {}
    for paid_at, amount in rows:
        key = paid_at.strftime("%Y-%m")
        totals[key] = totals.get(key, 0.0) + float(amount or 0)

    return [
        RevenueMonth(month=month, total=round(total, 2))
        for month, total in sorted(totals.items(), reverse=True)
    ]


def debt_by_province(db: Session) -> List[ProvinceDebt]:
    """Rent of rented-but-not-paid properties, summed per province."""
    rows = (
        db.query(Property.province, func.coalesce(func.sum(Property.rent_amount), 0))
        .filter(Property.status == "rented", Property.payment_status != "paid")
        .group_by(Property.province)
        .order_by(Property.province)
        .all()
    )
    return [ProvinceDebt(province=province, total_debt=float(total or 0)) for province, total in rows]


def occupancy_stats(db: Session) -> List[StatusCount]:
    rows = (
        db.query(Property.status, func.count(Property.id))
        .group_by(Property.status)
        .order_by(Property.status)
        .all()
    )
    return [StatusCount(status=status, count=int(count)) for status, count in rows]


def payment_status_stats(db: Session) -> List[PaymentStatusCount]:
    rows = (
        db.query(Property.payment_status, func.count(Property.id))
        .filter(Property.status == "rented")
        .group_by(Property.payment_status)
        .order_by(Property.payment_status)
        .all()
    )
    return [PaymentStatusCount(payment_status=ps, count=int(count)) for ps, count in rows]


def summary(db: Session, now: Optional[datetime] = None) -> ReportSummaryOut:
    return ReportSummaryOut(
        revenue_by_month=revenue_by_month(db, now),
        debt_by_province=debt_by_province(db),
        occupancy_stats=occupancy_stats(db),
        payment_status_stats=payment_status_stats(db),
    )


def stats(db: Session) -> StatsOut:
    total_properties = db.query(func.count(Property.id)).scalar() or 0
    rented_properties = (
        db.query(func.count(Property.id)).filter(Property.status == "rented").scalar() or 0
    )
    total_rent = (
        db.query(func.coalesce(func.sum(Property.rent_amount), 0))
        .filter(Property.status == "rented")
        .scalar()
    )
    total_debt = (
        db.query(func.coalesce(func.sum(Property.rent_amount), 0))
        .filter(Property.status == "rented", Property.payment_status != "paid")
        .scalar()
    )
    active_users = db.query(func.count(User.id)).filter(User.status == "active").scalar() or 0

    return StatsOut(
        total_properties=int(total_properties),
        rented_properties=int(rented_properties),
        total_rent=float(total_rent or 0),
        total_debt=float(total_debt or 0),
        active_users=int(active_users),
    )
