"""
Dashboard and reports endpoints.
Every response is computed from the current store contents.
"""
import csv
import io

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.core.auth import get_current_user, User
from app.schemas.report import ReportSummaryOut, StatsOut
from app.services import reports as report_service

router = APIRouter(tags=["reports"])


@router.get("/stats", response_model=StatsOut)
def get_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Top cards: totals, rented count, rent roll, outstanding debt, active users."""
    return report_service.stats(db)


@router.get("/reports/summary", response_model=ReportSummaryOut)
def get_report_summary(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Revenue by month, debt by province, occupancy and payment-status breakdowns."""
    return report_service.summary(db)


# ---------------------------------------------------------------------------
# CSV download
# ---------------------------------------------------------------------------

@router.get("/reports/summary/csv")
def download_report_summary_csv(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Download the summary report as a CSV file."""
    data = report_service.summary(db)
    buf = io.StringIO()
    writer = csv.writer(buf)

    writer.writerow(["--- Revenue by Month ---"])
    writer.writerow(["Month", "Total"])
    for r in data.revenue_by_month:
        writer.writerow([r.month, r.total])
    writer.writerow([])

    writer.writerow(["--- Debt by Province ---"])
    writer.writerow(["Province", "Total Debt"])
    for d in data.debt_by_province:
        writer.writerow([d.province or "", d.total_debt])
    writer.writerow([])

    writer.writerow(["--- Occupancy ---"])
    writer.writerow(["Status", "Count"])
    for o in data.occupancy_stats:
        writer.writerow([o.status, o.count])
    writer.writerow([])

    writer.writerow(["--- Payment Status (rented properties) ---"])
    writer.writerow(["Payment Status", "Count"])
    for p in data.payment_status_stats:
        writer.writerow([p.payment_status or "", p.count])

    buf.seek(0)
    return StreamingResponse(
        buf,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=report.csv"},
    )
