"""Spending analytics and derived bill views.

Everything here is a pure function of the bill/payment collections and the
evaluation instant; callers load the rows and pass ``now`` in.
"""
from datetime import date, datetime, time
from typing import Dict, Iterable, List, Sequence, Tuple

from .logos import CATEGORY_ICONS, fallback_icon, logo_url
from .models import (
    CATEGORIES,
    Analytics,
    Bill,
    BillView,
    CategoryGroup,
    DueThisMonth,
    MonthlyTotal,
    Payment,
    Summary,
)

MONTHS_OF_HISTORY = 6
LIST_LIMIT = 5


def is_overdue(bill: Bill, now: datetime) -> bool:
    if bill.due_date is None:
        return False
    return datetime.combine(bill.due_date, time.min) < now


def _same_month(d, ref) -> bool:
    return d.year == ref.year and d.month == ref.month


def month_window(now: datetime, months_back: int) -> Tuple[datetime, datetime]:
    """[first-of-month 00:00, first-of-next-month 00:00) for ``months_back`` months ago."""
    index = now.year * 12 + (now.month - 1) - months_back
    start = datetime(index // 12, index % 12 + 1, 1)
    index += 1
    end = datetime(index // 12, index % 12 + 1, 1)
    return start, end


def monthly_spending(payments: Sequence[Payment], now: datetime) -> List[MonthlyTotal]:
    months = []
    for back in range(MONTHS_OF_HISTORY - 1, -1, -1):
        start, end = month_window(now, back)
        total = sum((p.amount for p in payments if start <= p.paid_at < end), 0.0)
        months.append(MonthlyTotal(month=start.strftime("%b %Y"), amount=total))
    return months


def spending_by_category(bills: Iterable[Bill], payments: Iterable[Payment]) -> Dict[str, float]:
    by_id = {b.id: b for b in bills}
    spending: Dict[str, float] = {}
    for payment in payments:
        bill = by_id.get(payment.bill_id)
        if bill is None:
            continue  # bill was deleted; still counted in totalSpent
        category = bill.category or "Other"
        spending[category] = spending.get(category, 0.0) + payment.amount
    return spending


def build_analytics(bills: Sequence[Bill], payments: Sequence[Payment], now: datetime) -> Analytics:
    overdue = [b for b in bills if is_overdue(b, now)]
    summary = Summary(
        total_bills=len(bills),
        paid_bills=len(payments),
        # every bill stays "unpaid": paying only rolls the due date forward
        unpaid_bills=len(bills),
        total_spent=sum((p.amount for p in payments), 0.0),
        # all priced bills, paid or not
        total_due=sum((b.amount for b in bills if b.amount), 0.0),
        bills_paid_this_month=sum(1 for p in payments if _same_month(p.paid_at, now)),
        bills_due_this_month=due_this_month(bills, now.date()).count,
        overdue_bills=len(overdue),
    )
    return Analytics(
        summary=summary,
        spending_by_category=spending_by_category(bills, payments),
        monthly_spending=monthly_spending(payments, now),
        # bills with a due date, past or future
        upcoming_bills=[b for b in bills if b.due_date][:LIST_LIMIT],
        overdue_bills=overdue[:LIST_LIMIT],
    )


def due_this_month(bills: Iterable[Bill], today: date) -> DueThisMonth:
    due = [b for b in bills if b.due_date and _same_month(b.due_date, today)]
    return DueThisMonth(
        total=sum((b.amount for b in due if b.amount), 0.0),
        count=len(due),
    )


def sort_bills(bills: Iterable[Bill], now: datetime) -> List[Bill]:
    """Overdue first, then soonest due date, then undated bills newest first."""
    def key(b: Bill):
        if b.due_date is None:
            return (True, True, date.min, -b.created_at.timestamp())
        return (not is_overdue(b, now), False, b.due_date, 0.0)
    return sorted(bills, key=key)


def to_view(bill: Bill) -> BillView:
    return BillView(
        **bill.model_dump(),
        logo_url=logo_url(bill.name),
        icon=fallback_icon(bill.name, bill.category),
    )


def group_by_category(bills: Iterable[Bill], now: datetime) -> List[CategoryGroup]:
    groups: Dict[str, List[Bill]] = {}
    for bill in bills:
        groups.setdefault(bill.category or "Other", []).append(bill)
    return [
        CategoryGroup(
            category=category,
            icon=CATEGORY_ICONS[category],
            bills=[to_view(b) for b in sort_bills(groups[category], now)],
        )
        for category in CATEGORIES
        if groups.get(category)
    ]
