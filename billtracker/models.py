from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional
from datetime import date, datetime
from enum import Enum


class Category(str, Enum):
    UTILITIES = "Utilities"
    RENT = "Rent/Mortgage"
    INSURANCE = "Insurance"
    SUBSCRIPTIONS = "Subscriptions"
    PHONE = "Phone/Internet"
    CREDIT_CARDS = "Credit Cards"
    LOANS = "Loans"
    OTHER = "Other"

CATEGORIES = [c.value for c in Category]


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _clean_name(v: Optional[str]) -> str:
    if v is None:
        raise ValueError("name is required")
    v = v.strip()
    if not v:
        raise ValueError("name must not be empty")
    return v


class BillIn(CamelModel):
    name: str
    category: Category = Category.OTHER
    due_date: Optional[date] = None
    amount: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return _clean_name(v)

    @field_validator("category", mode="before")
    @classmethod
    def default_category(cls, v):
        return v or Category.OTHER

    @field_validator("due_date", "amount", mode="before")
    @classmethod
    def falsy_is_absent(cls, v):
        # blank form fields and a zero amount are stored as "not set"
        return v or None


class BillPatch(CamelModel):
    """PATCH body: either ``markAsPaid`` or a sparse set of field edits."""
    id: int
    mark_as_paid: bool = False
    name: Optional[str] = None
    category: Optional[Category] = None
    due_date: Optional[date] = None
    amount: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)

    @field_validator("name")
    @classmethod
    def check_name(cls, v):
        return _clean_name(v)

    @field_validator("category", mode="before")
    @classmethod
    def null_category_is_other(cls, v):
        return v or Category.OTHER

    @field_validator("due_date", "amount", mode="before")
    @classmethod
    def empty_clears(cls, v):
        return None if v == "" else v

    def changes(self) -> Dict[str, Any]:
        """Only the fields the client actually sent."""
        sent = self.model_fields_set - {"id", "mark_as_paid"}
        return self.model_dump(mode="json", include=sent)


class BillRef(BaseModel):
    id: int


class Bill(CamelModel):
    id: int
    name: str
    category: str = Category.OTHER.value
    due_date: Optional[date] = None
    amount: Optional[float] = None
    created_at: datetime


class Payment(CamelModel):
    id: int
    bill_id: int
    amount: float
    paid_at: datetime


class BillView(Bill):
    logo_url: Optional[str] = None
    icon: str


class CategoryGroup(CamelModel):
    category: str
    icon: str
    bills: List[BillView]


class DueThisMonth(CamelModel):
    total: float = 0.0
    count: int = 0


class GroupedBills(CamelModel):
    categories: List[CategoryGroup]
    due_this_month: DueThisMonth
    overdue_count: int


class Summary(CamelModel):
    total_bills: int
    paid_bills: int
    unpaid_bills: int
    total_spent: float
    total_due: float
    bills_paid_this_month: int
    bills_due_this_month: int
    overdue_bills: int


class MonthlyTotal(CamelModel):
    month: str  # "Mon YYYY"
    amount: float


class Analytics(CamelModel):
    summary: Summary
    spending_by_category: Dict[str, float]
    monthly_spending: List[MonthlyTotal]
    upcoming_bills: List[Bill]
    overdue_bills: List[Bill]
