# billtracker/main.py
import logging
import sqlite3
from datetime import datetime, timedelta
from typing import List

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import analytics, db
from .config import CORS_ORIGINS, DEBUG_MODE, DOCS_ENABLED, LOG_LEVEL
from .db import (
    init_db, list_bills, get_bill, insert_bill, update_bill, delete_bill,
    list_payments, record_payment,
)
from .models import Analytics, Bill, BillIn, BillPatch, BillRef, GroupedBills, Payment

RECURRENCE = timedelta(days=30)

# ----------------------------
# App bootstrap (docs toggle)
# ----------------------------
app = FastAPI(
    title="Bill Tracker",
    version="0.1.0",
    docs_url="/docs" if DOCS_ENABLED else None,
    redoc_url=None,
    openapi_url="/openapi.json" if DOCS_ENABLED else None,
)

# CORS
if CORS_ORIGINS:
    # Credentials + explicit origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["*"],
        allow_credentials=True,
    )
else:
    # No credentials when wildcard origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["*"],
        allow_credentials=False,
    )

# Logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger("billtracker")

# ----------------------------
# Lifecycle
# ----------------------------
@app.on_event("startup")
def _startup():
    init_db()
    logger.info("Bill Tracker startup: DB_PATH=%s", db.DB_PATH)
    logger.info("Config: docs=%s cors=%s", DOCS_ENABLED, CORS_ORIGINS or "*")

@app.exception_handler(sqlite3.Error)
async def store_unavailable(request: Request, exc: sqlite3.Error):
    logger.error("Store error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=503, content={"detail": "Bill store unavailable"})

# ----------------------------
# Helpers
# ----------------------------
def load_bills() -> List[Bill]:
    return [Bill(**r) for r in list_bills()]

def load_payments() -> List[Payment]:
    return [Payment(**r) for r in list_payments()]

def mark_as_paid(bill_id: int) -> Bill:
    row = get_bill(bill_id)
    if not row:
        raise HTTPException(404, "Bill not found")
    bill = Bill(**row)
    if not bill.amount:
        # zero counts as no amount, same as on create
        raise HTTPException(409, "Bill has no amount; set one before marking it paid")
    next_due = (bill.due_date + RECURRENCE).isoformat() if bill.due_date else None
    updated = record_payment(bill.id, bill.amount, datetime.now(), next_due)
    logger.info("Bill %s paid: amount=%s next_due=%s", bill.id, bill.amount, next_due)
    return Bill(**updated)

# ----------------------------
# Health
# ----------------------------
@app.get("/", summary="Health (root)")
def root_health():
    payload = {
        "ok": True,
        "service": app.title,
        "time": datetime.now().isoformat(),
    }
    if DEBUG_MODE:
        payload["db_path"] = db.DB_PATH
    return payload

@app.get("/health", summary="Health")
def health():
    # Alias for convenience
    return root_health()

# ----------------------------
# Bills
# ----------------------------
@app.get("/bills", response_model=List[Bill], summary="List bills")
def get_bills():
    return load_bills()

@app.post("/bills", response_model=Bill, summary="Create a bill")
def create_bill(bill_in: BillIn):
    row = insert_bill(bill_in.model_dump(mode="json"))
    logger.info("Bill %s created: %s", row["id"], row["name"])
    return Bill(**row)

@app.patch("/bills", response_model=Bill, summary="Edit a bill or mark it paid")
def patch_bill(patch: BillPatch):
    if patch.mark_as_paid:
        return mark_as_paid(patch.id)
    changes = patch.changes()
    row = update_bill(patch.id, changes)
    if not row:
        raise HTTPException(404, "Bill not found")
    logger.info("Bill %s updated: %s", patch.id, sorted(changes))
    return Bill(**row)

@app.delete("/bills", summary="Delete a bill")
def remove_bill(ref: BillRef):
    if not delete_bill(ref.id):
        raise HTTPException(404, "Bill not found")
    logger.info("Bill %s deleted", ref.id)
    return {"success": True}

@app.get("/bills/grouped", response_model=GroupedBills, summary="Bills grouped by category")
def grouped_bills():
    now = datetime.now()
    bills = load_bills()
    return GroupedBills(
        categories=analytics.group_by_category(bills, now),
        due_this_month=analytics.due_this_month(bills, now.date()),
        overdue_count=sum(1 for b in bills if analytics.is_overdue(b, now)),
    )

# ----------------------------
# Payments & analytics
# ----------------------------
@app.get("/payments", response_model=List[Payment], summary="List payments")
def get_payments():
    return load_payments()

@app.get("/analytics", response_model=Analytics, summary="Spending analytics")
def get_analytics():
    return analytics.build_analytics(load_bills(), load_payments(), datetime.now())
