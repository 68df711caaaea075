import sqlite3
from datetime import datetime
from typing import List, Dict, Any, Optional

from .config import DB_PATH

BILL_COLUMNS = ("name", "category", "due_date", "amount")

def get_conn():
    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row
    return conn

def init_db():
    conn = get_conn()
    cur = conn.cursor()
    cur.execute("""
    CREATE TABLE IF NOT EXISTS bills (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        category TEXT NOT NULL DEFAULT 'Other',
        due_date TEXT,
        amount REAL,
        created_at TEXT NOT NULL
    )
    """)
    # bill_id is a weak reference: payments outlive their bill
    cur.execute("""
    CREATE TABLE IF NOT EXISTS payments (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        bill_id INTEGER NOT NULL,
        amount REAL NOT NULL,
        paid_at TEXT NOT NULL
    )
    """)
    conn.commit()
    conn.close()

def list_bills() -> List[Dict[str, Any]]:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute("SELECT * FROM bills ORDER BY id ASC")
    rows = [dict(r) for r in cur.fetchall()]
    conn.close()
    return rows

def get_bill(bill_id: int) -> Optional[Dict[str, Any]]:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute("SELECT * FROM bills WHERE id = ?", (bill_id,))
    row = cur.fetchone()
    conn.close()
    return dict(row) if row else None

def insert_bill(b: Dict[str, Any]) -> Dict[str, Any]:
    row = {col: b.get(col) for col in BILL_COLUMNS}
    row["created_at"] = datetime.now().isoformat()
    conn = get_conn()
    cur = conn.cursor()
    cur.execute("""
        INSERT INTO bills (name, category, due_date, amount, created_at)
        VALUES (:name, :category, :due_date, :amount, :created_at)
    """, row)
    conn.commit()
    bill_id = cur.lastrowid
    conn.close()
    return get_bill(bill_id)

def update_bill(bill_id: int, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Write only the given columns. None means the bill does not exist."""
    fields = {k: v for k, v in fields.items() if k in BILL_COLUMNS}
    if not fields:
        return get_bill(bill_id)
    assignments = ", ".join(f"{col} = :{col}" for col in fields)
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(f"UPDATE bills SET {assignments} WHERE id = :id", {**fields, "id": bill_id})
    conn.commit()
    ok = cur.rowcount > 0
    conn.close()
    return get_bill(bill_id) if ok else None

def delete_bill(bill_id: int) -> bool:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute("DELETE FROM bills WHERE id = ?", (bill_id,))
    conn.commit()
    ok = cur.rowcount > 0
    conn.close()
    return ok

def list_payments() -> List[Dict[str, Any]]:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute("SELECT * FROM payments ORDER BY id ASC")
    rows = [dict(r) for r in cur.fetchall()]
    conn.close()
    return rows

def record_payment(bill_id: int, amount: float, paid_at: datetime, due_date: Optional[str] = None) -> Dict[str, Any]:
    """Insert a payment and, if given, roll the bill's due date forward."""
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        "INSERT INTO payments (bill_id, amount, paid_at) VALUES (?, ?, ?)",
        (bill_id, amount, paid_at.isoformat()),
    )
    if due_date is not None:
        cur.execute("UPDATE bills SET due_date = ? WHERE id = ?", (due_date, bill_id))
    conn.commit()
    conn.close()
    return get_bill(bill_id)
