from __future__ import annotations

import io
import re
import urllib.parse
from typing import Optional

import pandas as pd

from ..common.money import format_sar_text
from ..ledger.windows import Month
from .model import BillingReport, ClientBill

CSV_COLUMNS = ["Passenger", "Rides", "Total (SAR)"]
SHARE_URL = "https://wa.me/{phone}?text={text}"
RULE = "━" * 21


def statement_to_csv(report: BillingReport) -> str:
    """Monthly billing report as CSV text (title, one row per client, totals footer)."""
    df = pd.DataFrame(
        [[b.name, b.ride_count, str(b.total)] for b in report.bills],
        columns=CSV_COLUMNS,
    )
    buf = io.StringIO()
    buf.write(f"Monthly Billing Report - {report.month.label()}\n\n")
    df.to_csv(buf, index=False, lineterminator="\n")
    buf.write("\n")
    buf.write(f"Total Earnings: {format_sar_text(report.summary.total_earnings)}\n")
    buf.write(f"Total Rides: {report.summary.total_rides}\n")
    return buf.getvalue()


def csv_filename(month: Month) -> str:
    return f"billing-{month}.csv"


def bill_message(bill: ClientBill, month: Month) -> str:
    """Monthly bill as a plain text message for the client."""
    lines = [
        RULE,
        "*MONTHLY BILL*",
        month.label(),
        RULE,
        "",
        f"*{bill.name}*",
        "",
        "*Ride Details:*",
    ]
    lines.extend(f"   {d.date.strftime('%d %b')} -> {format_sar_text(d.fare)}" for d in bill.present_lines)

    absent = bill.absent_lines
    if absent:
        lines.extend(["", "Absent Days:"])
        lines.extend(f"   {d.date.strftime('%d %b')}" for d in absent)

    lines.extend(
        [
            "",
            RULE,
            f"Total Rides: {bill.present_count}",
            f"*Total Amount: {format_sar_text(bill.total)}*",
            RULE,
            "",
            "Thank you for choosing us!",
            "_Pick & Drop Service_",
        ]
    )
    return "\n".join(lines)


def share_link(bill: ClientBill, month: Month) -> Optional[str]:
    """Prefilled chat link for sending the bill; None when the client has no phone."""
    phone = re.sub(r"\D", "", bill.phone or "")
    if not phone:
        return None
    return SHARE_URL.format(phone=phone, text=urllib.parse.quote(bill_message(bill, month)))
