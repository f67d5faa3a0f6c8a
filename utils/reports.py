"""
utils/reports.py
-----------------
Build downloadable attendance reports (CSV, Excel, PDF) from result documents.
"""

import io, csv
from openpyxl import Workbook
from reportlab.pdfgen import canvas
from reportlab.lib.pagesizes import A4

HEADERS = ["Roll Number", "Latitude", "Longitude", "Distance (km)", "Attendance Count", "Last Marked"]

MIMETYPES = {
    "csv": "text/csv",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "pdf": "application/pdf",
}


def _row(record):
    distance = record.get("distance")
    return [
        record.get("rollNumber", ""),
        record.get("latitude", ""),
        record.get("longitude", ""),
        round(distance, 3) if isinstance(distance, (int, float)) else "",
        record.get("attendanceCount", 0),
        record.get("lastMarkedDate", "")
    ]


def build_csv(records):
    si = io.StringIO()
    cw = csv.writer(si)
    cw.writerow(HEADERS)
    for record in records:
        cw.writerow(_row(record))

    output = io.BytesIO()
    output.write(si.getvalue().encode("utf-8"))
    output.seek(0)
    return output


def build_excel(records):
    wb = Workbook()
    ws = wb.active
    ws.title = "Results"
    ws.append(HEADERS)
    for record in records:
        ws.append(_row(record))

    output = io.BytesIO()
    wb.save(output)
    output.seek(0)
    return output


def build_pdf(records, generated_on=""):
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    width, height = A4
    columns = [50, 140, 220, 300, 390, 470]

    y = height - 50
    c.setFont("Helvetica-Bold", 14)
    c.drawString(50, y, "Attendance Results")
    if generated_on:
        c.setFont("Helvetica", 10)
        c.drawString(350, y, f"Generated: {generated_on}")
    y -= 30

    c.setFont("Helvetica-Bold", 9)
    for x, title in zip(columns, HEADERS):
        c.drawString(x, y, title)
    y -= 20

    c.setFont("Helvetica", 9)
    for record in records:
        if y < 50:
            c.showPage()
            c.setFont("Helvetica", 9)
            y = height - 50
        for x, value in zip(columns, _row(record)):
            c.drawString(x, y, str(value))
        y -= 18

    c.save()
    buffer.seek(0)
    return buffer


# Tabular exports; the PDF also takes a generation date
BUILDERS = {
    "csv": build_csv,
    "xlsx": build_excel,
}
