from io import BytesIO
from textwrap import wrap

from django.utils import timezone
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

from .models import Activity


def activity_report_pdf(intern):
    """Render an intern's activity log as a PDF and return the bytes."""
    activities = Activity.objects.filter(intern=intern).order_by("activity_date", "id")

    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    width, height = A4

    y = height - 50
    c.setFont("Helvetica-Bold", 14)
    c.drawString(50, y, f"Activity Report: {intern.full_name}")
    y -= 18

    c.setFont("Helvetica", 10)
    c.drawString(50, y, f"Department: {intern.department}    Supervisor: {intern.supervisor or '-'}")
    y -= 14
    c.drawString(50, y, f"Internship: {intern.start_date} to {intern.end_date}")
    y -= 14
    c.drawString(50, y, f"Generated: {timezone.now().strftime('%Y-%m-%d %H:%M')}")
    y -= 25

    c.setFont("Helvetica-Bold", 10)
    c.drawString(50, y, "Date")
    c.drawString(140, y, "Description")
    y -= 14

    c.setFont("Helvetica", 9)

    if not activities:
        c.drawString(50, y, "No activities recorded.")

    for activity in activities:
        lines = wrap(activity.description, 80) or [""]
        if y - 12 * len(lines) < 60:
            c.showPage()
            c.setFont("Helvetica", 9)
            y = height - 50

        c.drawString(50, y, activity.activity_date.isoformat())
        for line in lines:
            c.drawString(140, y, line)
            y -= 12
        y -= 4

    c.showPage()
    c.save()
    return buffer.getvalue()
