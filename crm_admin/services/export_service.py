"""
Campaign call export to Excel
"""

import io
import logging

import openpyxl
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from crm_admin.exceptions import RecordNotFoundError
from crm_admin.models import db
from crm_admin.models.call import Call
from crm_admin.models.campaign import Campaign
from crm_admin.utils.formatters import format_duration

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = [
    'Lead', 'Phone', 'Status', 'Outcome', 'Duration',
    'Cost', 'Started At', 'Recording URL', 'Summary'
]

class CallExportService:
    """Builds xlsx workbooks of campaign calls"""

    def campaign_rows(self, campaign_id: str):
        """One row per call, oldest first"""
        calls = Call.query.filter_by(campaign_id=campaign_id).order_by(Call.started_at, Call.created_at).all()
        rows = []
        for call in calls:
            rows.append([
                call.lead.full_name if call.lead else '',
                call.phone_number or '',
                call.status or '',
                call.outcome or '',
                format_duration(call.duration),
                round(call.cost or 0, 4),
                call.started_at.strftime('%Y-%m-%d %H:%M:%S') if call.started_at else '',
                call.recording_url or '',
                call.summary or '',
            ])
        return rows

    def export_campaign_calls(self, campaign_id: str) -> bytes:
        """Workbook bytes for one campaign"""
        campaign = db.session.get(Campaign, campaign_id)
        if campaign is None:
            raise RecordNotFoundError('campaigns', campaign_id)

        wb = openpyxl.Workbook()
        ws = wb.active
        # Sheet titles are capped at 31 chars and can't hold some punctuation
        ws.title = ''.join(ch for ch in campaign.name if ch not in '[]:*?/\\')[:31] or 'Calls'

        ws.append(EXPORT_COLUMNS)
        for row in self.campaign_rows(campaign_id):
            ws.append(row)

        header_fill = PatternFill(start_color="305496", end_color="305496", fill_type="solid")
        header_font = Font(color="FFFFFF", bold=True)
        center = Alignment(horizontal="center", vertical="center")
        for cell in ws[1]:
            cell.fill = header_fill
            cell.font = header_font
            cell.alignment = center

        # Auto-size columns
        for col_num, column in enumerate(ws.columns, start=1):
            max_length = max(len(str(cell.value)) if cell.value is not None else 0 for cell in column)
            ws.column_dimensions[get_column_letter(col_num)].width = min(max_length + 2, 60)

        buf = io.BytesIO()
        wb.save(buf)
        buf.seek(0)
        logger.info(f"Exported {ws.max_row - 1} calls for campaign {campaign.name}")
        return buf.getvalue()

    def write_campaign_calls(self, campaign_id: str, path: str) -> str:
        """Write the workbook to disk and return the path"""
        with open(path, 'wb') as handle:
            handle.write(self.export_campaign_calls(campaign_id))
        return path
