"""
Webhook processing service for calling API events
"""

import logging
from datetime import datetime
from typing import Dict, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError

from crm_admin.models import db
from crm_admin.models.call import Call
from crm_admin.models.webhook_log import WebhookLog
from crm_admin.services.vapi_service import VapiService
from crm_admin.utils.formatters import parse_timestamp

logger = logging.getLogger(__name__)

# Ended reason -> calls.outcome values the outcome constraint accepts
ENDED_REASON_OUTCOMES = {
    'customer-ended-call': 'answered',
    'assistant-ended-call': 'answered',
    'assistant-said-end-call-phrase': 'answered',
    'exceeded-max-duration': 'answered',
    'silence-timed-out': 'no_answer',
    'customer-did-not-answer': 'no_answer',
    'customer-busy': 'busy',
    'voicemail': 'voicemail',
}

# Platform call status -> calls.status
PLATFORM_STATUSES = {
    'queued': 'queued',
    'ringing': 'ringing',
    'in-progress': 'in_progress',
    'forwarding': 'in_progress',
    'ended': 'completed',
}

END_EVENTS = ('end-of-call-report', 'call-ended')

def _first(*values):
    """First value that is not None or empty"""
    for value in values:
        if value is not None and value != '' and value != [] and value != {}:
            return value
    return None

def outcome_for_ended_reason(ended_reason: Optional[str]) -> Optional[str]:
    """Map an ended reason to an outcome, None when we can't tell"""
    if not ended_reason:
        return None
    if ended_reason in ENDED_REASON_OUTCOMES:
        return ENDED_REASON_OUTCOMES[ended_reason]
    if 'error' in ended_reason or 'failed' in ended_reason or ended_reason.startswith('vapifault'):
        return 'failed'
    return None

def split_payload(payload) -> Tuple[Dict, Optional[str], Dict]:
    """Return (message, event type, call object) for nested or flat payloads"""
    if not isinstance(payload, dict):
        return {}, None, {}

    message = payload.get('message') if isinstance(payload.get('message'), dict) else payload
    call_data = message.get('call') if isinstance(message.get('call'), dict) else {}
    return message, message.get('type'), call_data

class WebhookService:
    """Service for processing calling API webhooks"""

    def find_call(self, call_id: Optional[str]) -> Optional[Call]:
        """Look a call up by platform id, then by our own id"""
        if not call_id:
            return None
        call = Call.query.filter_by(vapi_call_id=call_id).first()
        if call is None:
            call = db.session.get(Call, call_id)
        return call

    def log_event(self, payload, status: str = 'received') -> Optional[WebhookLog]:
        """Store the raw event; a failure here never reaches the caller"""
        message, event_type, call_data = split_payload(payload)
        try:
            entry = WebhookLog(
                event_id=_first(payload.get('id') if isinstance(payload, dict) else None, message.get('id')),
                event_type=event_type,
                call_id=_first(call_data.get('id'), message.get('callId')),
                payload=payload if isinstance(payload, dict) else {'raw': payload},
                status=status,
            )
            entry.save()
            return entry
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to store raw webhook: {e}")
            return None

    def _finish_log(self, entry: Optional[WebhookLog], status: str, error: Optional[str] = None):
        if entry is None:
            return
        try:
            entry.status = status
            entry.error = error
            entry.processed_at = datetime.utcnow()
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to update webhook log {entry.id}: {e}")

    def process_event(self, payload) -> Tuple[bool, str]:
        """Process one webhook event, returns (updated, message)"""
        entry = self.log_event(payload)
        message, event_type, call_data = split_payload(payload)
        call_id = _first(call_data.get('id'), message.get('callId'))

        if not event_type:
            self._finish_log(entry, 'ignored', 'Missing event type')
            return False, "Missing event type"

        if not call_id:
            logger.warning(f"No call id in {event_type} webhook")
            self._finish_log(entry, 'ignored', 'Missing call id')
            return False, f"No call id in {event_type} event"

        try:
            call = self.find_call(call_id)
            if call is None:
                logger.warning(f"Call not found in database: {call_id}")
                self._finish_log(entry, 'ignored', 'Unknown call')
                return False, f"Call {call_id} not found"

            updates = self.build_updates(event_type, message, call_data, call)
            if updates is None:
                logger.info(f"Unhandled webhook type: {event_type}")
                self._finish_log(entry, 'ignored', f"Unhandled type {event_type}")
                return False, f"Event type {event_type} not handled"

            self.apply_updates(call, updates, payload)
            self._finish_log(entry, 'processed')
            logger.info(f"Updated call {call_id} with {event_type} data")
            return True, f"Updated call {call_id}"

        except (SQLAlchemyError, ValueError, TypeError, OverflowError) as e:
            db.session.rollback()
            logger.error(f"Error processing {event_type} webhook for {call_id}: {e}")
            self._finish_log(entry, 'failed', str(e))
            return False, f"Error processing webhook: {e}"

    def build_updates(self, event_type: str, message: Dict, call_data: Dict, call: Call) -> Optional[Dict]:
        """Column updates for an event, None for event types we ignore"""
        if event_type in END_EVENTS:
            return self.end_of_call_updates(message, call_data)

        if event_type == 'call-started':
            return {
                'status': 'in_progress',
                'started_at': parse_timestamp(call_data.get('startedAt')) or datetime.utcnow(),
            }

        if event_type == 'status-update':
            platform_status = _first(message.get('status'), call_data.get('status'))
            status = PLATFORM_STATUSES.get(platform_status)
            if status is None:
                return {}
            updates = {'status': status}
            ended_reason = _first(message.get('endedReason'), call_data.get('endedReason'))
            if status == 'completed' and ended_reason:
                updates['end_reason'] = ended_reason
            return updates

        if event_type == 'transcript':
            # Only final lines, partials are rewritten by the next message
            if message.get('transcriptType') != 'final' or not message.get('transcript'):
                return {}
            role = (message.get('role') or 'unknown').capitalize()
            line = f"{role}: {message['transcript']}"
            return {'transcript': f"{call.transcript}\n{line}" if call.transcript else line}

        return None

    def end_of_call_updates(self, message: Dict, call_data: Dict) -> Dict:
        """Pull status, transcript, recording and cost out of an end-of-call report"""
        artifact = message.get('artifact') or call_data.get('artifact') or {}
        analysis = message.get('analysis') or call_data.get('analysis') or {}
        recording = call_data.get('recording') if isinstance(call_data.get('recording'), dict) else {}

        ended_reason = _first(message.get('endedReason'), call_data.get('endedReason'))
        started_at = parse_timestamp(_first(message.get('startedAt'), call_data.get('startedAt')))
        ended_at = parse_timestamp(_first(message.get('endedAt'), call_data.get('endedAt')))

        duration = _first(message.get('durationSeconds'), call_data.get('duration'))
        if duration is None and started_at and ended_at:
            duration = (ended_at - started_at).total_seconds()

        updates = {
            'status': 'completed',
            'end_reason': ended_reason,
            'started_at': started_at,
            'ended_at': ended_at or datetime.utcnow(),
            'duration': int(round(float(duration))) if duration is not None else None,
            'cost': _first(message.get('cost'), call_data.get('cost')),
            'cost_breakdown': _first(message.get('costBreakdown'), call_data.get('costBreakdown')),
            'transcript': _first(artifact.get('transcript'), message.get('transcript'), call_data.get('transcript')),
            'transcript_messages': _first(artifact.get('messages'), message.get('messages'), call_data.get('messages')),
            'recording_url': _first(
                artifact.get('recordingUrl'), message.get('recordingUrl'),
                call_data.get('recordingUrl'), recording.get('url'),
                artifact.get('stereoRecordingUrl'), call_data.get('stereoRecordingUrl'),
            ),
            'summary': _first(message.get('summary'), analysis.get('summary'), call_data.get('summary')),
            'sentiment': _first(analysis.get('userSentiment'), analysis.get('sentiment')),
            'outcome': outcome_for_ended_reason(ended_reason),
        }

        if updates['cost'] is not None:
            updates['cost'] = float(updates['cost'])

        # Keep existing column values when the report has nothing for them
        return {key: value for key, value in updates.items() if value is not None}

    def apply_updates(self, call: Call, updates: Dict, payload=None):
        """Write updates onto the call and commit"""
        for column, value in updates.items():
            setattr(call, column, value)
        if payload is not None:
            call.raw_webhook_data = payload
        call.updated_at = datetime.utcnow()
        db.session.commit()

    def process_log_only(self, payload) -> Tuple[bool, str]:
        """Second shim: store the raw event and touch nothing else"""
        message, event_type, call_data = split_payload(payload)
        logger.info(f"Webhook received: type={event_type} call={call_data.get('id')}")
        entry = self.log_event(payload, status='logged')
        if entry is None:
            return False, "Webhook log could not be stored"
        return True, f"Logged {event_type or 'unknown'} event"

    def sync_call_from_vapi(self, call_id: str, vapi_service=None) -> Tuple[bool, str]:
        """Fetch a call from the calling API and apply it like an end-of-call report"""
        vapi_service = vapi_service or VapiService()
        call = self.find_call(call_id)
        if call is None:
            return False, f"Call {call_id} not found"

        call_data = vapi_service.get_call(call.vapi_call_id or call_id)
        if not call_data:
            return False, f"Calling API returned nothing for {call_id}"

        updates = self.end_of_call_updates({}, call_data)
        if call_data.get('status') and call_data.get('status') != 'ended':
            # Still running on the platform side
            updates['status'] = PLATFORM_STATUSES.get(call_data['status'], call.status)
            if not call_data.get('endedAt'):
                updates.pop('ended_at', None)
                updates.pop('outcome', None)

        try:
            self.apply_updates(call, updates)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Error syncing call {call_id}: {e}")
            return False, f"Error syncing call: {e}"

        return True, f"Synced call {call_id} ({len(updates)} fields)"
