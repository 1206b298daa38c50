"""Display metadata for video job and compliance statuses."""

from __future__ import annotations

from typing import Dict, Optional

JOB_STATUS_BADGES: Dict[str, Dict[str, str]] = {
    "queued": {"label": "Queued", "icon": "clock", "variant": "secondary"},
    "approved": {"label": "Approved", "icon": "check-circle", "variant": "default"},
    "script_ready": {"label": "Script Ready", "icon": "loader", "variant": "secondary"},
    "rendered": {"label": "Rendered", "icon": "loader", "variant": "secondary"},
    "merged": {"label": "Merged", "icon": "loader", "variant": "secondary"},
    "captioned": {"label": "Captioned", "icon": "loader", "variant": "secondary"},
    "ready_for_post": {"label": "Ready to Post", "icon": "check-circle", "variant": "default"},
    "posted": {"label": "Posted", "icon": "check-circle", "variant": "default"},
    "error": {"label": "Error", "icon": "x-circle", "variant": "destructive"},
    "manual_review": {"label": "Manual Review", "icon": "alert-circle", "variant": "outline"},
}

COMPLIANCE_BADGES: Dict[str, Dict[str, str]] = {
    "unchecked": {"label": "Unchecked", "icon": "clock", "tone": "muted"},
    "compliant": {"label": "Compliant", "icon": "check-circle", "tone": "success"},
    "auto_adjusted": {"label": "Auto-Adjusted", "icon": "alert-circle", "tone": "warning"},
    "flagged": {"label": "Flagged", "icon": "x-circle", "tone": "destructive"},
    "manual_review": {"label": "Manual Review", "icon": "alert-circle", "tone": "destructive"},
}


def job_status_badge(status: Optional[str]) -> Dict[str, str]:
    key = str(status or "").strip().lower()
    badge = JOB_STATUS_BADGES.get(key, JOB_STATUS_BADGES["queued"])
    return {"status": key if key in JOB_STATUS_BADGES else "queued", **badge}


def compliance_badge(status: Optional[str]) -> Dict[str, str]:
    key = str(status or "").strip().lower()
    badge = COMPLIANCE_BADGES.get(key, COMPLIANCE_BADGES["unchecked"])
    return {"status": key if key in COMPLIANCE_BADGES else "unchecked", **badge}
