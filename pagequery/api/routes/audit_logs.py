"""Administrator audit log search."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pagequery.api.deps import build_executor, get_db, get_settings, require_role, run_query
from pagequery.core.config import Settings
from pagequery.models import AdminAuditLog
from pagequery.schemas.audit_log import AuditLogOut, AuditLogSearchRequest
from pagequery.schemas.pagination import Page
from pagequery.schemas.principal import Role
from pagequery.services.listings import AUDIT_LOGS

router = APIRouter(prefix="/admin/audit-logs", tags=["audit"])


@router.patch(
    "",
    response_model=Page[AuditLogOut],
    dependencies=[Depends(require_role(Role.ADMIN))],
)
def search_audit_logs(
    body: Optional[AuditLogSearchRequest] = None,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    executor = build_executor(AUDIT_LOGS, db, AdminAuditLog, AuditLogOut, settings)
    return run_query(executor, body)
