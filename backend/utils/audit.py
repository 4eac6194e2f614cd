from sqlalchemy.orm import Session

from database import store_lock
from models.log import Log

def write_log(db: Session, *, user_id=None, action, resource, status="SUCCESS", meta=None):
    entry = Log(user_id=user_id, action=action, resource=resource, status=status, meta=meta or {})
    with store_lock:
        db.add(entry)
        db.commit()
