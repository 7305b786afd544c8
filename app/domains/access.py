"""Контроль доступа по владельцу.

Каждый запрос к документу или выделению фильтруется сразу по
идентификатору ресурса и владельцу. Если строка не нашлась, вызывающий
получает NotFoundError - существование чужого ресурса не раскрывается.
"""

import uuid
from typing import Optional, TypeVar

from app.core.exceptions import NotFoundError

T = TypeVar("T")


def ensure_owned(resource: Optional[T], owner_id: uuid.UUID, label: str) -> T:
    """Возвращает ресурс, если он найден и принадлежит owner_id"""
    if resource is None or getattr(resource, "owner_id", None) != owner_id:
        raise NotFoundError(f"{label} not found")
    return resource
