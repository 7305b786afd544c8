"""Ошибки доменного уровня.

Сервисы поднимают эти исключения, роутеры переводят их в HTTPException
с кодом из ``status_code``. Чужой ресурс и отсутствующий ресурс
неразличимы: в обоих случаях поднимается NotFoundError.
"""

from fastapi import status


class DomainError(Exception):
    """Базовая ошибка домена"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Отсутствует или пусто обязательное поле, некорректная область"""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(DomainError):
    """Ресурс не существует или принадлежит другому пользователю"""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(DomainError):
    """Нарушение уникальности"""

    status_code = status.HTTP_409_CONFLICT


class UpstreamFailure(DomainError):
    """Сбой внешнего хранилища (файлы или БД)"""

    status_code = status.HTTP_502_BAD_GATEWAY
