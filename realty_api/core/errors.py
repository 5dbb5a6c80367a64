"""
Realty API - Errors
Hierarquia de erros de domínio com código estruturado
"""
from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Códigos estáveis retornados no envelope de erro"""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    BAD_REQUEST = "BAD_REQUEST"
    FORBIDDEN = "FORBIDDEN"
    UNAUTHORIZED = "UNAUTHORIZED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class AppError(Exception):
    """
    Erro base da aplicação.

    O handler HTTP decide status e código pelo tipo do erro,
    nunca pelo texto da mensagem.
    """
    code: ErrorCode = ErrorCode.INTERNAL_SERVER_ERROR
    status_code: int = 500

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        error = {"code": self.code.value, "message": self.message}
        if self.details is not None:
            error["details"] = self.details
        return {"success": False, "error": error}


class ValidationError(AppError):
    code = ErrorCode.VALIDATION_ERROR
    status_code = 400


class NotFoundError(AppError):
    code = ErrorCode.NOT_FOUND
    status_code = 404


class ConflictError(AppError):
    code = ErrorCode.CONFLICT
    status_code = 409


class BadRequestError(AppError):
    code = ErrorCode.BAD_REQUEST
    status_code = 400


class ForbiddenError(AppError):
    code = ErrorCode.FORBIDDEN
    status_code = 403


class UnauthorizedError(AppError):
    code = ErrorCode.UNAUTHORIZED
    status_code = 401


class InternalServerError(AppError):
    code = ErrorCode.INTERNAL_SERVER_ERROR
    status_code = 500


class LeaderConflictError(BadRequestError):
    """Equipe já possui um líder ativo"""

    def __init__(self, message: str = "Team already has a leader"):
        super().__init__(message)


class LeaderRequiredError(BadRequestError):
    """Operação deixaria a equipe sem líder ativo"""

    def __init__(self, message: str = "Team must have at least one leader"):
        super().__init__(message)
