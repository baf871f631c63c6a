from typing import Any, Dict

from fastapi import status

from level.result import Error


class ClientError(Exception):
    """A use case error the caller can act on, rendered with its details"""

    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "code": self.base_error.code,
            "message": self.base_error.message,
        }
        if self.base_error.details:
            payload["details"] = self.base_error.details
        return {"error": payload}


class ServerError(Exception):
    """An unexpected use case error; only its code leaves the server"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": {"code": self.base_error.code, "message": "Internal server error"}}
