from typing import Any, Dict, Optional


def create_response(success: bool, message: str, data: Any = None, error: Optional[Any] = None) -> Dict[str, Any]:
    """Uniform JSON envelope for API responses"""
    response = {"success": success, "message": message}
    if data is not None:
        response["data"] = data
    if error is not None:
        response["error"] = error
    return response
