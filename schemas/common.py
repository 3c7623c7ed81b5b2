from pydantic import BaseModel
from typing import Any, Dict, Optional


class PageMetadata(BaseModel):
    total: int
    limit: Optional[int] = None
    offset: int = 0


# Every endpoint answers with `{success, data?, message?, metadata?}`
def envelope(data: Any = None, message: Optional[str] = None,
             metadata: Optional[PageMetadata] = None, success: bool = True) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": success}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    if metadata is not None:
        body["metadata"] = metadata.model_dump()
    return body
