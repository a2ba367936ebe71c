from pathlib import Path
from typing import Any

import httpx

_CONTENT_TYPES = {
    ".pdf": "application/pdf",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


class DocumentsApiClient:
    """Thin async wrapper over the documents HTTP API.

    The session cookie issued by the server is kept by the underlying
    ``httpx.AsyncClient``, so one instance corresponds to one session.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def upload(self, path: Path) -> dict[str, Any]:
        path = Path(path)
        content_type = _CONTENT_TYPES.get(path.suffix.lower(), "application/octet-stream")
        with path.open("rb") as fh:
            response = await self._client.post(
                "/api/documents/upload",
                files={"file": (path.name, fh, content_type)},
            )
        response.raise_for_status()
        return response.json()

    async def list_documents(self) -> list[dict[str, Any]]:
        response = await self._client.get("/api/documents")
        response.raise_for_status()
        return response.json()

    async def get_document(self, document_id: int) -> dict[str, Any]:
        response = await self._client.get(f"/api/documents/{document_id}")
        response.raise_for_status()
        return response.json()
