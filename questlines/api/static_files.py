"""SPA Static Files — serves the built frontend with client-side route fallback.

Invariants:
    - Existing files are served as-is (StaticFiles html=True handles index for "/")
    - Unknown paths outside the API prefix fall back to index.html
    - Paths under the API prefix are never rewritten: unmatched API calls stay 404

Design Decisions:
    - Subclass StaticFiles and override get_response: keeps Starlette's caching,
      range and content-type handling for real files
    - Mounted AFTER the API routers so API routes take precedence
"""

from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope


class SPAStaticFiles(StaticFiles):
    """StaticFiles that answers unknown client routes with index.html."""

    def __init__(self, *, directory: str, api_prefix: str = "/api", **kwargs):
        super().__init__(directory=directory, html=True, **kwargs)
        self.api_prefix = api_prefix.strip("/")

    def is_api_path(self, path: str) -> bool:
        if not self.api_prefix:
            return False
        return path == self.api_prefix or path.startswith(self.api_prefix + "/")

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404 or self.is_api_path(path):
                raise
            return await super().get_response("index.html", scope)
