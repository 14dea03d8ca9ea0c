from __future__ import annotations
import json
import sys
from typing import Any, Dict, Iterable, Optional, Tuple
import requests
from .errors import ApiError, ApiErrorDetails, map_http_error

DEFAULT_OK_CODES: Dict[str, Tuple[int, ...]] = {
    "GET": (200,),
    "POST": (201, 202),
    "PUT": (201, 202),
    "PATCH": (200, 202, 204),
    "DELETE": (202, 204),
}

class TroveV1Client:
    """
    Service client for the Trove (database) v1.0 REST API.
    - Raw dicts in, (body, headers) out
    - Raises typed ApiError subclasses on transport errors and unexpected status codes
    """

    def __init__(
        self,
        endpoint: str,
        token: str,
        *,
        project_id: Optional[str] = None,
        verify: bool = True,
        timeout: float = 10.0,
        debug: bool = False,
    ) -> None:
        if not endpoint.startswith("http"):
            endpoint = "https://" + endpoint
        base = endpoint.rstrip("/")
        if project_id and not base.endswith("/" + project_id):
            base = f"{base}/{project_id}"
        self.base_url = base + "/"
        self.timeout = timeout
        self.debug = debug

        self.session = requests.Session()
        self.session.verify = verify
        self.session.headers.update({"Accept": "application/json"})
        if token:
            self.session.headers["X-Auth-Token"] = token

    def url(self, *parts: str) -> str:
        return self.base_url + "/".join(p.strip("/") for p in parts)

    # ---------------- HTTP ----------------

    def request(
        self,
        method: str,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        ok_codes: Optional[Iterable[int]] = None,
    ) -> Tuple[Any, Dict[str, str]]:
        method = method.upper()
        if not url.startswith("http"):
            url = self.url(url)
        expected = tuple(ok_codes) if ok_codes else DEFAULT_OK_CODES.get(method, (200,))

        if self.debug:
            print(f"[DEBUG] HTTP {method} {url}", file=sys.stderr)
            if json_body is not None:
                print(f"[DEBUG]   json   = {json.dumps(json_body, ensure_ascii=False)}", file=sys.stderr)

        try:
            resp = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ApiError(
                f"{method} {url} failed: {exc}",
                details=ApiErrorDetails(url=url, method=method),
            ) from exc

        if self.debug:
            body_preview = (resp.text or "")[:500].replace("\n", "\\n")
            print(f"[DEBUG]   status = {resp.status_code}, body = {body_preview!r}", file=sys.stderr)

        if resp.status_code not in expected:
            status = resp.status_code
            code = None
            message = None
            detail: Any = None

            try:
                data = resp.json()
                # trove faults look like {"badRequest": {"code": 400, "message": "..."}}
                if isinstance(data, dict) and len(data) == 1:
                    code, inner = next(iter(data.items()))
                    if isinstance(inner, dict):
                        message = inner.get("message")
                        detail = inner.get("details") or inner
                    else:
                        detail = data
                else:
                    detail = data
            except ValueError:
                detail = resp.text.strip() or None

            exc_cls = map_http_error(status=status, code=code)
            raise exc_cls(
                f"{method} {url} failed with {status} (expected {list(expected)}): {message or detail}",
                details=ApiErrorDetails(
                    status=status,
                    code=code,
                    message=message,
                    detail=detail,
                    url=url,
                    method=method,
                ),
            )

        body: Any = None
        if resp.content:
            try:
                body = resp.json()
            except ValueError:
                body = None
        return body, dict(resp.headers)

    def get(self, url: str, *, ok_codes: Optional[Iterable[int]] = None) -> Tuple[Any, Dict[str, str]]:
        return self.request("GET", url, ok_codes=ok_codes)

    def post(self, url: str, json_body=None, *, ok_codes=None) -> Tuple[Any, Dict[str, str]]:
        return self.request("POST", url, json_body=json_body, ok_codes=ok_codes)

    def put(self, url: str, json_body=None, *, ok_codes=None) -> Tuple[Any, Dict[str, str]]:
        return self.request("PUT", url, json_body=json_body, ok_codes=ok_codes)

    def delete(self, url: str, *, ok_codes=None) -> Tuple[Any, Dict[str, str]]:
        return self.request("DELETE", url, ok_codes=ok_codes)
