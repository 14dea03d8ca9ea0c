from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional
import os

@dataclass(frozen=True)
class TroveSettings:
    endpoint: str
    token: str
    project_id: Optional[str] = None
    verify_tls: bool = True
    timeout: float = 10.0

    @staticmethod
    def from_env() -> "TroveSettings":
        verify = os.getenv("TROVE_VERIFY_TLS", "true").lower() not in ("false", "0", "no")
        timeout_str = os.getenv("TROVE_TIMEOUT", "").strip()
        return TroveSettings(
            endpoint=os.getenv("TROVE_ENDPOINT", "").strip(),
            token=os.getenv("TROVE_TOKEN", "").strip(),
            project_id=os.getenv("TROVE_PROJECT_ID") or None,
            verify_tls=verify,
            timeout=float(timeout_str) if timeout_str else 10.0,
        )

    def with_overrides(
        self,
        *,
        endpoint: Optional[str] = None,
        token: Optional[str] = None,
        project_id: Optional[str] = None,
        verify_tls: Optional[bool] = None,
        timeout: Optional[float] = None,
    ) -> "TroveSettings":
        return replace(
            self,
            endpoint=self.endpoint if endpoint is None else endpoint,
            token=self.token if token is None else token,
            project_id=self.project_id if project_id is None else project_id,
            verify_tls=self.verify_tls if verify_tls is None else verify_tls,
            timeout=self.timeout if timeout is None else timeout,
        )
