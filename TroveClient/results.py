from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import ApiError
from .models import Instance, RootUser, map_instance


@dataclass
class Result:
    """
    Outcome of a single operation.
    - body: decoded response body (None for header-only responses)
    - headers: response headers
    - err: the error that ended the call, if any

    Check err (or call extract()/extract_err()) before trusting body or headers.
    """

    body: Any = None
    headers: Dict[str, str] = field(default_factory=dict)
    err: Optional[Exception] = None

    def extract_err(self) -> None:
        if self.err is not None:
            raise self.err

    def _body_key(self, key: str) -> Any:
        self.extract_err()
        if not isinstance(self.body, dict) or key not in self.body:
            raise ApiError(f"Response body missing {key!r}: {self.body!r}")
        return self.body[key]


class _InstanceResult(Result):
    def extract(self) -> Instance:
        d = self._body_key("instance")
        if not isinstance(d, dict):
            raise ApiError(f"Response body has no instance object: {self.body!r}")
        return map_instance(d)


class CreateResult(_InstanceResult):
    pass


class GetResult(_InstanceResult):
    pass


class DeleteResult(Result):
    pass


class EnableRootUserResult(Result):
    def extract(self) -> RootUser:
        u = self._body_key("user")
        if not isinstance(u, dict):
            raise ApiError(f"Response body has no user object: {self.body!r}")
        return RootUser(name=str(u.get("name") or ""), password=u.get("password"))


class IsRootEnabledResult(Result):
    def extract(self) -> bool:
        return bool(self._body_key("rootEnabled"))


class ActionResult(Result):
    pass


class ConfigurationResult(Result):
    pass


class DetachReplicaResult(Result):
    pass
