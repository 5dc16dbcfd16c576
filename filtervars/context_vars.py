"""Variables that read their value from the request context."""

from __future__ import annotations

from typing import Any, MutableMapping, Optional

from filtervars.registry import Builder, SimpleBuilder, Variable, VariableError, register
from filtervars.request_context import UNSET

CHANNEL = "channel"
DEVICE = "device"
IP = "ip"
PLATFORM = "platform"
REFERER = "referer"
UA = "ua"
UID = "uid"
USER_TAG = "user_tag"
VERSION = "version"
IS_LOGIN = "is_login"
CTX_PREFIX = "ctx."


class ContextField(Variable):
    """Reads one named field of the request context."""

    cacheable = True

    def __init__(self, name: str, field: str) -> None:
        self.name = name
        self.field = field

    def value(self, ctx: Any, data: Any, cache: Optional[MutableMapping[str, Any]]) -> Any:
        result = getattr(ctx, self.field, UNSET)
        if result is UNSET:
            raise VariableError(f"{self.name} not found in context")
        return result


def _as_string(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "true"
    return str(value)


class IsLogin(Variable):
    """True when the context carries a non-blank user id."""

    name = IS_LOGIN
    cacheable = True

    def value(self, ctx: Any, data: Any, cache: Optional[MutableMapping[str, Any]]) -> bool:
        uid = getattr(ctx, "uid", UNSET)
        if uid is UNSET:
            return False
        return _as_string(uid).strip() != ""


class Ctx(Variable):
    """Reads a custom value stored in the context under a key."""

    cacheable = False

    def __init__(self, name: str, key: str) -> None:
        self.name = name
        self.key = key

    def value(self, ctx: Any, data: Any, cache: Optional[MutableMapping[str, Any]]) -> Any:
        if ctx is None:
            return None
        return ctx.lookup(self.key)


class CtxBuilder(Builder):
    """Builds ``ctx.<key>`` variables."""

    name = CTX_PREFIX

    def build(self, name: str) -> Optional[Ctx]:
        key = name[len(CTX_PREFIX):] if name.startswith(CTX_PREFIX) else name
        if not key:
            return None
        return Ctx(name, key)


for _field in (CHANNEL, DEVICE, IP, PLATFORM, REFERER, UA, UID, USER_TAG, VERSION):
    register(SimpleBuilder(ContextField(_field, _field)))
register(SimpleBuilder(IsLogin()))
register(CtxBuilder())