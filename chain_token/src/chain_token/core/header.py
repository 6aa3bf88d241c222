from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

_KNOWN_FIELDS = ("typ", "alg")


@dataclass(frozen=True)
class TokenHeader:
    """Token header: the ``typ``/``alg`` fields plus ordered extension fields.

    Fields set to ``None`` are absent from the serialized header. This covers
    extension fields too, so a custom field cannot carry a JSON ``null``.
    """

    typ: Optional[Any] = None
    alg: Optional[Any] = None
    extensions: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def merge(cls, defaults: "TokenHeader", custom: Mapping[str, Any] | None) -> "TokenHeader":
        """Overlay caller-supplied fields on ``defaults``.

        Caller fields win unconditionally. Extension keys keep the caller's
        order after any default extensions they do not replace.
        """
        custom = dict(custom or {})
        known = {name: custom.pop(name, getattr(defaults, name)) for name in _KNOWN_FIELDS}
        extensions = dict(defaults.extensions)
        extensions.update(custom)
        return cls(typ=known["typ"], alg=known["alg"], extensions=extensions)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for name in _KNOWN_FIELDS:
            value = getattr(self, name)
            if value is not None:
                out[name] = value
        for key, value in self.extensions.items():
            if value is not None:
                out[key] = value
        return out


# Placeholders only; ``merge`` drops them unless the caller supplies values.
PLACEHOLDER_HEADER = TokenHeader()


__all__ = ["PLACEHOLDER_HEADER", "TokenHeader"]
