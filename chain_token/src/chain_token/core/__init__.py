from .header import PLACEHOLDER_HEADER, TokenHeader

__all__ = ["PLACEHOLDER_HEADER", "TokenHeader"]
