from .default import DEFAULT_LAYOUT

__all__ = ["DEFAULT_LAYOUT"]
