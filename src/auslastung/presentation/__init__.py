"""Read-only console presentation of finished tables."""

from auslastung.presentation.console import TableRenderer, paginate, sort_frame

__all__ = ["TableRenderer", "paginate", "sort_frame"]
