"""Service layer public exports."""

from commute.services.option_presenter import render_options_text

__all__ = ["render_options_text"]
