"""Presenters turning mapping results into rich console output."""

from .suggestions import SuggestionsPresenter

__all__ = ["SuggestionsPresenter"]
