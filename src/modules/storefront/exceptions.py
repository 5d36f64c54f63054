"""Storefront exceptions."""

from __future__ import annotations


class TransportFailure(Exception):
    """The product endpoint could not be reached or answered garbage."""
