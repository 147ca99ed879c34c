"""Bounded contexts of the FOLIO pipeline (loading, rendering)."""
