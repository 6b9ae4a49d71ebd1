"""Stream record ingestion.

This module decodes delivery-stream records and orchestrates the
snapshot and time-series writes of each invocation.
"""
