"""Store writers and SDK client.

This module persists metric snapshots and time-series batches.
It also wires the write and read paths behind one SDK client.
"""
