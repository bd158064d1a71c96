"""Ingestion layer.

Turns raw appliance telemetry (JSON text or binary frames) into plain
field mappings according to a device model's monitoring declaration.
"""

__all__: list[str] = []
