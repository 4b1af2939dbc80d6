"""Host adapter for the property enumeration engine.

Translates host payloads into `formatting` inputs and PropertyInstance items
back into the host's enumeration response shape.
"""
