"""
Concrete platform ports.

Imported lazily by the bootstrap: pynput needs a running display server.
"""
