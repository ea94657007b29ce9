"""
Dash adapter layer: app factory, component ids, layout and callbacks.
"""
