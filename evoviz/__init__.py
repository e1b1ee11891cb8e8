"""Core (UI-agnostic) visualizer logic.

This package contains:
- value parsing (JSON array or CSV text -> floats)
- session state and its transitions
- mock evolution data
- page compute functions (JSON-serializable payloads)
- chart helpers (Altair -> Vega-Lite spec dict)
"""
