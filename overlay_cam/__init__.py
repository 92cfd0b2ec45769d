"""
Overlay Camera

Composition guides for a camera preview, driven by typed commands:
"add thirds grid", "draw ellipse 70% wide 40% tall", "red frame with 10% inset".

Priorities:
1. Deterministic, explainable command interpretation (ordered rules, no ML)
2. Renderers that are pure geometry over a frame
3. User presets that survive restarts
"""

__version__ = "0.1.0"
__author__ = "Overlay Camera Team"
