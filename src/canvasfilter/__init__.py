"""
canvasfilter: visibility filtering for node/edge canvases.

Computes which nodes and edges of a canvas stay visible for a given
predicate (selection reachability, color, tag) and applies the result by
hiding or fading everything else.
"""

__version__ = "0.3.0"
