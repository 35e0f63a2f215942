"""Multi-sided surface patches: generalized Bezier, S-patch and Super-D networks, with Bezier and blending helpers."""

__version__ = "0.1.0"