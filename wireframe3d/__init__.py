"""Wireframe 3D renderer: labelled points, edges, perspective projection, box collisions and a pygame demo."""

__version__ = "0.1.0"