"""Rendering subpackage.

Turns immutable ``Grid`` snapshots into Pillow images. See
:mod:`grid_pieces.renderer.image` for the drawing routine; plain text output
lives in :mod:`grid_pieces.utils.render`.
"""
