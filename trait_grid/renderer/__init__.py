"""
Grids (:py:mod:`trait_grid.grid`) are rendered into HTML tables for one of
two publishing targets, selected by a
:py:class:`~trait_grid.renderer.images.RenderMode`:

* Comment mode produces plain ``<img>`` based markup in which images are
  cropped by a remote image proxy.
* Journal mode produces markup in which images are cropped using inline CSS
  and may be followed by a credit line.

The table structure itself is the same in both modes and is generated by
:py:mod:`trait_grid.renderer.html`. Only the rendering of cell images differs,
as implemented by the strategies in :py:mod:`trait_grid.renderer.images`,
which in turn use the crop calculations in :py:mod:`trait_grid.renderer.crop`.

:py:mod:`trait_grid.renderer.html`: HTML Table Renderer
=======================================================

.. automodule:: trait_grid.renderer.html

:py:mod:`trait_grid.renderer.images`: Cell image strategies
===========================================================

.. automodule:: trait_grid.renderer.images

:py:mod:`trait_grid.renderer.crop`: Crop geometry
=================================================

.. automodule:: trait_grid.renderer.crop

:py:mod:`trait_grid.renderer.tags`: HTML tag generation
=======================================================

.. automodule:: trait_grid.renderer.tags
"""
