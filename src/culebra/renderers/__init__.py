"""Culebra renderers.

Renderers convert typed AST nodes into output text.

Available Renderers:
- PythonRenderer: Renders the JavaScript AST as Python source

Thread Safety:
Renderers keep no per-render state on the instance.
Safe for concurrent use from multiple threads.

"""

from culebra.renderers.python import PythonRenderer, is_counting_loop, render_python

__all__ = ["PythonRenderer", "is_counting_loop", "render_python"]
