"""
.. This module acts as the top-level API documentation.

.. module: pyroots

.. autosummary::
    :toctree: generated/

    solve

"""

__version__ = "0.1.0"

# Written by Eric J. Whitney, April 2023.

# ======================================================================
