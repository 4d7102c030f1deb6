# SPDX-License-Identifier: MIT
"""Command-line tool and release planning for semantic versions."""

__version__ = "0.1.0"
