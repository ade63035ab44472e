"""Managed-document integrity engine for generated project reports.

Validates and repairs the evaluation report, improvement report, and
Prompt.md documents. Auto-managed regions are demarcated:
    <!-- AUTO-OVERVIEW-START -->
    ## Project Overview
    ...
    <!-- AUTO-OVERVIEW-END -->

Anything outside these markers is preserved untouched.
"""

__version__ = "0.4.0"
