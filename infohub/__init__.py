"""
InfoHub - a small information dashboard.

Three independent widgets (weather, currency conversion, motivational quote)
are populated by asking a generative language model for schema-constrained
JSON and rendering the parsed result with loading/error/success states.
"""

__version__ = "1.0.0"
