"""
AI Shell: an interactive shell that runs commands and answers natural-language
requests through an LLM.
"""

__version__ = "0.1.0"
