"""
Services — file writing, import rewriting, sync and the generators.
"""
