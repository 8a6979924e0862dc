"""Domain layer — job item variants, library sources, and host contracts.

Pure value types. Nothing here talks to the host platform directly.
"""
