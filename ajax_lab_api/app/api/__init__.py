"""
API package containing versioned routes and shared dependencies.

``deps`` resolves the per‑application service objects; each version
subpackage exposes a top‑level ``router``.
"""
