"""
Cross‑cutting infrastructure: configuration, logging, errors and storage.
"""
