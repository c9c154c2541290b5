"""
Cross‑cutting pieces shared by every layer: settings, logging setup,
error types and demo data.
"""
