"""
Data access layer.

Repositories own the storage of a domain.  The vehicle repository
keeps everything in a process‑wide dictionary keyed by vehicle id.
"""
