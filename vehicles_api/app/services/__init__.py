"""
Service layer abstraction.

Services sit between the HTTP handlers and the repositories.  They
currently delegate straight to the repository, which keeps a seam for
business rules that do not belong in either the routes or the store.
"""
