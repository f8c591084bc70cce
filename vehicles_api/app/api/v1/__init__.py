"""
Version 1 of the API.

This subpackage bundles the vehicle endpoints for the first public
version of the Vehicles API.
"""
