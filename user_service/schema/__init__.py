"""Schema module for the user service.

schema.sql in this package is the source of truth for the data model.
"""
