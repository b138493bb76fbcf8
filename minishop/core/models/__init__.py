"""
Models shared across minishop layers.

Subpackages:
    io: Request/response schemas used at the API boundary and by
        projection queries. They are kept apart from the database entities so
        the API contract can evolve independently of the tables.
"""
