"""Feature modules for neo-entities.

Each feature owns the domain entities of one concept area. Entities embed an
``EntityInfo`` envelope and expose ``register_new`` for fresh records and
``create_from_existing_info`` for stored ones.
"""
