"""
Operations Layer

Storage operations that sit between the database layer and the services:
- Database layer: engine, sessions and table models
- Operations layer: lookups, validated creation and counts
- Services layer: listing, ranking and search queries

- DeveloperStore: Developer lookups, creation and counts
"""
