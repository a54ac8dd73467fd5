"""
Thingful services.

- postgres: asyncpg pool management and query execution
- repositories: SQL for users, things and reviews
- seed: sample data for local development
"""
