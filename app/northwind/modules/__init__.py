"""
Feature modules live under this package.

Each module owns its models, repository and service, and reuses the shared
data context (engine, session scope) from `app.northwind.db`.
"""
