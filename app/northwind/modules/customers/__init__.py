"""
Customers module.

Scope:
- Customer model mapped to the Northwind `Customers` table
- CustomerRepository: the one table accessor used by services and tests
- CustomerManager: create / update / delete / retrieve facade
"""
