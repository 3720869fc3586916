"""
Customers module.

- Customers are identified by customer_number (natural key)
- created_at / updated_at are set by the service, never by the repository
- Hard delete only
"""
