"""
Customer notes module.

Notes reference a customer by customer_number; the reference is not enforced.
"""
