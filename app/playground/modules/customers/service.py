from __future__ import annotations

import logging

from app.playground.modules.customers.repository import CustomerRepository
from app.playground.modules.customers.schemas import Customer
from app.playground.result import Failure, Result
from app.playground.types import NullTime

logger = logging.getLogger(__name__)


def validate_customer_payload(customer: Customer) -> list[str]:
    """Validate a customer for insertion. Returns list of errors."""
    errors = []
    if customer.customer_number is None:
        errors.append("customer_number is required.")
    if not customer.name.strip():
        errors.append("name is required.")
    if not customer.email.strip():
        errors.append("email is required.")
    return errors


class CustomerService:
    """
    Business rules for customers: timestamp defaulting on insert and
    field-by-field merge on update. Reads and deletes pass straight through.
    """

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    def get_all(self) -> Result[list[Customer]]:
        result = self.repository.get_all()
        if not result.ok:
            logger.error("customer.get_all: %s", result.message)
        return result

    def get_by_customer_number(self, customer_number: int) -> Result[Customer]:
        result = self.repository.get_by_customer_number(customer_number)
        if not result.ok:
            logger.error("customer.get_by_customer_number: %s", result.message)
        return result

    def insert(self, customer: Customer) -> Result[None]:
        errors = validate_customer_payload(customer)
        if errors:
            return Failure.invalid(" ".join(errors))

        now = NullTime.now()
        if not customer.created_at.valid:
            customer.created_at = now
        if not customer.updated_at.valid:
            customer.updated_at = now

        result = self.repository.insert(customer)
        if not result.ok:
            logger.error("customer.insert: %s", result.message)
        return result

    def update(self, new_customer: Customer) -> Result[None]:
        """
        Merge the incoming customer over the stored one and write it back.

        Blank name/email/phone and a null birth_date keep the stored value.
        created_at always comes from the stored row; updated_at is always now.

        The read and the write are separate statements, so a concurrent
        update landing between them is overwritten (last write wins).
        """
        if new_customer.customer_number is None:
            return Failure.invalid("customer_number is required.")

        current = self.repository.get_by_customer_number(new_customer.customer_number)
        if not current.ok:
            logger.error("customer.update: %s", current.message)
            return current
        stored: Customer = current.value

        if not new_customer.name:
            new_customer.name = stored.name
        if not new_customer.email:
            new_customer.email = stored.email
        if not new_customer.phone:
            new_customer.phone = stored.phone
        if not new_customer.birth_date.valid:
            new_customer.birth_date = stored.birth_date
        new_customer.created_at = stored.created_at
        new_customer.updated_at = NullTime.now()

        result = self.repository.update(new_customer)
        if not result.ok:
            logger.error("customer.update: %s", result.message)
        return result

    def delete_by_customer_number(self, customer_number: int) -> Result[None]:
        result = self.repository.delete_by_customer_number(customer_number)
        if not result.ok:
            logger.error("customer.delete_by_customer_number: %s", result.message)
        return result
