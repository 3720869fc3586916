"""
SQL access for the customer table.

One statement per operation, executed on the caller's session and committed
on its own (no transaction spans two calls). Storage errors are caught here
and only here; everything above deals in Success/Failure.
"""
from __future__ import annotations

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.playground.modules.customers.models import CustomerModel
from app.playground.modules.customers.schemas import Customer
from app.playground.result import Failure, FailureKind, Result, Success

logger = logging.getLogger(__name__)

_customers = CustomerModel.__table__

_COLUMNS = (
    _customers.c.customer_number,
    _customers.c.name,
    _customers.c.email,
    _customers.c.phone,
    _customers.c.birth_date,
    _customers.c.created_at,
    _customers.c.updated_at,
)


def _row_to_customer(row) -> Customer:
    return Customer(
        customer_number=row.customer_number,
        name=row.name,
        email=row.email,
        phone=row.phone or "",
        birth_date=row.birth_date,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _values(customer: Customer) -> dict:
    return {
        "name": customer.name,
        "email": customer.email,
        "phone": customer.phone or None,
        "birth_date": customer.birth_date,
        "created_at": customer.created_at,
        "updated_at": customer.updated_at,
    }


class CustomerRepository:
    def __init__(self, s: Session):
        self.s = s

    def get_all(self) -> Result[list[Customer]]:
        stmt = select(*_COLUMNS).order_by(_customers.c.id)
        try:
            rows = self.s.execute(stmt).all()
        except SQLAlchemyError as e:
            self.s.rollback()
            logger.error("customer get_all failed: %s", e)
            return Failure(FailureKind.STORAGE, "Failed to get customers", e)
        return Success([_row_to_customer(r) for r in rows])

    def get_by_customer_number(self, customer_number: int) -> Result[Customer]:
        stmt = select(*_COLUMNS).where(_customers.c.customer_number == customer_number)
        try:
            row = self.s.execute(stmt).one_or_none()
        except SQLAlchemyError as e:
            self.s.rollback()
            logger.error("customer get_by_customer_number(%s) failed: %s", customer_number, e)
            return Failure(FailureKind.STORAGE, f"Failed to get customer number {customer_number}", e)
        if row is None:
            return Failure.not_found(f"No customer found with number {customer_number}")
        return Success(_row_to_customer(row))

    def insert(self, customer: Customer) -> Result[None]:
        stmt = insert(_customers).values(customer_number=customer.customer_number, **_values(customer))
        try:
            self.s.execute(stmt)
            self.s.commit()
        except SQLAlchemyError as e:
            self.s.rollback()
            logger.error("failed to insert customer %s: %s", customer.customer_number, e)
            return Failure(FailureKind.REJECTED, "Failed to Insert Customer", e)
        return Success(message=f"Succes Insert Customer with number {customer.customer_number}")

    def update(self, customer: Customer) -> Result[None]:
        """Overwrite every column of the row matching customer_number."""
        stmt = (
            update(_customers)
            .where(_customers.c.customer_number == customer.customer_number)
            .values(**_values(customer))
        )
        try:
            res = self.s.execute(stmt)
            self.s.commit()
        except SQLAlchemyError as e:
            self.s.rollback()
            logger.error("failed to update customer %s: %s", customer.customer_number, e)
            return Failure(FailureKind.REJECTED, f"Failed Update number {customer.customer_number}", e)
        if res.rowcount == 0:
            return Failure.not_found(f"No customer found with number {customer.customer_number}")
        return Success(message="Succes Update")

    def delete_by_customer_number(self, customer_number: int) -> Result[None]:
        stmt = delete(_customers).where(_customers.c.customer_number == customer_number)
        try:
            res = self.s.execute(stmt)
            self.s.commit()
        except SQLAlchemyError as e:
            self.s.rollback()
            logger.error("failed to delete customer %s: %s", customer_number, e)
            return Failure(FailureKind.STORAGE, f"Failed Delete number {customer_number}", e)
        if res.rowcount == 0:
            return Failure.not_found(f"No customer found with number {customer_number}")
        return Success(message="Succes Delete!!")
