from __future__ import annotations

from flask import Blueprint

from app.playground.db import db_session
from app.playground.modules.customers.repository import CustomerRepository
from app.playground.modules.customers.schemas import Customer
from app.playground.modules.customers.service import CustomerService
from app.playground.responses import decode_body, invalid_response, read_response, write_response
from app.playground.utils import parse_int_param

bp = Blueprint("customers", __name__)


def _service() -> CustomerService:
    return CustomerService(CustomerRepository(db_session()))


@bp.get("/customer")
def customers_get_all():
    result = _service().get_all()
    return read_response(result, "customer.get_all", lambda customers: [c.to_json() for c in customers])


@bp.get("/customer/<customer_number>")
def customers_get_by_number(customer_number: str):
    number, err = parse_int_param(customer_number, "customer_number")
    if err:
        return invalid_response(err, "customer.get_by_customer_number")
    result = _service().get_by_customer_number(number)
    return read_response(result, "customer.get_by_customer_number", Customer.to_json)


@bp.post("/customer")
def customers_insert():
    customer, error = decode_body(Customer.from_json, "customer.insert")
    if error:
        return error
    return write_response(_service().insert(customer), "customer.insert")


@bp.put("/customer")
def customers_update():
    customer, error = decode_body(Customer.from_json, "customer.update")
    if error:
        return error
    return write_response(_service().update(customer), "customer.update")


@bp.delete("/customer/<customer_number>")
def customers_delete(customer_number: str):
    number, err = parse_int_param(customer_number, "customer_number")
    if err:
        return invalid_response(err, "customer.delete_by_customer_number")
    return write_response(_service().delete_by_customer_number(number), "customer.delete_by_customer_number")
