"""
models used for testing
"""

from typing import Optional

from pydantic import BaseModel


class Person(BaseModel):
    name: str
    age: int


class Inner(BaseModel):
    value: int


class Outer(BaseModel):
    inner: Inner


class Contact(BaseModel):
    email: str
    phone: Optional[str] = None


class Address(BaseModel):
    street: str
    city: str
    zip_code: Optional[str] = None


class Customer(BaseModel):
    """
    A customer has an optional address and an arbitrary number of contacts.
    """

    name: str
    address: Optional[Address] = None
    contacts: list[Contact] = []
    tags: dict[str, str] = {}


class OrderLine(BaseModel):
    article: str
    quantity: int
    price: float


class Order(BaseModel):
    lines: list[OrderLine]

    def total(self) -> float:
        """the sum of all line prices times their quantity"""
        return sum(line.price * line.quantity for line in self.lines)
