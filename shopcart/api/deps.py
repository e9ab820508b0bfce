# shopcart/api/deps.py
from fastapi import Request

from shopcart.services.cart_store import CartStore


def get_cart_store(request: Request) -> CartStore:
    return request.app.state.cart_store
