# shopcart/api/routers/cart.py
from fastapi import APIRouter, Depends, HTTPException

from shopcart.api.deps import get_cart_store
from shopcart.domain.results import CartOutcome, CartResult
from shopcart.domain.schemas import AddItemIn, CartOut, UpdateAmountIn
from shopcart.services.cart_store import CartStore

router = APIRouter(prefix="/cart", tags=["cart"])

_STATUS = {
    CartOutcome.NOT_FOUND: 404,
    CartOutcome.OUT_OF_STOCK: 409,
    CartOutcome.UNEXPECTED: 502,
}


def _to_response(result: CartResult) -> CartOut:
    if not result.ok:
        raise HTTPException(status_code=_STATUS[result.outcome], detail=result.message)
    return CartOut(items=result.cart, outcome=result.outcome.value)


@router.get("", response_model=CartOut)
def get_cart(store: CartStore = Depends(get_cart_store)):
    return CartOut(items=store.cart, outcome=CartOutcome.UNCHANGED.value)


@router.post("/items", response_model=CartOut)
async def add_item(payload: AddItemIn, store: CartStore = Depends(get_cart_store)):
    result = await store.add_product(payload.product_id)
    return _to_response(result)


@router.put("/items/{product_id}", response_model=CartOut)
async def update_item(
    product_id: int,
    payload: UpdateAmountIn,
    store: CartStore = Depends(get_cart_store),
):
    result = await store.update_product_amount(product_id, payload.amount)
    return _to_response(result)


@router.delete("/items/{product_id}", response_model=CartOut)
async def remove_item(product_id: int, store: CartStore = Depends(get_cart_store)):
    result = await store.remove_product(product_id)
    return _to_response(result)
