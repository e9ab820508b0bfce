# shopcart/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, TypeAdapter
from typing import List


class Product(BaseModel):
    """Pozycja koszyka. Pola wyświetlane (title, price, image) są dla koszyka nieprzezroczyste."""

    id: int
    title: str | None = None
    price: float | None = None
    image: str | None = None
    amount: int = Field(0, ge=0, description="Ilość w koszyku")

    # katalog może zwrócić więcej pól, przechowujemy je bez zmian
    model_config = ConfigDict(extra="allow")


class Stock(BaseModel):
    """Stan magazynowy produktu z zewnętrznego serwisu."""

    id: int
    amount: int = Field(..., ge=0)


Cart = List[Product]

cart_adapter = TypeAdapter(Cart)


class AddItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, description="ID produktu (musi być > 0)")


class UpdateAmountIn(BaseModel):
    """Schema dla zmiany ilości. amount <= 0 jest ignorowane przez koszyk."""

    amount: int


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    items: List[Product]
    outcome: str
