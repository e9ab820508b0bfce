# shopcart/domain/results.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from shopcart.domain.schemas import Product

ADD_PRODUCT_ERROR = "Erro na adição do produto"
OUT_OF_STOCK = "Quantidade solicitada fora de estoque"
REMOVE_PRODUCT_ERROR = "Erro na remoção do produto"
UPDATE_AMOUNT_ERROR = "Erro na alteração de quantidade do produto"


class CartOutcome(str, Enum):
    OK = "ok"
    UNCHANGED = "unchanged"
    NOT_FOUND = "not_found"
    OUT_OF_STOCK = "out_of_stock"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class CartResult:
    """
    Wynik operacji na koszyku.
    cart - stan koszyka po operacji (kopia)
    message - tekst powiadomienia dla użytkownika, None gdy sukces lub cichy no-op
    """

    outcome: CartOutcome
    cart: List[Product] = field(default_factory=list)
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.outcome in (CartOutcome.OK, CartOutcome.UNCHANGED)
