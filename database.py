"""
In-memory storage for the storefront.

``MemoryStorage`` bundles the catalog, user and order stores. The app builds
one instance at startup and hands it to request handlers through FastAPI
dependencies; nothing here is module-global. Everything is lost on restart
except the catalog, which reseeds.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from bson import ObjectId

from schemas import (
    Address,
    AddressCreate,
    NewUser,
    Order,
    OrderItem,
    Product,
    ShippingAddress,
    User,
)
from seed_data import SAMPLE_PRODUCTS

logger = logging.getLogger(__name__)


class StorageError(Exception):
    pass


class NotFoundError(StorageError):
    pass


def new_id() -> str:
    return str(ObjectId())


# -------------------- Catalog --------------------

PriceBand = Tuple[float, Optional[float]]


def parse_price_band(value: str) -> PriceBand:
    """Parse "2000-5000" or "10000+" into (low, high); high is exclusive, None is open."""
    raw = value.strip()
    try:
        if raw.endswith("+"):
            return float(raw[:-1]), None
        low, high = raw.split("-", 1)
        low_f, high_f = float(low), float(high)
    except ValueError:
        raise ValueError(f"Invalid price range: {value!r}")
    if high_f <= low_f:
        raise ValueError(f"Invalid price range: {value!r}")
    return low_f, high_f


def _matches_any(field: str, wanted: Sequence[str]) -> bool:
    if not wanted:
        return True
    field = field.lower()
    return any(w.lower() in field for w in wanted)


def _in_any_band(price: float, bands: Sequence[PriceBand]) -> bool:
    if not bands:
        return True
    return any(price >= low and (high is None or price < high) for low, high in bands)


class CatalogStore:
    """Read-only product catalog, seeded once."""

    def __init__(self, products: Iterable[dict]):
        self._products: Dict[str, Product] = {}
        for data in products:
            product = data if isinstance(data, Product) else Product.model_validate(data)
            self._products[product.id] = product

    def get_all(self) -> List[Product]:
        return list(self._products.values())

    def get_by_id(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    def get_featured(self) -> List[Product]:
        return [p for p in self._products.values() if p.is_featured]

    def get_new(self) -> List[Product]:
        return [p for p in self._products.values() if p.is_new]

    def get_by_category(self, category: str) -> List[Product]:
        category = category.lower()
        return [p for p in self._products.values() if p.category.lower() == category]

    def search(
        self,
        products: Optional[List[Product]] = None,
        category: Sequence[str] = (),
        fabric: Sequence[str] = (),
        occasion: Sequence[str] = (),
        color: Sequence[str] = (),
        price: Sequence[str] = (),
    ) -> List[Product]:
        """Faceted filter; facets AND together, values inside a facet OR together."""
        if products is None:
            products = self.get_all()
        bands = [parse_price_band(p) for p in price]
        return [
            p for p in products
            if _matches_any(p.category, category)
            and _matches_any(p.fabric, fabric)
            and _matches_any(p.occasion, occasion)
            and _matches_any(p.color, color)
            and _in_any_band(p.price, bands)
        ]


# -------------------- Users & addresses --------------------

def _settle_default(addresses: List[Address], preferred: Optional[str] = None) -> None:
    """Leave exactly one default in a non-empty list, favouring ``preferred``."""
    if preferred is not None:
        for a in addresses:
            a.is_default = a.id == preferred
        return
    defaults = [a for a in addresses if a.is_default]
    if not defaults and addresses:
        addresses[0].is_default = True
    for extra in defaults[1:]:
        extra.is_default = False


class UserStore:
    def __init__(self):
        self._users: Dict[str, User] = {}
        self._ids_by_email: Dict[str, str] = {}

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        user_id = self._ids_by_email.get(email.lower())
        return self._users.get(user_id) if user_id else None

    def create(self, data: NewUser) -> User:
        user = User(id=new_id(), addresses=[], **data.model_dump())
        self._users[user.id] = user
        self._ids_by_email[user.email.lower()] = user.id
        logger.debug("Created user %s", user.id)
        return user

    def _require(self, user_id: str) -> User:
        user = self._users.get(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def add_address(self, user_id: str, data: AddressCreate) -> Address:
        user = self._require(user_id)
        address = Address(id=new_id(), **data.model_dump(exclude={"is_default"}))
        user.addresses.append(address)
        preferred = address.id if len(user.addresses) == 1 or data.is_default else None
        _settle_default(user.addresses, preferred)
        return address

    def update_address(self, user_id: str, address_id: str, data: AddressCreate) -> Optional[Address]:
        """Replace an address in place. An unset ``is_default`` keeps the current flag."""
        user = self._require(user_id)
        for index, current in enumerate(user.addresses):
            if current.id == address_id:
                break
        else:
            return None

        is_default = current.is_default if data.is_default is None else data.is_default
        updated = Address(
            id=address_id,
            is_default=is_default,
            **data.model_dump(exclude={"is_default"}),
        )
        user.addresses[index] = updated
        _settle_default(user.addresses, address_id if data.is_default else None)
        return updated

    def delete_address(self, user_id: str, address_id: str) -> bool:
        user = self._require(user_id)
        remaining = [a for a in user.addresses if a.id != address_id]
        if len(remaining) == len(user.addresses):
            return False
        user.addresses = remaining
        _settle_default(user.addresses)
        return True


# -------------------- Orders --------------------

class OrderStore:
    def __init__(self):
        self._orders: Dict[str, Order] = {}

    def create(
        self,
        user_id: str,
        items: List[OrderItem],
        address: Address,
        subtotal: float,
        shipping: float,
    ) -> Order:
        order = Order(
            id=new_id(),
            user_id=user_id,
            items=[item.model_copy(deep=True) for item in items],
            shipping_address=ShippingAddress.model_validate(
                address.model_dump(exclude={"is_default"})
            ),
            subtotal=subtotal,
            shipping=shipping,
            total=subtotal + shipping,
            status="confirmed",
            created_at=datetime.now(timezone.utc),
        )
        self._orders[order.id] = order
        return order

    def get_by_id(self, order_id: str) -> Optional[Order]:
        return self._orders.get(order_id)

    def get_by_user(self, user_id: str) -> List[Order]:
        return [o for o in self._orders.values() if o.user_id == user_id]


class MemoryStorage:
    def __init__(self, products: Optional[Iterable[dict]] = None):
        self.catalog = CatalogStore(SAMPLE_PRODUCTS if products is None else products)
        self.users = UserStore()
        self.orders = OrderStore()
