"""
Schemas for the Vastra saree storefront

Records are kept in memory by ``database.MemoryStorage``. Every model serializes
with camelCase keys (e.g. ``address_line1`` -> "addressLine1") and accepts either
form on input. Embedded models (addresses, order items) live inside their owners.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ------------ Products ------------
class Product(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: float = Field(..., gt=0, description="Price in INR")
    original_price: Optional[float] = Field(None, gt=0, description="Pre-discount price")
    images: List[str] = Field(default_factory=list, description="List of product image URLs")
    category: str = Field(..., description="e.g. 'Silk', 'Cotton', 'Designer'")
    fabric: str
    occasion: str
    color: str
    in_stock: bool = True
    is_new: Optional[bool] = None
    is_featured: Optional[bool] = None


# ------------ Addresses ------------
class AddressCreate(CamelModel):
    full_name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=10)
    address_line1: str = Field(..., min_length=1)
    address_line2: Optional[str] = None
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    pincode: str = Field(..., min_length=6, max_length=6)
    is_default: Optional[bool] = None

    @field_validator("address_line2")
    @classmethod
    def blank_line2_is_absent(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class Address(AddressCreate):
    id: str
    is_default: bool = False


# ------------ Auth & User ------------
class UserCreate(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    full_name: str = Field(..., min_length=1)
    phone: Optional[str] = None


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class NewUser(CamelModel):
    """What the user store needs to create a record; the password is already hashed."""
    email: str
    password_hash: str
    salt: str
    full_name: str
    phone: Optional[str] = None


class User(NewUser):
    id: str
    addresses: List[Address] = Field(default_factory=list)


class PublicUser(CamelModel):
    id: str
    email: str
    full_name: str
    phone: Optional[str] = None
    addresses: List[Address] = Field(default_factory=list)

    @classmethod
    def from_user(cls, user: User) -> "PublicUser":
        return cls(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            phone=user.phone,
            addresses=user.addresses,
        )


# ------------ Orders ------------
class OrderItem(CamelModel):
    product_id: str
    name: str
    price: float
    quantity: int = Field(..., ge=1)
    image: str = ""


class OrderLine(CamelModel):
    product_id: str
    quantity: int = Field(..., ge=1)


class OrderCreate(CamelModel):
    items: List[OrderLine]
    address_id: Optional[str] = None
    address: Optional[AddressCreate] = None
    # Sent by the storefront client; totals are recomputed server-side.
    subtotal: Optional[float] = None
    shipping: Optional[float] = None


class ShippingAddress(CamelModel):
    id: str
    full_name: str
    phone: str
    address_line1: str
    address_line2: Optional[str] = None
    city: str
    state: str
    pincode: str


OrderStatus = Literal["pending", "confirmed", "shipped", "delivered"]


class Order(CamelModel):
    id: str
    user_id: str
    items: List[OrderItem]
    shipping_address: ShippingAddress
    subtotal: float = Field(..., ge=0)
    shipping: float = Field(..., ge=0)
    total: float = Field(..., ge=0)
    status: OrderStatus = "confirmed"
    created_at: datetime


# ------------ Misc ------------
class Message(BaseModel):
    message: str
