import logging
from datetime import timedelta
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from auth import (
    auth_dependency,
    end_session,
    get_sessions,
    get_settings,
    get_storage,
    hash_password,
    optional_user,
    session_token,
    start_session,
    verify_password,
    SessionStore,
)
from cart import Cart
from config import LOGGING, Settings, settings as default_settings
from database import MemoryStorage, NotFoundError, new_id
from schemas import (
    Address, AddressCreate,
    Message,
    NewUser, PublicUser, User, UserCreate, UserLogin,
    Order, OrderCreate,
    Product,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# -------------------- Health --------------------

@router.get("/")
def read_root():
    return {"message": "Vastra Saree Store API is running"}


# -------------------- Auth --------------------

@router.post("/api/auth/register", status_code=201, response_model=PublicUser)
def register(
    payload: UserCreate,
    response: Response,
    previous_token: Optional[str] = Depends(session_token),
    storage: MemoryStorage = Depends(get_storage),
    sessions: SessionStore = Depends(get_sessions),
    settings: Settings = Depends(get_settings),
):
    if storage.users.get_by_email(payload.email):
        raise HTTPException(status_code=400, detail="Email already registered")
    pw_hash, salt = hash_password(payload.password, iterations=settings.PASSWORD_HASH_ITERATIONS)
    user = storage.users.create(NewUser(
        email=payload.email,
        password_hash=pw_hash,
        salt=salt,
        full_name=payload.full_name,
        phone=payload.phone,
    ))
    start_session(response, user, sessions, settings, previous=previous_token)
    logger.info("Registered user %s", user.id)
    return PublicUser.from_user(user)


@router.post("/api/auth/login", response_model=PublicUser)
def login(
    payload: UserLogin,
    response: Response,
    previous_token: Optional[str] = Depends(session_token),
    storage: MemoryStorage = Depends(get_storage),
    sessions: SessionStore = Depends(get_sessions),
    settings: Settings = Depends(get_settings),
):
    user = storage.users.get_by_email(payload.email)
    if not user or not verify_password(
        payload.password, user.salt, user.password_hash, settings.PASSWORD_HASH_ITERATIONS
    ):
        logger.info("Failed login attempt")
        raise HTTPException(status_code=401, detail="Invalid email or password")
    start_session(response, user, sessions, settings, previous=previous_token)
    return PublicUser.from_user(user)


@router.post("/api/auth/logout", response_model=Message)
def logout(
    response: Response,
    token: Optional[str] = Depends(session_token),
    sessions: SessionStore = Depends(get_sessions),
    settings: Settings = Depends(get_settings),
):
    end_session(response, token, sessions, settings)
    return Message(message="Logged out successfully")


@router.get("/api/auth/me", response_model=PublicUser)
def me(user: Optional[User] = Depends(optional_user)):
    if user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return PublicUser.from_user(user)


# -------------------- Addresses --------------------

@router.post("/api/addresses", status_code=201, response_model=Address)
def add_address(
    payload: AddressCreate,
    user: User = Depends(auth_dependency),
    storage: MemoryStorage = Depends(get_storage),
):
    return storage.users.add_address(user.id, payload)


@router.patch("/api/addresses/{address_id}", response_model=Address)
def update_address(
    address_id: str,
    payload: AddressCreate,
    user: User = Depends(auth_dependency),
    storage: MemoryStorage = Depends(get_storage),
):
    address = storage.users.update_address(user.id, address_id, payload)
    if not address:
        raise HTTPException(status_code=404, detail="Address not found")
    return address


@router.delete("/api/addresses/{address_id}", response_model=Message)
def delete_address(
    address_id: str,
    user: User = Depends(auth_dependency),
    storage: MemoryStorage = Depends(get_storage),
):
    if not storage.users.delete_address(user.id, address_id):
        raise HTTPException(status_code=404, detail="Address not found")
    return Message(message="Address deleted")


# -------------------- Products --------------------

@router.get("/api/products", response_model=List[Product])
def list_products(
    featured: bool = False,
    new: bool = False,
    category: Optional[str] = None,
    fabric: List[str] = Query([]),
    occasion: List[str] = Query([]),
    color: List[str] = Query([]),
    price: List[str] = Query([]),
    storage: MemoryStorage = Depends(get_storage),
):
    catalog = storage.catalog
    if featured:
        products = catalog.get_featured()
    elif new:
        products = catalog.get_new()
    elif category:
        products = catalog.get_by_category(category)
    else:
        products = catalog.get_all()
    try:
        return catalog.search(products, fabric=fabric, occasion=occasion, color=color, price=price)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/api/products/{product_id}", response_model=Product)
def get_product(product_id: str, storage: MemoryStorage = Depends(get_storage)):
    product = storage.catalog.get_by_id(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


# -------------------- Orders --------------------

@router.post("/api/orders", status_code=201, response_model=Order)
def create_order(
    payload: OrderCreate,
    user: User = Depends(auth_dependency),
    storage: MemoryStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    if payload.address_id:
        address = next((a for a in user.addresses if a.id == payload.address_id), None)
        if not address:
            raise HTTPException(status_code=400, detail="Address not found")
    elif payload.address:
        address = Address(id=new_id(), **payload.address.model_dump(exclude={"is_default"}))
    else:
        raise HTTPException(status_code=400, detail="Address required")

    if not payload.items:
        raise HTTPException(status_code=400, detail="Cart is empty")

    # Lines are priced from the catalog; client-sent prices and totals are ignored.
    cart = Cart(threshold=settings.FREE_SHIPPING_THRESHOLD, fee=settings.SHIPPING_FEE)
    for line in payload.items:
        product = storage.catalog.get_by_id(line.product_id)
        if not product:
            raise HTTPException(status_code=400, detail=f"Invalid product {line.product_id}")
        if not product.in_stock:
            raise HTTPException(status_code=400, detail=f"{product.name} is out of stock")
        cart.add(product, line.quantity)

    subtotal = cart.subtotal
    shipping = cart.shipping
    if payload.subtotal is not None and payload.subtotal != subtotal:
        logger.warning("Client subtotal %s differs from catalog subtotal %s for user %s",
                       payload.subtotal, subtotal, user.id)

    order = storage.orders.create(user.id, cart.order_items(), address, subtotal, shipping)
    logger.info("Order %s placed by user %s (total %s)", order.id, user.id, order.total)
    return order


@router.get("/api/orders", response_model=List[Order])
def list_orders(user: User = Depends(auth_dependency), storage: MemoryStorage = Depends(get_storage)):
    return storage.orders.get_by_user(user.id)


@router.get("/api/orders/{order_id}", response_model=Order)
def get_order(order_id: str, user: User = Depends(auth_dependency), storage: MemoryStorage = Depends(get_storage)):
    order = storage.orders.get_by_id(order_id)
    if not order or order.user_id != user.id:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


# -------------------- Error handlers --------------------

async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid input", "errors": jsonable_encoder(exc.errors())},
    )


async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=404, content={"message": str(exc)})


async def internal_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# -------------------- App --------------------

def create_app(
    storage: Optional[MemoryStorage] = None,
    sessions: Optional[SessionStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title=settings.APP_NAME)

    app.state.settings = settings
    app.state.storage = storage if storage is not None else MemoryStorage()
    app.state.sessions = sessions if sessions is not None else SessionStore(
        ttl=timedelta(days=settings.SESSION_TTL_DAYS)
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(Exception, internal_error_handler)
    app.include_router(router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=default_settings.PORT, log_config=LOGGING)
