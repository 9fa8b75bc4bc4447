"""Order Routes — CRUD over /api/v1/orders, all behind the session gate.

Invariants:
    - Every route depends on require_session: no cookie or dead session → 401
    - POST → 201 with the stored order (id filled in when blank)
    - GET list → 200 with a JSON array (empty array when there are none)
    - GET/PUT/DELETE on an unknown id → 404; duplicate POST id → 409
    - PUT uses the path id; DELETE → 204 with no body

Design Decisions:
    - Status mapping lives in the error hierarchy (http_status), not in the routes
"""

from fastapi import APIRouter, Depends, status

from orderflow.api.dependencies import get_order_service, require_session
from orderflow.core.domain_types import AuthenticatedUser
from orderflow.schemas.order import OrderCreate, OrderResponse, OrderUpdate
from orderflow.services.order_service import OrderService

router = APIRouter(prefix="/api/v1/orders", tags=["orders"])


@router.post(
    "", response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_order(
    body: OrderCreate,
    user: AuthenticatedUser = Depends(require_session),
    service: OrderService = Depends(get_order_service),
):
    """Create an order. A blank id is assigned by the server."""
    order = await service.create_order(
        user, item=body.item, quantity=body.quantity, order_id=body.id,
    )
    return OrderResponse.model_validate(order)


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    user: AuthenticatedUser = Depends(require_session),
    service: OrderService = Depends(get_order_service),
):
    """List all orders (order unspecified)."""
    orders = await service.list_orders(user)
    return [OrderResponse.model_validate(o) for o in orders]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    user: AuthenticatedUser = Depends(require_session),
    service: OrderService = Depends(get_order_service),
):
    """Get one order by id."""
    order = await service.get_order(user, order_id)
    return OrderResponse.model_validate(order)


@router.put("/{order_id}", response_model=OrderResponse)
async def update_order(
    order_id: str,
    body: OrderUpdate,
    user: AuthenticatedUser = Depends(require_session),
    service: OrderService = Depends(get_order_service),
):
    """Replace an existing order's item and quantity."""
    order = await service.update_order(
        user, order_id, item=body.item, quantity=body.quantity,
    )
    return OrderResponse.model_validate(order)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
    order_id: str,
    user: AuthenticatedUser = Depends(require_session),
    service: OrderService = Depends(get_order_service),
):
    """Delete an order."""
    await service.delete_order(user, order_id)
