# storefront/api/routers/checkout.py
from fastapi import APIRouter, Depends, HTTPException

from storefront.api.deps import get_order_service
from storefront.domain.errors import (
    CheckoutInProgressError,
    EmptyCartError,
    SimulatedOrderError,
    ValidationError,
)
from storefront.domain.schemas import OrderForm, OrderResult, ValidationErrorsOut
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.post("/validate", response_model=ValidationErrorsOut)
def validate_form(form: OrderForm, svc: OrderService = Depends(get_order_service)):
    return {"errors": svc.validate(form)}


@router.post("", response_model=OrderResult, status_code=201)
def place_order(form: OrderForm, svc: OrderService = Depends(get_order_service)):
    """
    Places the simulated order and clears the cart.
    Field errors come back as 422 with the per-field messages.
    """
    try:
        return svc.place_order(form)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail={"errors": e.errors})
    except (EmptyCartError, CheckoutInProgressError) as e:
        raise HTTPException(status_code=409, detail=str(e))
    except SimulatedOrderError as e:
        raise HTTPException(status_code=503, detail={"message": str(e), "retryable": True})
