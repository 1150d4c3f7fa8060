from fastapi import APIRouter

from .auth import auth_router
from .credit_limit import credit_limit_router
from .customer import customer_router
from .health import health_router
from .transaction import transaction_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(auth_router, tags=["Auth"])
router.include_router(customer_router, tags=["Customer"])
router.include_router(credit_limit_router, tags=["Credit Limits"])
router.include_router(transaction_router, tags=["Transactions"])
